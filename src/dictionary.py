"""
Standalone CLI for building the game's word list from a raw frequency list.

Usage:
    python -m src.dictionary raw_source_dict.txt
    python -m src.dictionary raw_source_dict.txt --output dictionary.txt
"""

import argparse
import sys
from pathlib import Path

from .verifiers.data import extract_raw_words


def main():
    parser = argparse.ArgumentParser(
        description="Filter a tab-separated frequency list down to five-letter words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src.dictionary raw_source_dict.txt
  python -m src.dictionary raw_source_dict.txt --output public/dictionary.txt
        """
    )
    parser.add_argument(
        "raw",
        help="Path to the raw list (word in the first tab-separated column, most frequent first)"
    )
    parser.add_argument(
        "--output", "-o",
        default="dictionary.txt",
        help="Output path for the word list (default: dictionary.txt)"
    )

    args = parser.parse_args()

    raw_path = Path(args.raw)
    if not raw_path.exists():
        print(f"Error: Raw list not found: {args.raw}", file=sys.stderr)
        sys.exit(1)

    try:
        with open(raw_path, encoding="utf-8") as f:
            lines = f.read().split('\n')
        print(f"Raw lines: {len(lines)}")

        words = extract_raw_words(lines)
        print(f"Filtered 5-letter words: {len(words)}")

        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write('\n'.join(words))
        print(f"Wrote to {output_path}")
    except Exception as e:
        print(f"Error processing dictionary: {e}", file=sys.stderr)
        sys.exit(1)

    return 0


if __name__ == "__main__":
    sys.exit(main())
