"""
Main entry point for playing par in a terminal.

Usage:
    python -m src.main config.yaml
    python -m src.main --words dictionary.txt --state state/par.json --verbose
"""

import argparse
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

import yaml

from .game import GameConfig, GameSession, Scheduler, SnapshotStore
from .verifiers import load_lexicon, render_grid


HELP_TEXT = """Commands:
  <i> [<j> ...]   select cells 0-24 (five cells submit a word; two swap in hard mode)
  b               backspace
  c               clear selection
  show            print the board
  reset           start the day over
  mode            toggle standard / hard mode
  quit            exit"""


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def describe(session: GameSession) -> str:
    """Board plus the status line."""
    label = "SWAPS" if session.mode == "hard" else "SCORE"
    locked = session.locked_indices if session.mode == "standard" else ()
    grid = render_grid(session.letters, locked=locked, selected=session.selected_indices)
    status = f"[{session.mode}] {label}: {session.score}"
    if session.is_complete:
        status += "  COMPLETE!"
    return f"{grid}\n{status}"


def run_command(
    session: GameSession,
    scheduler: Scheduler,
    command: str,
    wait: Callable[[float], None] = time.sleep,
) -> List[str]:
    """
    Apply one line of player input.

    Args:
        session: The session being played
        scheduler: Clock driving Hard Mode exchanges
        command: Raw input line
        wait: Called with the exchange delay before the clock is advanced

    Returns:
        Lines to show the player
    """
    command = command.strip().lower()
    output: List[str] = []

    if not command:
        return output
    if command in ("h", "help", "?"):
        return [HELP_TEXT]
    if command == "show":
        return [describe(session)]
    if command == "b":
        session.backspace()
        return [describe(session)]
    if command == "c":
        session.clear_selection()
        return [describe(session)]
    if command == "reset":
        session.reset()
        return ["Progress reset.", describe(session)]
    if command == "mode":
        mode = session.toggle_mode()
        return [f"Switched to {mode} mode.", describe(session)]

    try:
        indices = [int(token) for token in command.replace(",", " ").split()]
    except ValueError:
        return [f"Unknown command: {command!r} (type 'help')"]

    for index in indices:
        if not session.select_cell(index):
            output.append(f"Cell {index} can't be selected.")
            continue

        if session.mode == "hard" and len(session.selected_indices) == 2:
            output.append(describe(session))
            wait(session.swap_delay)
            scheduler.advance(session.swap_delay)
        elif session.mode == "standard" and len(session.selected_indices) == 5:
            output.extend(_submit(session))

    output.append(describe(session))
    return output


def _submit(session: GameSession) -> List[str]:
    result = session.submit()
    if result is None:
        return []
    session.clear_selection()
    if result.success:
        lines = [f"✓ {result.word}"]
        if result.is_complete:
            lines.append(f"*** COMPLETE! SCORE: {session.score} ***")
        return lines
    return [f"✗ {result.word}: {result.message}"]


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Play the daily par puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  word_list: dictionary.txt
  common_fraction: 0.25
  swap_delay: 0.5
  state_path: state/par.json
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--words", "-w",
        help="Path to the word list (overrides config)"
    )
    parser.add_argument(
        "--date",
        help="Puzzle date as YYYY-MM-DD (default: today)"
    )
    parser.add_argument(
        "--state",
        help="Path to the saved-progress JSON file (overrides config)"
    )
    parser.add_argument(
        "--hard",
        action="store_true",
        help="Start in hard mode"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print setup details to stdout"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else GameConfig()
        overrides = {
            "word_list": args.words,
            "date": args.date,
            "state_path": args.state,
            "mode": "hard" if args.hard else None,
        }
        config = GameConfig(**{
            **config.model_dump(),
            **{k: v for k, v in overrides.items() if v is not None},
        })
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        lexicon = load_lexicon(config.word_list, config.common_fraction)
    except Exception as e:
        print(f"Error loading word list: {e}", file=sys.stderr)
        return 1

    today = config.date or datetime.now().strftime("%Y-%m-%d")
    store = SnapshotStore(config.state_path) if config.state_path else None
    scheduler = Scheduler()

    session = GameSession(mode=config.mode, swap_delay=config.swap_delay, scheduler=scheduler)
    session.start(lexicon, today, snapshot=store.read() if store else None)
    if store:
        session.on_change = store.write

    if args.verbose:
        print(f"Word list: {config.word_list} ({len(lexicon)} words, {len(lexicon.common_words)} common)")
        print(f"Puzzle: {today}")
        if store:
            print(f"State: {store.path}")
        print()

    print(HELP_TEXT)
    print()
    print(describe(session))

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if line.strip().lower() in ("q", "quit", "exit"):
            break

        for text in run_command(session, scheduler, line):
            print(text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
