"""
Word source for the daily puzzle.

The word list is a newline-separated file ranked by frequency, most
common first. Every five-letter alphabetic token is accepted for play;
the top slice of the ranking (backfilled so each letter A-Z appears at
least once) is the pool puzzles are generated from.
"""

import math
import re
import string
from pathlib import Path
from typing import FrozenSet, Iterable, List, Tuple
from pydantic import BaseModel, ConfigDict, Field

from ..grid import WORD_LENGTH


ALPHABET = string.ascii_uppercase
COMMON_FRACTION = 0.25

_WORD_RE = re.compile(rf'^[A-Z]{{{WORD_LENGTH}}}$')


class Lexicon(BaseModel):
    """Full accepted-word set plus the ranked common subset."""

    model_config = ConfigDict(frozen=True)

    all_words: FrozenSet[str] = Field(default_factory=frozenset)
    common_words: Tuple[str, ...] = ()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.upper() in self.all_words

    def __len__(self) -> int:
        return len(self.all_words)


def parse_word_lines(lines: Iterable[str]) -> List[str]:
    """Normalize raw lines to unique uppercase five-letter words, keeping rank order."""
    words: List[str] = []
    seen = set()
    for line in lines:
        word = line.strip().upper()
        if not _WORD_RE.match(word) or word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def select_common_words(ranked: List[str], fraction: float = COMMON_FRACTION) -> List[str]:
    """
    Pick the common-word pool from a frequency-ranked list.

    Args:
        ranked: Words ordered most common first
        fraction: Share of the ranking taken as common

    Returns:
        The top slice, followed by one backfilled word for each letter
        the slice does not cover (the highest ranked word containing it).
        A word backfilled for several letters appears once per letter,
        which weights it accordingly when puzzles are sampled.
    """
    cutoff = math.ceil(len(ranked) * fraction)
    common = ranked[:cutoff]
    remainder = ranked[cutoff:]

    present = set(''.join(common))
    for char in ALPHABET:
        if char in present:
            continue
        found = next((w for w in remainder if char in w), None)
        if found is not None:
            common.append(found)

    return common


def build_lexicon(lines: Iterable[str], common_fraction: float = COMMON_FRACTION) -> Lexicon:
    """Build a Lexicon from an iterator of word-list lines."""
    ranked = parse_word_lines(lines)
    return Lexicon(
        all_words=frozenset(ranked),
        common_words=tuple(select_common_words(ranked, common_fraction)),
    )


def load_lexicon(path: str | Path, common_fraction: float = COMMON_FRACTION) -> Lexicon:
    """
    Load a Lexicon from a word-list file.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    with open(path, encoding="utf-8") as f:
        return build_lexicon(f, common_fraction)


def extract_raw_words(lines: Iterable[str]) -> List[str]:
    """Pull five-letter words out of a tab-separated frequency list (word in column one)."""
    words: List[str] = []
    for line in lines:
        if not line.strip():
            continue
        word = line.strip().split('\t')[0]
        if len(word) == WORD_LENGTH and word.isascii() and word.isalpha():
            words.append(word.upper())
    return words
