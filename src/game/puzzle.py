import random
from typing import List, Sequence

from .models import Puzzle
from ..verifiers.grid import CELL_COUNT, WORD_LENGTH


# Letter used to fill the grid when no playable puzzle can be built
PLACEHOLDER_LETTER = "A"

# Words whose letters make up one puzzle
SEED_WORD_COUNT = CELL_COUNT // WORD_LENGTH


def generate_puzzle(date: str, common_words: Sequence[str]) -> Puzzle:
    """
    Build the puzzle for a calendar date.

    The generator is seeded from the date string alone, so every player
    gets the same grid for the same day and word list.

    Args:
        date: Date string, e.g. "2026-10-18"
        common_words: Pool of common words to draw seed words from

    Returns:
        The day's Puzzle. If fewer than five common words are available,
        a placeholder puzzle of identical letters with no seed words.
    """
    if len(common_words) < SEED_WORD_COUNT:
        return Puzzle(id=date, letters=[PLACEHOLDER_LETTER] * CELL_COUNT, seed_words=[])

    rng = random.Random(date)

    seed_words = pick_seed_words(rng, common_words)
    letters = [char for word in seed_words for char in word.upper()]
    shuffle_letters(rng, letters)

    return Puzzle(id=date, letters=letters, seed_words=seed_words)


def pick_seed_words(rng: random.Random, words: Sequence[str]) -> List[str]:
    """Sample the seed words uniformly, with replacement, in draw order."""
    return [words[int(rng.random() * len(words))] for _ in range(SEED_WORD_COUNT)]


def shuffle_letters(rng: random.Random, letters: List[str]) -> None:
    """Fisher-Yates shuffle in place, one draw per position from the end."""
    for i in range(len(letters) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        letters[i], letters[j] = letters[j], letters[i]
