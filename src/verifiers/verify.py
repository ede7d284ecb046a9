"""
Submission verification and letter accounting.

Validates:
1. Word length (exactly five letters)
2. Dictionary membership (full accepted-word set)
3. Repeats (a word string may be accepted once per session)
4. Board inventory (the word's letter multiset must fit the live board)
"""

from collections import Counter
from typing import Collection, Dict, Iterable, List, Sequence

from .models import (
    ValidationError,
    ValidationResult,
    LetterUsage,
    TOO_SHORT,
    NOT_IN_DICTIONARY,
    ALREADY_USED,
    BOARD_MISMATCH,
)
from .grid import CELL_COUNT, WORD_LENGTH, split_rows


def letter_counts(letters: Iterable[str]) -> Counter:
    """Per-letter multiset count."""
    return Counter(letters)


def check_word(word: str, words: Collection[str]) -> bool:
    """Returns True if `word` is in the accepted-word set."""
    return word.upper() in words


def validate_submission(word: str, board_letters: Sequence[str]) -> ValidationResult:
    """
    Check that the board's letter inventory can supply `word`.

    This is a pure multiset-subset check: it never looks at which cells
    would be used, only at how many of each letter the board holds.
    """
    board_counts = letter_counts(board_letters)
    word_counts = letter_counts(word)

    for char, needed in word_counts.items():
        have = board_counts.get(char, 0)
        if needed > have:
            return ValidationResult(
                valid=False,
                word=word,
                errors=[ValidationError(
                    code=BOARD_MISMATCH,
                    message=f"Board missing {char} (Need {needed}, Have {have})",
                    word=word,
                )],
            )

    return ValidationResult(valid=True, word=word)


def verify_submission(
    word: str,
    board_letters: Sequence[str],
    words: Collection[str],
    submitted: Collection[str],
) -> ValidationResult:
    """
    Run the full submit-time check chain on a candidate word.

    Checks stop at the first failure, in the order: length, dictionary,
    repeat, board inventory.

    Args:
        word: Candidate word read from the live board
        board_letters: Current board letters
        words: Full accepted-word set
        submitted: Words already accepted this session

    Returns:
        ValidationResult carrying at most one error
    """
    word = word.upper()

    if len(word) != WORD_LENGTH:
        return ValidationResult(valid=False, word=word, errors=[ValidationError(
            code=TOO_SHORT,
            message=f"'{word}' is not {WORD_LENGTH} letters",
            word=word,
        )])

    if not check_word(word, words):
        return ValidationResult(valid=False, word=word, errors=[ValidationError(
            code=NOT_IN_DICTIONARY,
            message=f"'{word}' is not a valid dictionary word",
            word=word,
        )])

    if word in submitted:
        return ValidationResult(valid=False, word=word, errors=[ValidationError(
            code=ALREADY_USED,
            message=f"'{word}' has already been used",
            word=word,
        )])

    return validate_submission(word, board_letters)


def calculate_letter_usage(
    puzzle_letters: Sequence[str],
    submitted_words: Sequence[str],
) -> LetterUsage:
    """
    Compute captured letters, score and completion for accepted words.

    A letter used more often than the puzzle holds it only counts up to
    the puzzle's supply, so over-use never inflates completion.
    """
    puzzle_counts = letter_counts(puzzle_letters)
    used_counts: Dict[str, int] = {}
    score = 0

    for word in submitted_words:
        for char in word:
            used_counts[char] = used_counts.get(char, 0) + 1
        score += len(word)

    captured_counts = {
        char: min(used, puzzle_counts.get(char, 0))
        for char, used in used_counts.items()
    }

    return LetterUsage(
        puzzle_counts=dict(puzzle_counts),
        used_counts=used_counts,
        captured_counts=captured_counts,
        score=score,
        is_complete=sum(captured_counts.values()) == CELL_COUNT,
    )


def invalid_rows(letters: Sequence[str], words: Collection[str]) -> List[int]:
    """Row numbers whose five letters do not form an accepted word."""
    return [
        row for row, text in enumerate(split_rows(letters))
        if not check_word(text, words)
    ]
