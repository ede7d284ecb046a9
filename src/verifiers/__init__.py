"""Word verification and letter accounting for par."""

from .verify import (
    letter_counts,
    check_word,
    validate_submission,
    verify_submission,
    calculate_letter_usage,
    invalid_rows,
)
from .models import (
    ValidationError,
    ValidationResult,
    LetterUsage,
    TOO_SHORT,
    NOT_IN_DICTIONARY,
    ALREADY_USED,
    BOARD_MISMATCH,
)
from .grid import GRID_SIZE, WORD_LENGTH, CELL_COUNT, row_indices, split_rows, render_grid
from .data import Lexicon, build_lexicon, load_lexicon

__all__ = [
    # Verification
    "letter_counts",
    "check_word",
    "validate_submission",
    "verify_submission",
    "calculate_letter_usage",
    "invalid_rows",
    # Models
    "ValidationError",
    "ValidationResult",
    "LetterUsage",
    "TOO_SHORT",
    "NOT_IN_DICTIONARY",
    "ALREADY_USED",
    "BOARD_MISMATCH",
    # Grid utilities
    "GRID_SIZE",
    "WORD_LENGTH",
    "CELL_COUNT",
    "row_indices",
    "split_rows",
    "render_grid",
    # Dictionary
    "Lexicon",
    "build_lexicon",
    "load_lexicon",
]
