"""Data models for submission verification."""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


# Error codes reported back to the player
TOO_SHORT = "TOO_SHORT"
NOT_IN_DICTIONARY = "NOT_IN_DICTIONARY"
ALREADY_USED = "ALREADY_USED"
BOARD_MISMATCH = "BOARD_MISMATCH"


class ValidationError(BaseModel):
    """A single validation error."""
    code: str
    message: str
    word: Optional[str] = None


class ValidationResult(BaseModel):
    """Result of checking a candidate word."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    word: Optional[str] = None

    @property
    def error(self) -> Optional[str]:
        """Code of the first error, or None if the word passed."""
        return self.errors[0].code if self.errors else None


class LetterUsage(BaseModel):
    """Letter accounting for a sequence of accepted words."""
    puzzle_counts: Dict[str, int] = Field(default_factory=dict)
    used_counts: Dict[str, int] = Field(default_factory=dict)
    captured_counts: Dict[str, int] = Field(default_factory=dict)
    score: int = 0
    is_complete: bool = False

    @property
    def total_captured(self) -> int:
        return sum(self.captured_counts.values())
