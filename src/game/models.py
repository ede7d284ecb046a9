"""
Pydantic models for the game layer.

This module contains the data models (puzzle, board, submissions, results,
snapshots, configuration) used throughout the game layer. The logic lives
in the puzzle, board, session and hard_mode modules.
"""

from typing import List, Optional, Literal, Sequence
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

from ..verifiers.grid import CELL_COUNT, WORD_LENGTH


# Type aliases
Mode = Literal["standard", "hard"]
Status = Literal["loading", "ready", "complete"]
CellState = Literal["available", "selected", "locked"]


def _check_letters(letters: List[str]) -> List[str]:
    if len(letters) != CELL_COUNT:
        raise ValueError(f"Expected {CELL_COUNT} letters, got {len(letters)}")
    for char in letters:
        if len(char) != 1 or not ('A' <= char <= 'Z'):
            raise ValueError(f"Invalid letter {char!r}")
    return letters


class Puzzle(BaseModel):
    """The daily letter bag and the words it was built from."""
    model_config = ConfigDict(frozen=True)

    id: str
    letters: List[str]
    seed_words: List[str] = Field(default_factory=list)

    @field_validator("letters")
    @classmethod
    def check_letters(cls, letters: List[str]) -> List[str]:
        return _check_letters(letters)


class Board(BaseModel):
    """
    Current arrangement of the puzzle's letters.

    Attributes:
        letters: Letter in each of the 25 visual cells
        original_index: Puzzle slot currently shown in each cell
    """
    model_config = ConfigDict(populate_by_name=True)

    letters: List[str]
    original_index: List[int] = Field(alias="originalIndex")

    @field_validator("letters")
    @classmethod
    def check_letters(cls, letters: List[str]) -> List[str]:
        return _check_letters(letters)

    @model_validator(mode="after")
    def check_permutation(self) -> "Board":
        if sorted(self.original_index) != list(range(CELL_COUNT)):
            raise ValueError("original_index must be a permutation of 0-24")
        return self

    @classmethod
    def identity(cls, letters: Sequence[str]) -> "Board":
        """Board showing the puzzle letters in generation order."""
        return cls(letters=list(letters), original_index=list(range(len(letters))))


class RowCommit(BaseModel):
    """Outcome of committing a submission into a row."""
    board: Board
    destination_indices: List[int]


class Submission(BaseModel):
    """An accepted word and the cells that now hold it."""
    word: str = Field(..., pattern=r'^[A-Z]+$')
    source_indices: List[int] = Field(..., min_length=WORD_LENGTH, max_length=WORD_LENGTH)


class SubmitResult(BaseModel):
    """Result of a submit attempt."""
    success: bool
    word: str = ""
    error: Optional[str] = None
    message: Optional[str] = None
    destination_indices: List[int] = Field(default_factory=list)
    is_complete: bool = False


class Snapshot(BaseModel):
    """Persisted shape of a Standard-mode session."""
    model_config = ConfigDict(populate_by_name=True)

    date: str
    submissions: List[str] = Field(default_factory=list)
    submission_indices: List[List[int]] = Field(default_factory=list, alias="submissionIndices")
    board: Optional[Board] = None

    def to_json_dict(self) -> dict:
        """Dump using the persisted key names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class GameConfig(BaseModel):
    """Configuration for a play session."""
    word_list: str = "dictionary.txt"
    common_fraction: float = Field(default=0.25, gt=0, le=1)
    swap_delay: float = Field(default=0.5, ge=0)
    state_path: Optional[str] = None
    date: Optional[str] = Field(default=None, pattern=r'^\d{4}-\d{2}-\d{2}$')
    mode: Mode = "standard"
