"""
Session snapshots.

A snapshot only ever applies to the day it was taken on. Anything that
fails the shape or consistency checks is discarded in favour of a fresh
session rather than reported to the player.
"""

import json
from collections import Counter
from pathlib import Path
from typing import Any, List, Optional, Tuple

import pydantic

from .board import create_initial_board
from .models import Board, Puzzle, Snapshot, Submission
from ..verifiers.grid import GRID_SIZE, row_indices


def parse_snapshot(data: Any) -> Optional[Snapshot]:
    """Parse raw persisted data, returning None if it is malformed."""
    if not isinstance(data, dict):
        return None
    try:
        return Snapshot.model_validate(data)
    except pydantic.ValidationError:
        return None


def restore_snapshot(
    snapshot: Snapshot,
    puzzle: Puzzle,
    today: str,
) -> Optional[Tuple[Board, List[Submission]]]:
    """
    Recover board and submissions from a snapshot.

    Args:
        snapshot: Parsed snapshot
        puzzle: Today's puzzle
        today: Today's date string

    Returns:
        (board, submissions), or None if the snapshot must be discarded
    """
    if snapshot.date != today:
        return None

    # Older saves carried words without their cells
    if len(snapshot.submission_indices) != len(snapshot.submissions):
        return None

    try:
        submissions = [
            Submission(word=word, source_indices=indices)
            for word, indices in zip(snapshot.submissions, snapshot.submission_indices)
        ]
    except pydantic.ValidationError:
        return None

    if len(submissions) > GRID_SIZE or len(set(snapshot.submissions)) != len(submissions):
        return None
    # Submission k always occupies row k once committed
    if any(s.source_indices != row_indices(row) for row, s in enumerate(submissions)):
        return None

    board = snapshot.board
    if board is None:
        board = create_initial_board(puzzle.letters)
    elif Counter(board.letters) != Counter(puzzle.letters):
        return None

    return board, submissions


class SnapshotStore:
    """JSON file holding the latest snapshot."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read(self) -> Optional[Snapshot]:
        """Load the stored snapshot; unreadable or malformed files read as None."""
        if not self.path.exists():
            return None
        try:
            with open(self.path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError):
            return None
        return parse_snapshot(data)

    def write(self, snapshot: Snapshot) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump(snapshot.to_json_dict(), f, indent=2)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
