"""Game layer for par."""

from .models import (
    Mode,
    Status,
    CellState,
    Puzzle,
    Board,
    RowCommit,
    Submission,
    SubmitResult,
    Snapshot,
    GameConfig,
)
from .puzzle import generate_puzzle, PLACEHOLDER_LETTER, SEED_WORD_COUNT
from .board import create_initial_board, swap_rows_for_submission
from .scheduler import Scheduler, ScheduledAction
from .hard_mode import HardModeBoard, SWAP_DELAY
from .snapshot import parse_snapshot, restore_snapshot, SnapshotStore
from .session import GameSession

__all__ = [
    "Mode",
    "Status",
    "CellState",
    "Puzzle",
    "Board",
    "RowCommit",
    "Submission",
    "SubmitResult",
    "Snapshot",
    "GameConfig",
    "generate_puzzle",
    "PLACEHOLDER_LETTER",
    "SEED_WORD_COUNT",
    "create_initial_board",
    "swap_rows_for_submission",
    "Scheduler",
    "ScheduledAction",
    "HardModeBoard",
    "SWAP_DELAY",
    "parse_snapshot",
    "restore_snapshot",
    "SnapshotStore",
    "GameSession",
]
