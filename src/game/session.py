from typing import Awaitable, Callable, Dict, List, Optional, Set
from pydantic import BaseModel, Field, ConfigDict

from .board import create_initial_board, swap_rows_for_submission
from .hard_mode import HardModeBoard, SWAP_DELAY
from .models import (
    Board,
    CellState,
    Mode,
    Puzzle,
    Snapshot,
    Status,
    Submission,
    SubmitResult,
)
from .puzzle import generate_puzzle
from .scheduler import Scheduler
from .snapshot import restore_snapshot
from ..verifiers.data import Lexicon
from ..verifiers.grid import CELL_COUNT, WORD_LENGTH
from ..verifiers.models import LetterUsage, TOO_SHORT
from ..verifiers.verify import calculate_letter_usage, verify_submission


class GameSession(BaseModel):
    """
    Single player's session for the day's puzzle.

    Owns the current selection, accepted submissions, board and mode, and
    routes player actions to the validator, the row commit and the Hard
    Mode board. Until start() runs the session is loading and ignores
    every mutating call.

    Attributes:
        puzzle: The day's puzzle, None while loading
        board: Standard-mode board
        selection: Cells chosen so far, in order
        submissions: Accepted words, oldest first
        mode: "standard" or "hard"
        hard_board: Hard Mode board, present only in Hard Mode
        swap_delay: Delay applied to Hard Mode exchanges
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    puzzle: Optional[Puzzle] = None
    board: Optional[Board] = None
    selection: List[int] = Field(default_factory=list)
    submissions: List[Submission] = Field(default_factory=list)
    mode: Mode = "standard"
    hard_board: Optional[HardModeBoard] = None
    swap_delay: float = Field(default=SWAP_DELAY, ge=0)
    lexicon: Lexicon = Field(default_factory=Lexicon, exclude=True)
    scheduler: Optional[Scheduler] = Field(default=None, exclude=True)
    on_change: Optional[Callable[[Snapshot], None]] = Field(default=None, exclude=True)

    def start(
        self,
        lexicon: Lexicon,
        today: str,
        puzzle: Optional[Puzzle] = None,
        snapshot: Optional[Snapshot] = None,
    ) -> None:
        """
        Leave the loading state with today's puzzle.

        Args:
            lexicon: Word source for generation and dictionary checks
            today: Date string the puzzle is generated from
            puzzle: Use this puzzle instead of generating one
            snapshot: Saved progress; applied only if it is valid for today
        """
        self.lexicon = lexicon
        self.puzzle = puzzle if puzzle is not None else generate_puzzle(today, lexicon.common_words)
        self.board = create_initial_board(self.puzzle.letters)
        self.selection = []
        self.submissions = []
        self.hard_board = None

        if snapshot is not None:
            restored = restore_snapshot(snapshot, self.puzzle, today)
            if restored is not None:
                self.board, self.submissions = restored

        if self.mode == "hard":
            self.hard_board = self._new_hard_board()

    async def initialize(
        self,
        fetch: Callable[[], Awaitable[Lexicon]],
        today: str,
        snapshot: Optional[Snapshot] = None,
    ) -> None:
        """Await the word source once, then start()."""
        lexicon = await fetch()
        self.start(lexicon, today, snapshot=snapshot)

    # ----- derived state -----

    @property
    def status(self) -> Status:
        if self.puzzle is None or self.board is None:
            return "loading"
        if self.is_complete:
            return "complete"
        return "ready"

    @property
    def words(self) -> List[str]:
        return [s.word for s in self.submissions]

    @property
    def locked_indices(self) -> Set[int]:
        """Cells claimed by accepted words."""
        return {idx for s in self.submissions for idx in s.source_indices}

    @property
    def is_complete(self) -> bool:
        if self.mode == "hard":
            return self.hard_board is not None and self.hard_board.is_complete
        return len(self.locked_indices) == CELL_COUNT

    @property
    def selected_indices(self) -> List[int]:
        if self.mode == "hard":
            return list(self.hard_board.selected_indices) if self.hard_board else []
        return list(self.selection)

    @property
    def letters(self) -> List[str]:
        """Letters as currently laid out for the active mode."""
        if self.mode == "hard" and self.hard_board is not None:
            return list(self.hard_board.letters)
        return list(self.board.letters) if self.board else []

    @property
    def current_input(self) -> str:
        """Letters under the current selection."""
        letters = self.letters
        return ''.join(letters[idx] for idx in self.selected_indices)

    @property
    def letter_usage(self) -> LetterUsage:
        if self.puzzle is None:
            return LetterUsage()
        return calculate_letter_usage(self.puzzle.letters, self.words)

    @property
    def score(self) -> int:
        """Letters submitted in Standard Mode, exchanges made in Hard Mode."""
        if self.mode == "hard":
            return self.hard_board.swap_count if self.hard_board else 0
        return self.letter_usage.score

    def cell_states(self) -> List[CellState]:
        """Display state of each cell for the active mode."""
        if self.status == "loading":
            return []
        selected = set(self.selected_indices)
        locked = self.locked_indices if self.mode == "standard" else set()
        states: List[CellState] = []
        for idx in range(CELL_COUNT):
            if idx in selected:
                states.append("selected")
            elif idx in locked:
                states.append("locked")
            else:
                states.append("available")
        return states

    # ----- player actions -----

    def select_cell(self, index: int) -> bool:
        """
        Handle a click on a cell.

        In Standard Mode a cell is refused if the session is complete, the
        cell is locked, or five cells are already chosen. Clicking the last
        chosen cell removes it; clicking an earlier chosen cell does nothing.

        Returns:
            True if the selection or board changed
        """
        if self.status != "ready":
            return False

        if self.mode == "hard":
            return self.hard_board.select_cell(index)

        if not 0 <= index < CELL_COUNT or index in self.locked_indices:
            return False

        if self.selection and self.selection[-1] == index:
            self.selection.pop()
            return True

        if index in self.selection or len(self.selection) >= WORD_LENGTH:
            return False

        self.selection.append(index)
        return True

    def clear_selection(self) -> None:
        if self.mode == "hard" and self.hard_board is not None:
            self.hard_board.cancel_pending()
            self.hard_board.selected_indices = []
        self.selection = []

    def backspace(self) -> None:
        if self.selection:
            self.selection.pop()

    def submit(self) -> Optional[SubmitResult]:
        """
        Submit the current selection as a word.

        The word is read from the live board. On success it is committed
        into the next empty row and recorded; the selection is left for the
        caller to clear once it has shown the outcome.

        Returns:
            SubmitResult, or None if the session is loading, complete or
            in Hard Mode
        """
        if self.status != "ready" or self.mode != "standard":
            return None

        word = ''.join(self.board.letters[idx] for idx in self.selection)

        if len(self.selection) != WORD_LENGTH:
            return SubmitResult(
                success=False,
                word=word,
                error=TOO_SHORT,
                message=f"Select {WORD_LENGTH} letters",
            )

        validation = verify_submission(word, self.board.letters, self.lexicon, self.words)
        if not validation.valid:
            return SubmitResult(
                success=False,
                word=word,
                error=validation.error,
                message=validation.errors[0].message,
            )

        commit = swap_rows_for_submission(self.board, self.selection, len(self.submissions))
        self.board = commit.board
        self.submissions.append(Submission(word=word, source_indices=commit.destination_indices))
        self._notify()

        return SubmitResult(
            success=True,
            word=word,
            destination_indices=commit.destination_indices,
            is_complete=self.is_complete,
        )

    def reset(self) -> None:
        """Start the day over in the current mode."""
        if self.status == "loading":
            return
        if self.hard_board is not None:
            self.hard_board.cancel_pending()

        self.board = create_initial_board(self.puzzle.letters)
        self.selection = []
        self.submissions = []
        self.hard_board = self._new_hard_board() if self.mode == "hard" else None
        self._notify()

    def toggle_mode(self) -> Mode:
        """Switch between Standard and Hard Mode, dropping all progress."""
        if self.status == "loading":
            return self.mode
        self.mode = "hard" if self.mode == "standard" else "standard"
        self.reset()
        return self.mode

    # ----- persistence -----

    def snapshot(self, today: Optional[str] = None) -> Snapshot:
        """Standard-mode progress in its persisted shape."""
        return Snapshot(
            date=today or (self.puzzle.id if self.puzzle else ""),
            submissions=self.words,
            submission_indices=[list(s.source_indices) for s in self.submissions],
            board=self.board.model_copy(deep=True) if self.board else None,
        )

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "status": self.status,
            "mode": self.mode,
            "puzzle_id": self.puzzle.id if self.puzzle else None,
            "letters": self.letters,
            "selected_indices": self.selected_indices,
            "current_input": self.current_input,
            "submissions": self.words,
            "score": self.score,
            "is_complete": self.is_complete,
        }

    def _new_hard_board(self) -> HardModeBoard:
        return HardModeBoard.create(
            self.puzzle.letters,
            self.lexicon,
            scheduler=self.scheduler,
            swap_delay=self.swap_delay,
        )

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.snapshot())
