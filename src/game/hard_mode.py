from functools import partial
from typing import Collection, List, Optional, Sequence
from pydantic import BaseModel, Field, ConfigDict, PrivateAttr

from .scheduler import Scheduler, ScheduledAction
from ..verifiers.grid import CELL_COUNT, split_rows
from ..verifiers.verify import invalid_rows


# Seconds both cells stay highlighted before they exchange contents
SWAP_DELAY = 0.5


class HardModeBoard(BaseModel):
    """
    Hard Mode grid: cells are exchanged directly, two at a time.

    The first click marks an anchor, clicking it again drops it, and a
    click on any other cell schedules an exchange of the two cells. The
    puzzle is solved when every row reads as an accepted word; the score
    is the number of exchanges made.

    Attributes:
        letters: Flat 25-cell grid
        selected_indices: Anchor, or anchor plus partner while an exchange waits
        swap_count: Exchanges made so far
        is_complete: Whether all five rows are words
        swap_delay: Seconds between the second click and the exchange
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    letters: List[str]
    selected_indices: List[int] = Field(default_factory=list)
    swap_count: int = Field(default=0, ge=0)
    is_complete: bool = False
    swap_delay: float = Field(default=SWAP_DELAY, ge=0)

    _words: Collection[str] = PrivateAttr(default_factory=frozenset)
    _scheduler: Optional[Scheduler] = PrivateAttr(default=None)
    _pending: Optional[ScheduledAction] = PrivateAttr(default=None)

    @classmethod
    def create(
        cls,
        letters: Sequence[str],
        words: Collection[str],
        scheduler: Optional[Scheduler] = None,
        swap_delay: float = SWAP_DELAY,
    ) -> "HardModeBoard":
        """
        Factory method to seed a Hard Mode board from puzzle letters.

        Args:
            letters: The puzzle's 25 letters
            words: Accepted-word set used for the row check
            scheduler: Clock for the deferred exchange; without one,
                exchanges apply immediately
            swap_delay: Delay before an exchange applies

        Returns:
            A new HardModeBoard with no selection and no swaps; rows are
            first checked after the first exchange
        """
        board = cls(letters=list(letters), swap_delay=swap_delay)
        board._words = words
        board._scheduler = scheduler
        return board

    @property
    def has_pending_swap(self) -> bool:
        return self._pending is not None and self._pending.pending

    def select_cell(self, index: int) -> bool:
        """
        Handle a click on a cell.

        A click that arrives while an exchange is waiting cancels that
        exchange and starts a new selection from the clicked cell.

        Returns:
            True if the click changed the board or selection
        """
        if self.is_complete or not 0 <= index < CELL_COUNT:
            return False

        self.cancel_pending()

        if not self.selected_indices:
            self.selected_indices = [index]
            return True

        anchor = self.selected_indices[0]
        if index == anchor:
            self.selected_indices = []
            return True

        self.selected_indices = [anchor, index]
        self.swap_count += 1

        if self._scheduler is None or self.swap_delay == 0:
            self._exchange(anchor, index)
        else:
            self._pending = self._scheduler.schedule(
                self.swap_delay, partial(self._exchange, anchor, index)
            )
        return True

    def cancel_pending(self) -> bool:
        """
        Abort a waiting exchange, if any.

        The swap it counted is taken back and the selection cleared.

        Returns:
            True if an exchange was cancelled
        """
        if self._pending is None:
            return False

        action, self._pending = self._pending, None
        if not action.cancel():
            return False

        self.swap_count -= 1
        self.selected_indices = []
        return True

    def _exchange(self, first: int, second: int) -> None:
        self.letters[first], self.letters[second] = self.letters[second], self.letters[first]
        self.selected_indices = []
        self._pending = None
        self._check_complete()

    def _check_complete(self) -> None:
        self.is_complete = not invalid_rows(self.letters, self._words)

    def rows(self) -> List[str]:
        """Row strings, top to bottom."""
        return split_rows(self.letters)
