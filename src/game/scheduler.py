"""
Deferred actions driven by a caller-owned clock.

The game never sleeps or starts timers itself. A caller schedules an
action, keeps the returned handle to cancel it, and moves time forward
with advance(); a UI wires advance() to whatever timer it has.
"""

from typing import Callable, List, Optional


class ScheduledAction:
    """Handle for an action waiting to fire."""

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self._callback = callback
        self.fired = False
        self.cancelled = False

    @property
    def pending(self) -> bool:
        return not (self.fired or self.cancelled)

    def cancel(self) -> bool:
        """
        Cancel the action.

        Returns:
            True if the action was still pending, False if it had already
            fired or been cancelled
        """
        if not self.pending:
            return False
        self.cancelled = True
        return True

    def fire(self) -> bool:
        """Run the callback once. Returns False if it was no longer pending."""
        if not self.pending:
            return False
        self.fired = True
        self._callback()
        return True


class Scheduler:
    """
    Queue of deferred actions against a manually advanced clock.

    Attributes:
        now: Current clock time in seconds
    """

    def __init__(self, now: float = 0.0):
        self.now = now
        self._queue: List[ScheduledAction] = []

    @property
    def pending(self) -> List[ScheduledAction]:
        """Actions still waiting, earliest first."""
        return [a for a in self._queue if a.pending]

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledAction:
        """
        Schedule `callback` to run `delay` seconds from now.

        Raises:
            ValueError: If delay is negative
        """
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        action = ScheduledAction(self.now + delay, callback)
        self._queue.append(action)
        self._queue.sort(key=lambda a: a.due)
        return action

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward and fire every action that came due.

        Returns:
            Number of actions fired
        """
        if seconds < 0:
            raise ValueError(f"Cannot move the clock backwards ({seconds})")
        self.now += seconds
        return self._fire_until(self.now)

    def run_pending(self) -> int:
        """Fire everything outstanding regardless of due time."""
        return self._fire_until(None)

    def _fire_until(self, limit: Optional[float]) -> int:
        fired = 0
        while True:
            due = [a for a in self._queue if a.pending and (limit is None or a.due <= limit)]
            if not due:
                break
            if due[0].fire():
                fired += 1
        self._queue = [a for a in self._queue if a.pending]
        return fired
