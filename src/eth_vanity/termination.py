"""Shared first-winner-wins termination flag."""

import multiprocessing

NO_WINNER = -1
ABORTED = -2


class TerminationSignal:
    """Single-assignment flag shared by every worker of one search.

    Backed by a lock-protected ``multiprocessing.Value`` so the same object
    works for threads and for processes (pass it to ``Process`` at creation
    time; it cannot be sent through a queue).
    """

    def __init__(self, context=None):
        ctx = context or multiprocessing
        self._winner = ctx.Value("i", NO_WINNER)

    def try_set(self, worker_id: int) -> bool:
        """Set the flag for ``worker_id`` unless it is already set.

        Returns:
            True for exactly one caller per search, False for everyone else.
        """
        with self._winner.get_lock():
            if self._winner.value != NO_WINNER:
                return False
            self._winner.value = worker_id
            return True

    def is_set(self) -> bool:
        return self._winner.value != NO_WINNER

    @property
    def winner(self):
        """Id of the worker that set the flag, or None."""
        value = self._winner.value
        return None if value == NO_WINNER else value
