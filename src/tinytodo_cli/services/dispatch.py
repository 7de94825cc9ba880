"""Deliver store notifications on the UI's own loop.

The store hands each notification to a dispatcher instead of calling the
observer itself. UiDispatcher queues them; the UI loop calls drain() when it
is ready to re-render, so observers never run inside store code.
"""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable

Callback = Callable[[], None]


class UiDispatcher:
    """FIFO queue of pending observer calls."""

    def __init__(self, coalesce: bool = True):
        """
        Args:
            coalesce: Skip posting a callback that is already pending, so a
                burst of changes causes one re-render
        """
        self._pending: deque[Callback] = deque()
        self._lock = threading.Lock()
        self.coalesce = coalesce

    def post(self, callback: Callback) -> None:
        with self._lock:
            if self.coalesce and any(c is callback for c in self._pending):
                return
            self._pending.append(callback)

    __call__ = post

    def drain(self) -> int:
        """Run every pending callback in posting order.

        Callbacks posted while draining run in the same pass.

        Returns:
            Number of callbacks run
        """
        ran = 0
        while True:
            with self._lock:
                if not self._pending:
                    return ran
                callback = self._pending.popleft()
            callback()
            ran += 1

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._pending)
