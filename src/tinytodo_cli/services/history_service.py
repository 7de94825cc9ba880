"""Undo/redo history over full-state snapshots.

Two stacks of Snapshot objects. Every command run pushes the pre-command
state on the undo stack and empties the redo stack, so history never
branches. Each step copies the whole collection (O(n) time and memory).
"""

from __future__ import annotations

import threading

from tinytodo_cli.models import Snapshot, StoreNotInitializedError
from tinytodo_cli.utils.logger import get_logger

from .task_commands import Command
from .task_store import TaskStore


class HistoryController:
    """Runs commands and keeps the undo/redo stacks."""

    def __init__(self, store: TaskStore):
        if store is None:
            raise StoreNotInitializedError("HistoryController requires an initialized TaskStore")
        self.store = store
        self._undo: list[Snapshot] = []
        self._redo: list[Snapshot] = []
        self._lock = threading.RLock()
        self._log = get_logger().getChild("history")

    def run(self, command: Command) -> None:
        """Record the current state, drop the redo stack, then execute.

        If the command raises, both stacks are put back as they were.
        """
        with self._lock:
            saved_redo = list(self._redo)
            self._undo.append(self.store.snapshot())
            self._redo.clear()
            try:
                command.execute()
            except Exception:
                self._undo.pop()
                self._redo.extend(saved_redo)
                self._log.warning("%s failed, history unchanged", command.describe())
                raise
            depth = len(self._undo)
        self._log.info("ran %s (undo depth=%d)", command.describe(), depth)

    def undo(self) -> bool:
        """Restore the state before the last command.

        Returns:
            False if there was nothing to undo
        """
        with self._lock:
            if not self._undo:
                return False
            self._redo.append(self.store.snapshot())
            previous = self._undo.pop()
            self.store.restore(previous)
            depth = len(self._undo)
        self._log.info("undo (undo depth=%d)", depth)
        return True

    def redo(self) -> bool:
        """Re-apply the last undone state.

        Returns:
            False if there was nothing to redo
        """
        with self._lock:
            if not self._redo:
                return False
            self._undo.append(self.store.snapshot())
            following = self._redo.pop()
            self.store.restore(following)
            depth = len(self._redo)
        self._log.info("redo (redo depth=%d)", depth)
        return True

    def clear(self) -> None:
        with self._lock:
            self._undo.clear()
            self._redo.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)
