"""Task store - owner of the authoritative task collection.

The store is created once at startup and handed by reference to the history
controller and the TaskService. It is the only code that mutates Task objects.

Thread-safety:
- every read and mutation of the collection runs under one lock
- observers are notified after the lock is released, through the
  dispatcher they registered with
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator

from tinytodo_cli.models import (
    CategoryComposite,
    NormalOrderStrategy,
    OrderStrategy,
    Snapshot,
    SnapshotError,
    Task,
    TaskFactory,
    build_journal,
)
from tinytodo_cli.utils.logger import get_logger

Observer = Callable[[], None]
Dispatcher = Callable[[Observer], None]


def call_now(callback: Observer) -> None:
    """Default dispatcher: invoke the observer on the caller's thread."""
    callback()


class TaskStore:
    """In-memory task collection with change notifications.

    Canonical order is insertion order. Display order is computed on demand
    by the active OrderStrategy and never written back.
    """

    def __init__(self, strategy: OrderStrategy | None = None):
        """Initialize an empty store.

        Args:
            strategy: Initial ordering strategy (defaults to normal order)
        """
        self._tasks: list[Task] = []
        self._strategy: OrderStrategy = strategy or NormalOrderStrategy()
        self._observers: list[tuple[Observer, Dispatcher]] = []
        self._lock = threading.Lock()
        self._journal: CategoryComposite = build_journal(())
        self._log = get_logger().getChild("store")

    # ---- observers ----

    def add_observer(self, observer: Observer, dispatcher: Dispatcher | None = None) -> None:
        """Register a zero-argument change callback.

        Args:
            observer: Called after every state-affecting operation
            dispatcher: Delivers the call (e.g. onto a UI loop); defaults to
                calling the observer directly once the store lock is released
        """
        with self._lock:
            self._observers.append((observer, dispatcher or call_now))

    def remove_observer(self, observer: Observer) -> None:
        # == rather than is: bound methods are re-created on every attribute access
        with self._lock:
            self._observers = [(o, d) for o, d in self._observers if o != observer]

    def _notify(self) -> None:
        with self._lock:
            targets = list(self._observers)
        for observer, dispatcher in targets:
            dispatcher(observer)

    # ---- helpers (lock held by caller) ----

    def _index_of(self, task: Task) -> int | None:
        for i, candidate in enumerate(self._tasks):
            if candidate is task:
                return i
        return None

    def _rebuild_journal(self) -> None:
        self._journal = build_journal(self._tasks)

    # ---- mutations ----

    def add(self, title: str) -> Task | None:
        """Append a new, not-done task.

        Blank titles (after trimming) are ignored: nothing changes and no
        notification is sent.

        Returns:
            The new task, or None if the title was blank
        """
        cleaned = title.strip() if title is not None else ""
        if not cleaned:
            return None
        task = TaskFactory.create_basic_task(cleaned)
        with self._lock:
            self._tasks.append(task)
            self._rebuild_journal()
            size = len(self._tasks)
        self._log.debug("task added title=%r size=%d", cleaned, size)
        self._notify()
        return task

    def append(self, task: Task) -> bool:
        """Append a pre-built task (factory or adapter output).

        Returns:
            False if this exact task object is already stored
        """
        with self._lock:
            if self._index_of(task) is not None:
                return False
            self._tasks.append(task)
            self._rebuild_journal()
        self._log.debug("task appended title=%r", task.title)
        self._notify()
        return True

    def delete(self, task: Task) -> bool:
        """Remove a task handle. Unknown or stale handles are ignored.

        Returns:
            True if the task was removed
        """
        with self._lock:
            index = self._index_of(task)
            if index is None:
                return False
            del self._tasks[index]
            self._rebuild_journal()
        self._log.debug("task deleted title=%r", task.title)
        self._notify()
        return True

    def toggle_done(self, task: Task) -> bool:
        """Flip a task's done flag. Unknown or stale handles are ignored.

        Returns:
            True if the task was toggled
        """
        with self._lock:
            if self._index_of(task) is None:
                return False
            task.done = not task.done
            self._rebuild_journal()
        self._log.debug("task toggled title=%r done=%s", task.title, task.done)
        self._notify()
        return True

    def set_order_strategy(self, strategy: OrderStrategy) -> None:
        """Replace the active ordering. Data is untouched, observers still refresh."""
        with self._lock:
            self._strategy = strategy
        self._log.debug("order strategy set mode=%s", strategy.mode)
        self._notify()

    # ---- memento ----

    def snapshot(self) -> Snapshot:
        """Capture a value copy of every task in canonical order."""
        with self._lock:
            return Snapshot.capture(self._tasks)

    def restore(self, snapshot: Snapshot) -> None:
        """Replace the whole collection with fresh tasks built from a snapshot.

        Handles obtained before the restore no longer belong to the store.

        Raises:
            SnapshotError: If snapshot is None or not a Snapshot
        """
        if snapshot is None:
            raise SnapshotError("Cannot restore from a missing snapshot")
        if not isinstance(snapshot, Snapshot):
            raise SnapshotError(
                f"Cannot restore from {type(snapshot).__name__}, expected Snapshot"
            )
        with self._lock:
            self._tasks = snapshot.materialize()
            self._rebuild_journal()
        self._log.debug("store restored size=%d", len(snapshot))
        self._notify()

    # ---- queries ----

    @property
    def strategy(self) -> OrderStrategy:
        with self._lock:
            return self._strategy

    @property
    def tasks(self) -> list[Task]:
        """Copy of the collection in canonical (insertion) order."""
        with self._lock:
            return list(self._tasks)

    @property
    def journal(self) -> CategoryComposite:
        """Journal tree rebuilt after the last mutation."""
        with self._lock:
            return self._journal

    def get_ordered(self) -> list[Task]:
        """Tasks in display order according to the active strategy."""
        with self._lock:
            return self._strategy.order(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.get_ordered())

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
