"""Task service - single entry point for the UI.

This service sits between the UI and the core. It turns raw intents into
commands run through the HistoryController, resolves display indices
against the current ordering, and hands out read-only TaskView objects.

Invalid input is not an error here: blank titles and out-of-range indices
are dropped silently, without a history entry or a notification.
"""

from __future__ import annotations

from collections.abc import Iterator

from tinytodo_cli.models import (
    LegacyNote,
    StoreNotInitializedError,
    Task,
    TaskView,
    ViewMode,
    normalize_title,
    strategy_for,
)

from .history_service import HistoryController
from .task_commands import (
    AddLegacyNoteCommand,
    AddTaskCommand,
    DeleteTaskCommand,
    ToggleTaskDoneCommand,
)
from .task_store import Dispatcher, Observer, TaskStore


class TaskService:
    """Facade over the task store and its undo/redo history.

    Usage:
        store = TaskStore()
        service = TaskService(store)
        service.add_task("Buy milk")
        service.toggle_at(0)
        service.undo()
    """

    def __init__(self, store: TaskStore, history: HistoryController | None = None):
        """Initialize the task service.

        Args:
            store: The application's single TaskStore
            history: History controller bound to the same store; created
                when omitted
        """
        if store is None:
            raise StoreNotInitializedError("TaskService requires an initialized TaskStore")
        if history is not None and history.store is not store:
            raise ValueError("HistoryController is bound to a different TaskStore")
        self.store = store
        self.history = history if history is not None else HistoryController(store)

    # ---- intents ----

    def add_task(self, title: str | None) -> bool:
        """Add a task; blank titles are dropped.

        Returns:
            True if a command was run
        """
        cleaned = normalize_title(title)
        if cleaned is None:
            return False
        self.history.run(AddTaskCommand(self.store, cleaned))
        return True

    def add_legacy_note(self, note: LegacyNote) -> bool:
        """Adapt a legacy note into a task; blank notes are dropped."""
        cleaned = normalize_title(note.text)
        if cleaned is None:
            return False
        self.history.run(AddLegacyNoteCommand(self.store, LegacyNote(text=cleaned)))
        return True

    def delete_at(self, index: int) -> bool:
        """Delete the task at a display index of the current ordering."""
        task = self._task_at(index)
        if task is None:
            return False
        self.history.run(DeleteTaskCommand(self.store, task))
        return True

    def toggle_at(self, index: int) -> bool:
        """Toggle the task at a display index of the current ordering."""
        task = self._task_at(index)
        if task is None:
            return False
        self.history.run(ToggleTaskDoneCommand(self.store, task))
        return True

    def undo(self) -> bool:
        return self.history.undo()

    def redo(self) -> bool:
        return self.history.redo()

    def set_view_mode(self, mode: ViewMode | str) -> None:
        """Switch the display ordering.

        View changes are not recorded in the undo history.

        Raises:
            ValueError: If the mode is unknown
        """
        self.store.set_order_strategy(strategy_for(mode))

    def _task_at(self, index: int) -> Task | None:
        ordered = self.store.get_ordered()
        if index < 0 or index >= len(ordered):
            return None
        return ordered[index]

    # ---- queries ----

    def get_ordered(self) -> list[TaskView]:
        """Read-only projection of the tasks in display order."""
        return [TaskView.of(task) for task in self.store.get_ordered()]

    def iter_tasks(self) -> Iterator[TaskView]:
        """Iterate the display order as it was when the iterator was created."""
        return iter(self.get_ordered())

    def journal_lines(self) -> list[str]:
        return self.store.journal.render()

    @property
    def view_mode(self) -> ViewMode:
        return self.store.strategy.mode

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # ---- notifications ----

    def subscribe(self, observer: Observer, dispatcher: Dispatcher | None = None) -> None:
        self.store.add_observer(observer, dispatcher)

    def unsubscribe(self, observer: Observer) -> None:
        self.store.remove_observer(observer)
