"""Mutation commands executed against the task store.

A command only carries an intent (target store + parameters). Recording it
in the undo history is the HistoryController's job.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tinytodo_cli.models import LegacyNote, StoreNotInitializedError, Task, TaskFactory

from .task_store import TaskStore


class Command(ABC):
    """Base class for store mutations."""

    name: str = "command"

    def __init__(self, store: TaskStore):
        if store is None:
            raise StoreNotInitializedError(
                f"{type(self).__name__} requires an initialized TaskStore"
            )
        self.store = store

    @abstractmethod
    def execute(self) -> None:
        """Apply the mutation to the store."""

    def describe(self) -> str:
        return self.name


class AddTaskCommand(Command):
    name = "add"

    def __init__(self, store: TaskStore, title: str):
        super().__init__(store)
        self.title = title

    def execute(self) -> None:
        self.store.add(self.title)

    def describe(self) -> str:
        return f"add {self.title!r}"


class AddLegacyNoteCommand(Command):
    name = "note"

    def __init__(self, store: TaskStore, note: LegacyNote):
        super().__init__(store)
        self.note = note

    def execute(self) -> None:
        self.store.append(TaskFactory.create_legacy_task(self.note))

    def describe(self) -> str:
        return f"note {self.note.text!r}"


class DeleteTaskCommand(Command):
    name = "delete"

    def __init__(self, store: TaskStore, task: Task):
        super().__init__(store)
        self.task = task

    def execute(self) -> None:
        self.store.delete(self.task)

    def describe(self) -> str:
        return f"delete {self.task.title!r}"


class ToggleTaskDoneCommand(Command):
    name = "toggle"

    def __init__(self, store: TaskStore, task: Task):
        super().__init__(store)
        self.task = task

    def execute(self) -> None:
        self.store.toggle_done(self.task)

    def describe(self) -> str:
        return f"toggle {self.task.title!r}"
