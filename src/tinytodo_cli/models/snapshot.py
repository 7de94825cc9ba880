"""Snapshot (memento) of the task collection."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from .task import Task


class TaskSnapshot(BaseModel):
    """Frozen value copy of one task."""

    model_config = ConfigDict(frozen=True)

    title: str
    done: bool

    def to_task(self) -> Task:
        """Build a brand new task from the stored values."""
        return Task(title=self.title, done=self.done)


class Snapshot(BaseModel):
    """Immutable point-in-time copy of every task, in canonical order.

    A snapshot shares no mutable state with the live collection: restoring it
    produces new Task objects, so handles taken before the restore go stale.

    Attributes:
        tasks: Value copies in canonical (insertion) order
    """

    model_config = ConfigDict(frozen=True)

    tasks: tuple[TaskSnapshot, ...] = Field(default_factory=tuple)

    @classmethod
    def capture(cls, tasks: Iterable[Task]) -> Snapshot:
        return cls(
            tasks=tuple(TaskSnapshot(title=t.title, done=t.done) for t in tasks)
        )

    def materialize(self) -> list[Task]:
        """Return fresh tasks matching the snapshot, in order."""
        return [entry.to_task() for entry in self.tasks]

    def __len__(self) -> int:
        return len(self.tasks)
