"""Task data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Task(BaseModel):
    """A single entry of the task list.

    Tasks are live handles owned by the TaskStore. Two tasks with the same
    title and done flag are still different tasks, so the store compares
    them with ``is``, never ``==``.

    Attributes:
        title: Task title, already trimmed by the store
        done: Completion flag
    """

    title: str
    done: bool = False


class TaskView(BaseModel):
    """Read-only projection of a task handed to the UI.

    Attributes:
        title: Task title
        done: Completion flag
    """

    model_config = ConfigDict(frozen=True)

    title: str
    done: bool

    @classmethod
    def of(cls, task: Task) -> TaskView:
        return cls(title=task.title, done=task.done)


class LegacyNote(BaseModel):
    """Plain text note from the older notes format.

    Notes have no completion state of their own; they are turned into tasks
    by ``TaskFactory.create_legacy_task``.
    """

    model_config = ConfigDict(frozen=True)

    text: str
