"""Journal tree (composite) derived from the task list.

The store rebuilds an "All Tasks" category after every mutation. Leaves wrap
the live task handles, so a leaf always shows the task's current title.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from .task import Task

ROOT_CATEGORY = "All Tasks"


class JournalComponent(ABC):
    """Node of the journal tree."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the node."""

    @abstractmethod
    def render(self, indent: str = "") -> list[str]:
        """Return the node (and its children) as text lines."""


class TaskLeaf(JournalComponent):
    def __init__(self, task: Task):
        self.task = task

    @property
    def name(self) -> str:
        return self.task.title

    def render(self, indent: str = "") -> list[str]:
        return [f"{indent}- Task: {self.task.title}"]


class CategoryComposite(JournalComponent):
    def __init__(self, name: str):
        self._name = name
        self.children: list[JournalComponent] = []

    @property
    def name(self) -> str:
        return self._name

    def add_child(self, component: JournalComponent) -> None:
        self.children.append(component)

    def clear_children(self) -> None:
        self.children.clear()

    def render(self, indent: str = "") -> list[str]:
        lines = [f"{indent}* Category: {self._name}"]
        for child in self.children:
            lines.extend(child.render(indent + "  "))
        return lines


def build_journal(tasks: Iterable[Task], name: str = ROOT_CATEGORY) -> CategoryComposite:
    """Build a category whose leaves are the given tasks, in order."""
    root = CategoryComposite(name)
    for task in tasks:
        root.add_child(TaskLeaf(task))
    return root
