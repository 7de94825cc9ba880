"""Task factory.

Every task entering the store is built here, either from a title typed by
the user or by adapting a LegacyNote.
"""

from __future__ import annotations

from .task import LegacyNote, Task


def normalize_title(title: str | None) -> str | None:
    """Trim a raw title; return None when nothing is left.

    Embedded newlines are folded into spaces so a title stays on one line.
    """
    if title is None:
        return None
    cleaned = title.strip().replace("\n", " ")
    return cleaned or None


class TaskFactory:
    """Builds Task objects."""

    @staticmethod
    def create_basic_task(title: str) -> Task:
        return Task(title=title, done=False)

    @staticmethod
    def create_legacy_task(note: LegacyNote) -> Task:
        """Adapt a legacy note: the note text becomes the title, not done."""
        return Task(title=note.text, done=False)
