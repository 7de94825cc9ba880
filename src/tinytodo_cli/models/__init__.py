"""TinyTodo domain models.

This package contains the Task entity, its read-only view, the snapshot
(memento) used by undo/redo, the ordering strategies and the journal tree.
"""

from .config_models import AppConfig, LogConfig, OutputConfig, OutputFormat, ViewConfig
from .exceptions import (
    IntentParseError,
    SnapshotError,
    StoreNotInitializedError,
    TinyTodoError,
)
from .factory import TaskFactory, normalize_title
from .journal import CategoryComposite, JournalComponent, TaskLeaf, build_journal
from .snapshot import Snapshot, TaskSnapshot
from .strategy import (
    CompletedLastOrderStrategy,
    NormalOrderStrategy,
    OrderStrategy,
    ViewMode,
    strategy_for,
)
from .task import LegacyNote, Task, TaskView

__all__ = [
    # Task models
    "Task",
    "TaskView",
    "LegacyNote",
    "TaskFactory",
    "normalize_title",
    # Memento
    "Snapshot",
    "TaskSnapshot",
    # Ordering
    "OrderStrategy",
    "NormalOrderStrategy",
    "CompletedLastOrderStrategy",
    "ViewMode",
    "strategy_for",
    # Journal
    "JournalComponent",
    "CategoryComposite",
    "TaskLeaf",
    "build_journal",
    # Errors
    "TinyTodoError",
    "StoreNotInitializedError",
    "SnapshotError",
    "IntentParseError",
    # Config models
    "AppConfig",
    "ViewConfig",
    "OutputConfig",
    "OutputFormat",
    "LogConfig",
]
