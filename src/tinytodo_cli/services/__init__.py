"""Service layer for TinyTodo CLI.

The task core (store, commands, history, TaskService facade) plus the
configuration service and the UI notification dispatcher.
"""

from .dispatch import UiDispatcher
from .history_service import HistoryController
from .task_commands import (
    AddLegacyNoteCommand,
    AddTaskCommand,
    Command,
    DeleteTaskCommand,
    ToggleTaskDoneCommand,
)
from .task_service import TaskService
from .task_store import TaskStore, call_now

__all__ = [
    "TaskStore",
    "call_now",
    "Command",
    "AddTaskCommand",
    "AddLegacyNoteCommand",
    "DeleteTaskCommand",
    "ToggleTaskDoneCommand",
    "HistoryController",
    "TaskService",
    "UiDispatcher",
]
