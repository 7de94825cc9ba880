"""Exceptions raised by the task core."""


class TinyTodoError(Exception):
    """Base exception for task core contract violations."""


class StoreNotInitializedError(TinyTodoError):
    """Raised when a component is wired without a task store."""


class SnapshotError(TinyTodoError):
    """Raised when restoring from a missing or invalid snapshot."""


class IntentParseError(TinyTodoError):
    """Raised when an intent line cannot be understood."""
