"""TinyTodo CLI - an in-memory task list with undo/redo."""

__version__ = "0.1.0"
