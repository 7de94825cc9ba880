"""Console utilities for TinyTodo CLI."""

from functools import lru_cache

from rich.console import Console
from rich.theme import Theme

TINYTODO_THEME = Theme(
    {
        "task.open": "default",
        "task.done": "dim strike",
        "task.index": "bold cyan",
        "journal.category": "bold magenta",
    }
)

_color_enabled = True


def set_color_enabled(enabled: bool) -> None:
    """Turn colored output on or off (from the output.color setting)."""
    global _color_enabled
    _color_enabled = enabled


def get_console(stderr: bool = False) -> Console:
    """Get a Rich Console instance for consistent output formatting.

    Args:
        stderr: Write to stderr instead of stdout
    """
    return _build_console(_color_enabled, stderr)


@lru_cache(maxsize=4)
def _build_console(color: bool, stderr: bool) -> Console:
    return Console(theme=TINYTODO_THEME, no_color=not color, highlight=False, stderr=stderr)
