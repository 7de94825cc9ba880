"""
Strategy Pattern: Task Ordering

An ordering strategy decides the display order of the task list without
touching the store's canonical (insertion) order. The set of strategies is
closed: one per ViewMode, picked once through strategy_for().
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import StrEnum

from .task import Task


class ViewMode(StrEnum):
    """Display modes selectable from the UI."""

    NORMAL = "normal"
    COMPLETED_LAST = "completed-last"


class OrderStrategy(ABC):
    """
    Abstract base class for ordering strategies.

    Implementations must be pure: they never mutate the input sequence or the
    tasks in it, and they return a new list (empty input gives empty output).
    """

    @abstractmethod
    def order(self, tasks: Sequence[Task]) -> list[Task]:
        """Return the tasks in display order."""

    @property
    @abstractmethod
    def mode(self) -> ViewMode:
        """View mode served by this strategy (for logging/display)."""


class NormalOrderStrategy(OrderStrategy):
    """Identity ordering: canonical insertion order."""

    def order(self, tasks: Sequence[Task]) -> list[Task]:
        return list(tasks)

    @property
    def mode(self) -> ViewMode:
        return ViewMode.NORMAL


class CompletedLastOrderStrategy(OrderStrategy):
    """
    Stable partition: unfinished tasks first, then finished ones.

    Relative order inside each group is the input order; there is no
    secondary sort key.
    """

    def order(self, tasks: Sequence[Task]) -> list[Task]:
        unfinished = [t for t in tasks if not t.done]
        finished = [t for t in tasks if t.done]
        return unfinished + finished

    @property
    def mode(self) -> ViewMode:
        return ViewMode.COMPLETED_LAST


_STRATEGIES: dict[ViewMode, type[OrderStrategy]] = {
    ViewMode.NORMAL: NormalOrderStrategy,
    ViewMode.COMPLETED_LAST: CompletedLastOrderStrategy,
}


def strategy_for(mode: ViewMode | str) -> OrderStrategy:
    """Build the strategy for a view mode.

    Args:
        mode: ViewMode member or its string value (e.g. "completed-last")

    Returns:
        A fresh OrderStrategy instance

    Raises:
        ValueError: If the mode is unknown
    """
    try:
        view_mode = ViewMode(mode)
    except ValueError as e:
        valid = ", ".join(m.value for m in ViewMode)
        raise ValueError(f"Unknown view mode '{mode}'. Expected one of: {valid}") from e
    return _STRATEGIES[view_mode]()
