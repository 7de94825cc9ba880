"""Helpers shared by the shell and run commands."""

from __future__ import annotations

from tinytodo_cli.models import LegacyNote, ViewMode
from tinytodo_cli.services import TaskService, TaskStore
from tinytodo_cli.services.config_service import get_config_service
from tinytodo_cli.utils.exit_codes import ERROR_CONFIG
from tinytodo_cli.utils.intent_parser import Intent
from tinytodo_cli.utils.logger import set_log_level
from tinytodo_cli.utils.ui.console import set_color_enabled

from .decorators import AppError

MUTATING_ACTIONS = frozenset({"add", "note", "delete", "toggle", "undo", "redo", "view"})


def build_service(view: ViewMode | None = None) -> TaskService:
    """Wire one TaskStore + TaskService for this process.

    The initial view comes from the --view option, else from
    view.default_mode in the config. Output and log settings are applied too.
    """
    try:
        config = get_config_service().config
    except RuntimeError as e:
        raise AppError(str(e), exit_code=ERROR_CONFIG) from e

    set_color_enabled(config.output.color)
    set_log_level(config.log.level)

    service = TaskService(TaskStore())
    mode = view or config.view.default_mode
    if mode != ViewMode.NORMAL:
        service.set_view_mode(mode)
    return service


def apply_intent(service: TaskService, intent: Intent) -> bool:
    """Apply a state-affecting intent to the service.

    Returns:
        True if the intent changed something, False for a silent no-op
        (blank title, bad index, empty history)
    """
    if intent.action == "add":
        return service.add_task(intent.text)
    if intent.action == "note":
        return service.add_legacy_note(LegacyNote(text=intent.text or ""))
    if intent.action == "delete":
        return service.delete_at(intent.index)
    if intent.action == "toggle":
        return service.toggle_at(intent.index)
    if intent.action == "undo":
        return service.undo()
    if intent.action == "redo":
        return service.redo()
    if intent.action == "view":
        service.set_view_mode(intent.mode)
        return True
    raise ValueError(f"Intent '{intent.action}' does not change state")
