"""Command 'journal' of tinytodo-cli"""

from typing import Annotated

import typer

from tinytodo_cli.utils.exit_codes import ERROR_INVALID_ARGS
from tinytodo_cli.utils.intent_parser import parse_intent
from tinytodo_cli.utils.ui.formatters import format_journal

from .decorators import AppError, command_wrapper
from .utils import MUTATING_ACTIONS, apply_intent, build_service

app = typer.Typer()


@app.command("journal")
@command_wrapper
def journal_command(
    intents: Annotated[
        list[str] | None, typer.Argument(help="Intent lines to run first")
    ] = None,
) -> None:
    """Run intents, then show the tasks as a journal tree ("All Tasks")."""
    service = build_service()
    for line in intents or []:
        intent = parse_intent(line)
        if intent is None:
            continue
        if intent.action not in MUTATING_ACTIONS:
            raise AppError(
                f"'{intent.action}' cannot be used with journal",
                exit_code=ERROR_INVALID_ARGS,
            )
        apply_intent(service, intent)

    format_journal(service.store.journal)
