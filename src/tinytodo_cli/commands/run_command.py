"""Command 'run' of tinytodo-cli"""

from typing import Annotated

import typer

from tinytodo_cli.models import OutputFormat, ViewMode
from tinytodo_cli.services.config_service import get_config_service
from tinytodo_cli.utils.intent_parser import HELP_TEXT, parse_intent
from tinytodo_cli.utils.logger import get_logger
from tinytodo_cli.utils.ui.console import get_console
from tinytodo_cli.utils.ui.formatters import format_journal, format_output, format_tasks_pretty

from .decorators import command_wrapper
from .utils import apply_intent, build_service

app = typer.Typer()


@app.command("run")
@command_wrapper
def run_command(
    intents: Annotated[
        list[str], typer.Argument(help="Intent lines, e.g. \"add Buy milk\" \"toggle 1\"")
    ],
    view: Annotated[
        ViewMode | None, typer.Option("--view", "-v", help="Initial view mode")
    ] = None,
    output: Annotated[
        OutputFormat | None,
        typer.Option("--output", "-o", help="Output format (pretty/table/json/yaml)"),
    ] = None,
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
) -> None:
    """
    Run a sequence of intents in one session and print the resulting list.

    Task numbers are 1-based and refer to the list as currently displayed.

    Examples:
      tinytodo run "add Buy milk" "add Write report" "toggle 1"
      tinytodo run "add A" "add B" "delete 1" "undo" --json
    """
    service = build_service(view)
    if json_opt:
        output = OutputFormat.JSON
    if output is None:
        output = get_config_service().config.output.format

    logger = get_logger().getChild("run")
    # In json/yaml mode stdout carries only the final document
    machine = output in (OutputFormat.JSON, OutputFormat.YAML)
    side = get_console(stderr=machine)

    for line in intents:
        intent = parse_intent(line)
        if intent is None:
            continue
        if intent.action == "quit":
            break
        if intent.action == "help":
            side.print(HELP_TEXT)
        elif intent.action == "list":
            if machine:
                format_tasks_pretty(service.get_ordered(), service.view_mode, console=side)
            else:
                format_output(service.get_ordered(), output, service.view_mode)
        elif intent.action == "journal":
            format_journal(service.store.journal, console=side)
        else:
            changed = apply_intent(service, intent)
            logger.debug("intent %r changed=%s", line, changed)

    format_output(service.get_ordered(), output, service.view_mode)
