"""Command 'shell' of tinytodo-cli"""

from typing import Annotated

import typer

from tinytodo_cli.models import IntentParseError, ViewMode
from tinytodo_cli.services import TaskService, UiDispatcher
from tinytodo_cli.utils.intent_parser import HELP_TEXT, Intent, parse_intent
from tinytodo_cli.utils.ui.console import get_console
from tinytodo_cli.utils.ui.formatters import format_error, format_journal, format_output

from .decorators import command_wrapper
from .utils import apply_intent, build_service

app = typer.Typer()

PROMPT = "[bold green]tinytodo>[/bold green] "


def _noop_hint(service: TaskService, intent: Intent) -> str:
    if intent.action == "undo":
        return "Nothing to undo"
    if intent.action == "redo":
        return "Nothing to redo"
    if intent.action in ("add", "note"):
        return "Empty title ignored"
    count = len(service.get_ordered())
    return f"No task #{(intent.index or 0) + 1} (list has {count})"


class ShellSession:
    """Interactive loop over one TaskService.

    The list is re-rendered only from change notifications: the store posts
    them to a UiDispatcher and the loop drains it after each intent.
    """

    def __init__(self, service: TaskService):
        self.service = service
        self.dispatcher = UiDispatcher()
        self.console = get_console()
        self.renders = 0

    def render(self) -> None:
        self.renders += 1
        format_output(self.service.get_ordered(), "pretty", self.service.view_mode)

    def handle(self, line: str) -> bool:
        """Process one line. Returns False when the session should end."""
        try:
            intent = parse_intent(line)
        except IntentParseError as e:
            format_error(str(e))
            return True
        if intent is None:
            return True

        if intent.action == "quit":
            return False
        if intent.action == "help":
            self.console.print(HELP_TEXT)
        elif intent.action == "list":
            self.render()
        elif intent.action == "journal":
            format_journal(self.service.store.journal)
        elif not apply_intent(self.service, intent):
            self.console.print(f"[dim]{_noop_hint(self.service, intent)}[/dim]")
        self.dispatcher.drain()
        return True

    def run(self) -> None:
        self.service.subscribe(self.render, self.dispatcher)
        try:
            self.render()
            while True:
                try:
                    line = self.console.input(PROMPT)
                except (EOFError, KeyboardInterrupt):
                    self.console.print()
                    break
                if not self.handle(line):
                    break
        finally:
            self.service.unsubscribe(self.render)


@app.command("shell")
@command_wrapper
def shell_command(
    view: Annotated[
        ViewMode | None, typer.Option("--view", "-v", help="Initial view mode")
    ] = None,
) -> None:
    """
    Start an interactive session. Type 'help' for the list of commands.

    Tasks live in memory only and are gone when the shell exits.
    """
    session = ShellSession(build_service(view))
    session.console.print("[bold]TinyTodo[/bold] [dim]a tiny todo for your tasks[/dim]")
    session.run()
