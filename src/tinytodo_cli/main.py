"""Main entry point for TinyTodo CLI."""

import typer

from tinytodo_cli import __version__
from tinytodo_cli.commands import config, journal_command, run_command, shell_command
from tinytodo_cli.utils.ui.console import get_console

app = typer.Typer(
    name="tinytodo",
    help="A tiny in-memory todo list with undo/redo",
    no_args_is_help=True,
)

app.add_typer(config.app, name="config", help="Configuration management")

# Single-command modules are mounted at the top level
app.command("shell")(shell_command.shell_command)
app.command("run")(run_command.run_command)
app.command("journal")(journal_command.journal_command)


@app.command()
def version() -> None:
    """Show version information."""
    get_console().print(f"[bold]TinyTodo CLI[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
