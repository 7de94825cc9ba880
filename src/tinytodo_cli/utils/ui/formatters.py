"""Output formatters for different formats."""

import json
from collections.abc import Sequence
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from tinytodo_cli.models import CategoryComposite, JournalComponent, TaskLeaf, TaskView, ViewMode

from .console import get_console

STATUS_ICONS = {
    "open": "☐",
    "done": "☑",
}

VIEW_LABELS = {
    ViewMode.NORMAL: "Normal",
    ViewMode.COMPLETED_LAST: "Completed Last",
}


def tasks_to_dicts(tasks: Sequence[TaskView]) -> list[dict[str, Any]]:
    """Serialize tasks with their 1-based display number."""
    return [
        {"number": n, "title": task.title, "done": task.done}
        for n, task in enumerate(tasks, start=1)
    ]


def format_output(
    tasks: Sequence[TaskView],
    output_format: str = "pretty",
    view_mode: ViewMode = ViewMode.NORMAL,
) -> None:
    """Format and display the task list based on format."""
    if output_format == "json":
        print(json.dumps(tasks_to_dicts(tasks), indent=2, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.safe_dump(tasks_to_dicts(tasks), default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(tasks, view_mode)
    else:
        # Default to pretty
        format_tasks_pretty(tasks, view_mode)


def format_table(
    tasks: Sequence[TaskView],
    view_mode: ViewMode = ViewMode.NORMAL,
    console: Console | None = None,
) -> None:
    """Format tasks as a table."""
    console = console or get_console()
    if not tasks:
        console.print("[yellow]No tasks[/yellow]")
        return

    table = Table(title=f"Tasks ({VIEW_LABELS[view_mode]})", show_header=True)
    table.add_column("#", style="task.index", justify="right")
    table.add_column("Done", justify="center")
    table.add_column("Title")
    for row in tasks_to_dicts(tasks):
        table.add_row(
            str(row["number"]),
            "✓" if row["done"] else "",
            Text(row["title"], style="task.done" if row["done"] else "task.open"),
        )
    console.print(table)


def format_tasks_pretty(
    tasks: Sequence[TaskView],
    view_mode: ViewMode = ViewMode.NORMAL,
    console: Console | None = None,
) -> None:
    """Checkbox-style list, one task per line."""
    console = console or get_console()
    done_count = sum(1 for t in tasks if t.done)
    console.print(
        f"[bold]Tasks[/bold] [dim]({done_count}/{len(tasks)} done, "
        f"view: {VIEW_LABELS[view_mode]})[/dim]"
    )
    if not tasks:
        console.print("  [dim](empty)[/dim]")
        return
    for number, task in enumerate(tasks, start=1):
        line = Text(f"  {number:>2}. ", style="task.index")
        line.append(STATUS_ICONS["done" if task.done else "open"] + " ")
        line.append(task.title, style="task.done" if task.done else "task.open")
        console.print(line)


def _add_journal_node(tree: Tree, component: JournalComponent) -> None:
    if isinstance(component, CategoryComposite):
        branch = tree.add(Text(component.name, style="journal.category"))
        for child in component.children:
            _add_journal_node(branch, child)
    elif isinstance(component, TaskLeaf):
        tree.add(Text(component.name, style="task.done" if component.task.done else "task.open"))


def format_journal(root: CategoryComposite, console: Console | None = None) -> None:
    """Render the journal composite as a tree."""
    tree = Tree(Text(root.name, style="journal.category"))
    for child in root.children:
        _add_journal_node(tree, child)
    (console or get_console()).print(tree)


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {message}")
