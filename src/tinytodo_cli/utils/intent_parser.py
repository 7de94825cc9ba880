"""Parse intent lines typed in the shell or passed to `tinytodo run`.

Grammar:
  add <title>              note <text>
  delete|del|rm <n>        toggle|done <n>
  undo | redo              view normal|completed-last
  list | journal | help    quit | exit

Numbers typed by the user are 1-based; Intent.index is the 0-based display
index handed to TaskService.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from tinytodo_cli.models import IntentParseError, ViewMode

IntentAction = Literal[
    "add", "note", "delete", "toggle", "undo", "redo", "view", "list", "journal", "help", "quit"
]

ALIASES: dict[str, IntentAction] = {
    "add": "add",
    "a": "add",
    "note": "note",
    "delete": "delete",
    "del": "delete",
    "rm": "delete",
    "toggle": "toggle",
    "done": "toggle",
    "t": "toggle",
    "undo": "undo",
    "u": "undo",
    "redo": "redo",
    "r": "redo",
    "view": "view",
    "list": "list",
    "ls": "list",
    "journal": "journal",
    "help": "help",
    "?": "help",
    "quit": "quit",
    "exit": "quit",
    "q": "quit",
}

HELP_TEXT = """\
add <title>                 add a task
note <text>                 add a task from a legacy note
delete <n>                  delete task number n (as displayed)
toggle <n>                  toggle task number n (as displayed)
undo / redo                 step through history
view normal|completed-last  change ordering
list                        show the list
journal                     show the journal tree
quit                        leave the shell"""


@dataclass(frozen=True)
class Intent:
    action: IntentAction
    text: str | None = None
    index: int | None = None
    mode: ViewMode | None = None


def _unquote(text: str) -> str:
    """Drop one pair of matching quotes wrapping the whole text."""
    quote = text[:1]
    if len(text) >= 2 and quote in "\"'" and text[-1] == quote and quote not in text[1:-1]:
        return text[1:-1]
    return text


def _parse_number(raw: str, action: str) -> int:
    try:
        number = int(raw)
    except ValueError:
        raise IntentParseError(f"'{action}' expects a task number, got '{raw}'") from None
    return number - 1


def parse_intent(line: str) -> Intent | None:
    """Parse one intent line.

    Returns:
        The Intent, or None for an empty line

    Raises:
        IntentParseError: For unknown verbs or malformed arguments
    """
    stripped = line.strip()
    if not stripped:
        return None

    verb, _, rest = stripped.partition(" ")
    action = ALIASES.get(verb.lower())
    if action is None:
        raise IntentParseError(f"Unknown command '{verb}'. Type 'help' for a list.")
    rest = rest.strip()

    if action in ("add", "note"):
        return Intent(action=action, text=_unquote(rest))

    if action in ("delete", "toggle"):
        if not rest:
            raise IntentParseError(f"'{action}' expects a task number")
        return Intent(action=action, index=_parse_number(rest, action))

    if action == "view":
        try:
            return Intent(action=action, mode=ViewMode(rest.lower()))
        except ValueError:
            valid = ", ".join(m.value for m in ViewMode)
            raise IntentParseError(f"Unknown view '{rest}'. Expected one of: {valid}") from None

    if rest:
        raise IntentParseError(f"'{action}' takes no arguments")
    return Intent(action=action)
