"""Tests for the 'journal' command."""

from typer.testing import CliRunner

from tinytodo_cli.commands import journal_command
from tinytodo_cli.utils.exit_codes import ERROR_INVALID_ARGS

runner = CliRunner()


def test_empty_journal():
    result = runner.invoke(journal_command.app, [])
    assert result.exit_code == 0
    assert result.output.strip() == "All Tasks"


def test_journal_lists_tasks_in_insertion_order():
    result = runner.invoke(
        journal_command.app, ["add first", "add second", "toggle 1", "view completed-last"]
    )
    assert result.exit_code == 0
    out = result.output
    assert out.index("first") < out.index("second")


def test_journal_reflects_undo():
    result = runner.invoke(journal_command.app, ["add A", "add B", "undo"])
    assert "A" in result.output
    assert "B" not in result.output


def test_non_mutating_intent_rejected():
    result = runner.invoke(journal_command.app, ["add A", "list"])
    assert result.exit_code == ERROR_INVALID_ARGS
    assert "'list' cannot be used with journal" in result.output
