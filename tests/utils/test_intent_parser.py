"""Tests for the intent line parser."""

import pytest

from tinytodo_cli.models import IntentParseError, ViewMode
from tinytodo_cli.utils.intent_parser import ALIASES, Intent, parse_intent


@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_empty_line(line):
    assert parse_intent(line) is None


class TestTextIntents:
    def test_add_bare_words(self):
        assert parse_intent("add Buy milk") == Intent(action="add", text="Buy milk")

    def test_add_quoted(self):
        assert parse_intent("add 'Write report'").text == "Write report"

    def test_add_unbalanced_quote_kept_verbatim(self):
        assert parse_intent("add it's late").text == "it's late"

    def test_add_keeps_backslashes(self):
        assert parse_intent(r"add C:\temp\new").text == r"C:\temp\new"

    def test_add_keeps_inner_whitespace(self):
        assert parse_intent("add a  b").text == "a  b"

    def test_add_double_quoted(self):
        assert parse_intent('add "two  words"').text == "two  words"

    def test_add_inner_quotes_kept(self):
        assert parse_intent("add 'a' and 'b'").text == "'a' and 'b'"

    def test_add_without_text_gives_empty_title(self):
        assert parse_intent("add").text == ""

    def test_note(self):
        assert parse_intent("note call mom") == Intent(action="note", text="call mom")

    def test_verb_is_case_insensitive(self):
        assert parse_intent("ADD x").action == "add"


class TestNumberedIntents:
    @pytest.mark.parametrize("verb", ["delete", "del", "rm"])
    def test_delete_aliases(self, verb):
        assert parse_intent(f"{verb} 2") == Intent(action="delete", index=1)

    @pytest.mark.parametrize("verb", ["toggle", "done", "t"])
    def test_toggle_aliases(self, verb):
        assert parse_intent(f"{verb} 1") == Intent(action="toggle", index=0)

    def test_zero_maps_to_negative_index(self):
        assert parse_intent("delete 0").index == -1

    def test_missing_number(self):
        with pytest.raises(IntentParseError, match="expects a task number"):
            parse_intent("toggle")

    def test_non_numeric(self):
        with pytest.raises(IntentParseError, match="got 'first'"):
            parse_intent("delete first")


class TestView:
    def test_completed_last(self):
        assert parse_intent("view completed-last").mode is ViewMode.COMPLETED_LAST

    def test_case_insensitive(self):
        assert parse_intent("view NORMAL").mode is ViewMode.NORMAL

    def test_unknown_view(self):
        with pytest.raises(IntentParseError, match="Unknown view 'sorted'"):
            parse_intent("view sorted")


class TestBareIntents:
    @pytest.mark.parametrize(
        ("line", "action"),
        [
            ("undo", "undo"),
            ("u", "undo"),
            ("redo", "redo"),
            ("list", "list"),
            ("ls", "list"),
            ("journal", "journal"),
            ("?", "help"),
            ("exit", "quit"),
            ("q", "quit"),
        ],
    )
    def test_bare(self, line, action):
        assert parse_intent(line) == Intent(action=action)

    def test_arguments_rejected(self):
        with pytest.raises(IntentParseError, match="takes no arguments"):
            parse_intent("undo 2")


def test_unknown_verb():
    with pytest.raises(IntentParseError, match="Unknown command 'frobnicate'"):
        parse_intent("frobnicate now")


def test_every_alias_parses():
    for verb, action in ALIASES.items():
        line = {
            "delete": f"{verb} 1",
            "toggle": f"{verb} 1",
            "view": f"{verb} normal",
        }.get(action, verb)
        assert parse_intent(line).action == action
