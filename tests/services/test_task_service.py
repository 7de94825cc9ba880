"""Unit tests for TaskService, the UI-facing facade."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tinytodo_cli.models import LegacyNote, StoreNotInitializedError, TaskView, ViewMode
from tinytodo_cli.services import HistoryController, TaskService, TaskStore, UiDispatcher


def shown(service) -> list[tuple[str, bool]]:
    return [(v.title, v.done) for v in service.get_ordered()]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def test_requires_store():
    with pytest.raises(StoreNotInitializedError):
        TaskService(None)


def test_rejects_history_of_another_store(store):
    with pytest.raises(ValueError, match="different TaskStore"):
        TaskService(store, HistoryController(TaskStore()))


def test_accepts_history_of_same_store(store):
    history = HistoryController(store)
    assert TaskService(store, history).history is history


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def test_toggle_reorder_then_undo(service):
    service.add_task("Buy milk")
    service.add_task("Write report")
    service.toggle_at(0)
    assert shown(service) == [("Buy milk", True), ("Write report", False)]

    service.set_view_mode(ViewMode.COMPLETED_LAST)
    assert shown(service) == [("Write report", False), ("Buy milk", True)]

    service.undo()
    # view mode survives the undo, the toggle does not
    assert service.view_mode == ViewMode.COMPLETED_LAST
    assert shown(service) == [("Buy milk", False), ("Write report", False)]


def test_delete_then_undo(service):
    service.add_task("A")
    service.add_task("B")
    service.delete_at(0)
    assert shown(service) == [("B", False)]
    service.undo()
    assert shown(service) == [("A", False), ("B", False)]


def test_index_resolves_against_display_order(service):
    service.add_task("a")
    service.add_task("b")
    service.toggle_at(0)
    service.set_view_mode("completed-last")
    # display is [b, a(done)]; index 0 is "b"
    service.delete_at(0)
    assert shown(service) == [("a", True)]


# ---------------------------------------------------------------------------
# History properties
# ---------------------------------------------------------------------------


def test_n_undos_reach_empty_and_n_redos_restore(service):
    service.add_task("a")
    service.add_task("b")
    service.toggle_at(1)
    service.add_task("c")
    service.delete_at(0)
    final = shown(service)

    for _ in range(5):
        assert service.undo() is True
    assert shown(service) == []
    assert service.can_undo is False

    for _ in range(5):
        assert service.redo() is True
    assert shown(service) == final


def test_undo_then_redo_is_identity(service):
    service.add_task("a")
    service.toggle_at(0)
    before = shown(service)
    service.undo()
    service.redo()
    assert shown(service) == before


def test_new_intent_clears_redo(service):
    service.add_task("a")
    service.undo()
    assert service.can_redo is True
    service.add_task("b")
    assert service.can_redo is False
    assert service.redo() is False


def test_undo_redo_on_empty_history(service):
    assert service.undo() is False
    assert service.redo() is False
    assert shown(service) == []


def test_view_mode_is_not_undoable(service):
    service.add_task("a")
    service.set_view_mode(ViewMode.COMPLETED_LAST)
    assert service.history.undo_depth == 1
    service.undo()
    assert service.view_mode == ViewMode.COMPLETED_LAST


# ---------------------------------------------------------------------------
# Silent no-ops
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("title", ["", "   ", "\n", None])
def test_blank_add_is_dropped(service, title):
    calls = []
    service.subscribe(lambda: calls.append(1))
    assert service.add_task(title) is False
    assert shown(service) == []
    assert service.can_undo is False
    assert calls == []


def test_add_trims_and_folds_newlines(service):
    service.add_task("  two\nlines ")
    assert shown(service) == [("two lines", False)]


@pytest.mark.parametrize("index", [-1, 1, 99])
def test_out_of_range_index_is_dropped(service, index):
    service.add_task("a")
    calls = []
    service.subscribe(lambda: calls.append(1))
    assert service.delete_at(index) is False
    assert service.toggle_at(index) is False
    assert shown(service) == [("a", False)]
    assert service.history.undo_depth == 1
    assert calls == []


def test_unknown_view_mode_raises(service):
    with pytest.raises(ValueError):
        service.set_view_mode("alphabetical")


# ---------------------------------------------------------------------------
# Legacy notes
# ---------------------------------------------------------------------------


def test_add_legacy_note(service):
    assert service.add_legacy_note(LegacyNote(text=" old note ")) is True
    assert shown(service) == [("old note", False)]
    service.undo()
    assert shown(service) == []


def test_blank_legacy_note_is_dropped(service):
    assert service.add_legacy_note(LegacyNote(text="  ")) is False
    assert service.can_undo is False


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def test_get_ordered_returns_read_only_views(service):
    service.add_task("a")
    view = service.get_ordered()[0]
    assert isinstance(view, TaskView)
    with pytest.raises(ValidationError):
        view.done = True
    assert shown(service) == [("a", False)]


def test_iter_tasks_is_a_stable_snapshot(service):
    service.add_task("a")
    it = service.iter_tasks()
    service.add_task("b")
    assert [v.title for v in it] == ["a"]


def test_journal_lines(service):
    service.add_task("a")
    service.add_task("b")
    assert service.journal_lines() == [
        "* Category: All Tasks",
        "  - Task: a",
        "  - Task: b",
    ]


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------


def test_subscribe_and_unsubscribe(service):
    calls = []

    def observer():
        calls.append(1)

    service.subscribe(observer)
    service.add_task("a")
    service.toggle_at(0)
    service.undo()
    service.set_view_mode(ViewMode.NORMAL)
    assert len(calls) == 4

    service.unsubscribe(observer)
    service.add_task("b")
    assert len(calls) == 4


def test_dispatcher_observer_sees_final_state(service):
    dispatcher = UiDispatcher()
    seen = []
    service.subscribe(lambda: seen.append(shown(service)), dispatcher)
    service.add_task("a")
    service.add_task("b")
    assert seen == []
    assert dispatcher.drain() == 1
    assert seen == [[("a", False), ("b", False)]]
