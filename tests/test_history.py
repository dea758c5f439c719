from __future__ import annotations

from itertools import count

import pytest
from srt_cleaner.history import MAX_HISTORY, HistoryManager, HistoryState


def make_history(initial: str = "") -> HistoryManager:
    ticks = count(1000)
    return HistoryManager(initial, clock=lambda: next(ticks))


def test_initial_state_has_single_entry() -> None:
    history = make_history("start")

    assert len(history) == 1
    assert history.cursor == 0
    assert history.current == HistoryState("start", 1000)
    assert not history.can_undo
    assert not history.can_redo
    assert history.undo() is None
    assert history.redo() is None


def test_undo_and_redo_walk_the_timeline() -> None:
    history = make_history()
    history.record("a")
    history.record("b")
    history.record("c")

    assert history.undo() == "b"
    assert history.undo() == "a"
    assert history.undo() == ""
    assert history.undo() is None
    assert history.redo() == "a"
    assert history.redo() == "b"
    assert history.redo() == "c"
    assert history.redo() is None


def test_undo_stops_at_first_recorded_snapshot_when_seeded() -> None:
    history = make_history("a")
    history.record("b")
    history.record("c")

    assert history.undo() == "b"
    assert history.undo() == "a"
    assert history.undo() is None
    assert history.cursor == 0


def test_record_after_undo_discards_future() -> None:
    history = make_history("a")
    history.record("b")
    history.record("c")
    history.undo()

    history.record("d")

    assert [entry.content for entry in history.entries] == ["a", "b", "d"]
    assert history.redo() is None
    assert not history.can_redo
    assert history.undo() == "b"


def test_eviction_keeps_last_fifty_entries() -> None:
    history = make_history("seed")
    for index in range(60):
        history.record(f"edit {index}")

    assert len(history) == MAX_HISTORY
    assert history.cursor == MAX_HISTORY - 1
    assert history.current.content == "edit 59"
    assert history.entries[0].content == "edit 10"

    undone = 0
    while history.undo() is not None:
        undone += 1
    assert undone == MAX_HISTORY - 1
    assert history.current.content == "edit 10"


def test_eviction_after_undo_keeps_cursor_on_new_entry() -> None:
    history = HistoryManager("0", max_entries=3)
    history.record("1")
    history.record("2")
    history.undo()
    history.record("x")
    history.record("y")

    assert [entry.content for entry in history.entries] == ["1", "x", "y"]
    assert history.cursor == 2


def test_timestamps_come_from_clock() -> None:
    history = make_history("a")
    history.record("b")

    assert [entry.timestamp for entry in history.entries] == [1000, 1001]


def test_reset_starts_fresh_timeline() -> None:
    history = make_history("a")
    history.record("b")

    history.reset("other")

    assert [entry.content for entry in history.entries] == ["other"]
    assert history.cursor == 0
    assert not history.can_undo


def test_entries_is_a_copy() -> None:
    history = make_history("a")
    entries = history.entries
    history.record("b")

    assert len(entries) == 1


def test_rejects_non_positive_limit() -> None:
    with pytest.raises(ValueError):
        HistoryManager(max_entries=0)
