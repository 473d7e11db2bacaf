from datetime import date

import pytest

from rantme.services.mood_log import MoodEntry, MoodLog


def test_append_then_query_keeps_insertion_order():
    log = MoodLog()
    a = log.record("sad", "s1", day=date(2025, 1, 1))
    log.record("happy", "s2", day=date(2025, 1, 1))
    b = log.record("angry", "s1", day=date(2025, 1, 2))
    assert log.query_by_session("s1") == [a, b]
    assert log.query_by_session("missing") == []
    assert len(log) == 3


def test_entry_rejects_unknown_mood():
    with pytest.raises(ValueError):
        MoodEntry(date=date.today(), mood="meh", session="s1")


def test_appended_and_without_session_return_copies():
    log = MoodLog([MoodEntry(date(2025, 1, 1), "sad", "s1")])
    grown = log.appended(MoodEntry(date(2025, 1, 1), "happy", "s2"))
    assert len(log) == 1 and len(grown) == 2
    trimmed = grown.without_session("s1")
    assert [e.session for e in trimmed] == ["s2"]
    assert len(grown) == 2


def test_to_frame():
    empty = MoodLog().to_frame()
    assert empty.empty
    assert list(empty.columns) == ["date", "mood", "session", "score"]

    log = MoodLog()
    log.record("happy", "s1", day=date(2025, 1, 1))
    log.record("tired", "s1", day=date(2025, 1, 1))
    df = log.to_frame()
    assert df["score"].tolist() == [2, -1]
    assert df["mood"].tolist() == ["happy", "tired"]
