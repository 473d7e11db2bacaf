from datetime import date

import pytest

from rantme.services.analytics import (
    dominant_mood,
    mood_distribution,
    score_moods,
    session_stats,
    weekly_summary,
)
from rantme.services.mood_log import MoodLog
from rantme.services.state import Session

S1 = Session(id="s1", name="Day 1")
S2 = Session(id="s2", name="Day 2")


def _log(*pairs):
    log = MoodLog()
    for mood, sid in pairs:
        log.record(mood, sid, day=date(2025, 3, 1))
    return log


def test_dominant_mood_and_average_score():
    log = _log(("sad", "s1"), ("sad", "s1"), ("happy", "s1"))
    df = session_stats(log, [S1], mode="average")
    row = df.iloc[0]
    assert row["dominant_mood"] == "sad"
    assert row["score"] == pytest.approx(-0.67)
    assert row["emoji"] == "😢"
    assert row["entries"] == 3


def test_empty_session_scores_zero_and_is_neutral():
    log = _log(("happy", "s1"))
    df = session_stats(log, [S1, S2])
    empty = df[df["session_id"] == "s2"].iloc[0]
    assert empty["score"] == 0
    assert empty["dominant_mood"] == "neutral"
    assert empty["entries"] == 0


def test_tie_goes_to_first_seen_mood():
    assert dominant_mood(["angry", "happy", "happy", "angry"]) == "angry"
    assert dominant_mood(["tired", "lonely"]) == "tired"
    assert dominant_mood([]) == "neutral"


def test_sum_mode_and_cumulative_column():
    log = _log(("happy", "s1"), ("relieved", "s1"), ("anxious", "s2"))
    df = session_stats(log, [S1, S2], mode="sum")
    assert df["score"].tolist() == [3.0, -1.0]
    assert df["cumulative"].tolist() == [3.0, 2.0]
    assert df["session"].tolist() == ["Day 1", "Day 2"]


def test_unknown_score_mode_rejected():
    with pytest.raises(ValueError):
        score_moods(["happy"], mode="median")


def test_weekly_summary_positive_across_sessions():
    log = _log(("happy", "s1"), ("relieved", "s1"), ("anxious", "s2"))
    summary = weekly_summary(log)
    assert summary.score == 2
    assert summary.label == "Positive"


def test_weekly_summary_neutral_and_negative():
    assert weekly_summary(MoodLog()).label == "Neutral"
    assert weekly_summary(_log(("neutral", "s1"))).label == "Neutral"
    assert weekly_summary(_log(("angry", "s1"), ("happy", "s1"), ("tired", "s2"))).label == "Negative"


def test_aggregation_is_repeatable():
    log = _log(("sad", "s1"), ("happy", "s2"), ("lonely", "s2"))
    first = session_stats(log, [S1, S2])
    second = session_stats(log, [S1, S2])
    assert first.equals(second)
    assert weekly_summary(log) == weekly_summary(log)


def test_orphaned_entries_only_count_toward_summary():
    log = _log(("happy", "gone"), ("sad", "s1"))
    df = session_stats(log, [S1])
    assert df["entries"].tolist() == [1]
    assert weekly_summary(log).score == 0


def test_mood_distribution_zero_fills():
    log = _log(("sad", "s1"), ("sad", "s2"), ("happy", "s2"))
    dist = mood_distribution(log)
    assert len(dist) == 10
    assert dist["sad"] == 2 and dist["happy"] == 1 and dist["tired"] == 0
    assert mood_distribution(log, "s1")["sad"] == 1


def test_mood_distribution_empty_log():
    dist = mood_distribution(MoodLog())
    assert dist.sum() == 0
    assert list(dist.index)[:3] == ["happy", "relieved", "neutral"]
    assert dist.name == "entries"
