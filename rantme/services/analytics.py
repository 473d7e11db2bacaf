# rantme/services/analytics.py
from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional

import pandas as pd

from ..config import MOOD_SCORE_MODE
from .mood_log import MoodLog
from .moods import MOOD_EMOJI, MOOD_TAGS, MOOD_WEIGHTS

SCORE_MODES = ("average", "sum")

STATS_COLUMNS = ["session_id", "session", "entries", "score", "cumulative", "dominant_mood", "emoji"]


@dataclass(frozen=True)
class WeeklySummary:
    score: int
    label: str   # "Positive" | "Negative" | "Neutral"
    emoji: str

    def display(self) -> str:
        return f"{self.label} {self.emoji}"


def score_moods(moods: List[str], mode: str = MOOD_SCORE_MODE) -> float:
    """
    average: mean weight rounded to 2 places (chart domain -2..2)
    sum:     plain weight total
    Empty input scores 0 in both modes.
    """
    if mode not in SCORE_MODES:
        raise ValueError(f"unknown score mode: {mode!r}")
    if not moods:
        return 0.0
    total = sum(MOOD_WEIGHTS.get(m, 0) for m in moods)
    if mode == "sum":
        return float(total)
    return round(total / len(moods), 2)


def dominant_mood(moods: List[str]) -> str:
    """Most frequent mood; ties go to whichever appeared first."""
    if not moods:
        return "neutral"
    counts = Counter(moods)
    # Counter keeps first-insertion order and max() returns the first maximal item
    return max(counts, key=counts.get)


def session_stats(log: MoodLog, sessions: Iterable, mode: str = MOOD_SCORE_MODE) -> pd.DataFrame:
    """
    One row per session, in session order. `sessions` items need `.id` and `.name`.
    Entries whose session is not listed (orphans) are ignored here.
    """
    rows = []
    running = 0.0
    for sess in sessions:
        moods = [e.mood for e in log.query_by_session(sess.id)]
        score = score_moods(moods, mode)
        running = round(running + score, 2)
        dom = dominant_mood(moods)
        rows.append({
            "session_id": sess.id,
            "session": sess.name,
            "entries": len(moods),
            "score": score,
            "cumulative": running,
            "dominant_mood": dom,
            "emoji": MOOD_EMOJI.get(dom, "❓"),
        })
    return pd.DataFrame(rows, columns=STATS_COLUMNS)


def weekly_summary(log: MoodLog) -> WeeklySummary:
    total = sum(MOOD_WEIGHTS.get(m, 0) for m in log.moods())
    if total > 0:
        return WeeklySummary(total, "Positive", "😊")
    if total < 0:
        return WeeklySummary(total, "Negative", "😞")
    return WeeklySummary(total, "Neutral", "😐")


def mood_distribution(log: MoodLog, session: Optional[str] = None) -> pd.Series:
    entries = log.query_by_session(session) if session is not None else list(log)
    moods = pd.Series([e.mood for e in entries], dtype=object)
    counts = moods.value_counts().reindex(list(MOOD_TAGS), fill_value=0).astype(int)
    return counts.rename("entries")
