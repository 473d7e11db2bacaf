# rantme/services/mood_log.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, List, Optional

import pandas as pd

from .moods import MOOD_WEIGHTS, is_mood_tag


@dataclass(frozen=True)
class MoodEntry:
    date: date
    mood: str
    session: str  # session id

    def __post_init__(self):
        if not is_mood_tag(self.mood):
            raise ValueError(f"unknown mood tag: {self.mood!r}")


class MoodLog:
    """Append-only, insertion-ordered list of MoodEntry records."""

    def __init__(self, entries: Optional[Iterable[MoodEntry]] = None):
        self._entries: List[MoodEntry] = list(entries or [])

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MoodEntry]:
        return iter(self._entries)

    def __eq__(self, other) -> bool:
        return isinstance(other, MoodLog) and self._entries == other._entries

    def __repr__(self) -> str:
        return f"MoodLog({len(self._entries)} entries)"

    def append(self, entry: MoodEntry) -> None:
        self._entries.append(entry)

    def record(self, mood: str, session: str, day: Optional[date] = None) -> MoodEntry:
        entry = MoodEntry(date=day or date.today(), mood=mood, session=session)
        self.append(entry)
        return entry

    def appended(self, entry: MoodEntry) -> "MoodLog":
        """Copy of this log with `entry` at the end; self is left alone."""
        return MoodLog(self._entries + [entry])

    def query_by_session(self, session: str) -> List[MoodEntry]:
        return [e for e in self._entries if e.session == session]

    def without_session(self, session: str) -> "MoodLog":
        return MoodLog(e for e in self._entries if e.session != session)

    def moods(self) -> List[str]:
        return [e.mood for e in self._entries]

    def to_frame(self) -> pd.DataFrame:
        if not self._entries:
            return pd.DataFrame(columns=["date", "mood", "session", "score"])
        return pd.DataFrame(
            {
                "date": [e.date for e in self._entries],
                "mood": [e.mood for e in self._entries],
                "session": [e.session for e in self._entries],
                "score": [MOOD_WEIGHTS[e.mood] for e in self._entries],
            }
        )
