# rantme/services/state.py
"""
Application state for the chat page.

AppState is treated as immutable: every transition below returns a new
state and leaves its input untouched, so the turn flow can be tested
without Streamlit.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Dict, FrozenSet, List, Optional, Tuple

from ..config import CASCADE_MOOD_DELETE, CHECKLIST_ITEMS, DEFAULT_TONE, GREETING, TONES
from .mood_log import MoodEntry, MoodLog
from .moods import is_mood_tag
from .themes import Theme, resolve_theme

USER = "user"
ASSISTANT = "assistant"


@dataclass(frozen=True)
class Session:
    id: str
    name: str


@dataclass(frozen=True)
class ChatMessage:
    sender: str          # "user" | "assistant"
    text: str
    timestamp: str
    mood: Optional[str] = None


@dataclass(frozen=True)
class AppState:
    sessions: Tuple[Session, ...]
    messages: Dict[str, Tuple[ChatMessage, ...]]
    current_id: str
    tones: Dict[str, str]
    session_moods: Dict[str, str]
    mood_log: MoodLog = field(default_factory=MoodLog)
    checklists: Dict[str, FrozenSet[str]] = field(default_factory=dict)
    next_number: int = 2


def _clock(now: Optional[datetime] = None) -> str:
    return (now or datetime.now()).strftime("%I:%M %p")


def _greeting(now: Optional[datetime] = None) -> ChatMessage:
    return ChatMessage(sender=ASSISTANT, text=GREETING, timestamp=_clock(now))


def _require_session(state: AppState, session_id: str) -> None:
    if session_id not in state.messages:
        raise KeyError(f"unknown session: {session_id!r}")


# ---------- Construction ----------
def initial_state(now: Optional[datetime] = None) -> AppState:
    first = Session(id="default", name="Day 1")
    return AppState(
        sessions=(first,),
        messages={first.id: (_greeting(now),)},
        current_id=first.id,
        tones={first.id: DEFAULT_TONE},
        session_moods={first.id: "neutral"},
        checklists={first.id: frozenset()},
    )


# ---------- Accessors ----------
def current_session(state: AppState) -> Session:
    return next(s for s in state.sessions if s.id == state.current_id)


def current_messages(state: AppState) -> Tuple[ChatMessage, ...]:
    return state.messages.get(state.current_id, ())


def current_tone(state: AppState) -> str:
    return state.tones.get(state.current_id, DEFAULT_TONE)


def current_mood(state: AppState) -> str:
    return state.session_moods.get(state.current_id, "neutral")


def current_theme(state: AppState) -> Theme:
    return resolve_theme(current_mood(state))


def current_checklist(state: AppState) -> FrozenSet[str]:
    return state.checklists.get(state.current_id, frozenset())


def chat_history(state: AppState) -> List[Dict[str, str]]:
    """Current session as [{role, content}] for the chat model."""
    return [
        {"role": USER if m.sender == USER else ASSISTANT, "content": m.text}
        for m in current_messages(state)
    ]


# ---------- Transitions ----------
def new_session(state: AppState, now: Optional[datetime] = None) -> AppState:
    sess = Session(id=uuid.uuid4().hex, name=f"Day {state.next_number}")
    return replace(
        state,
        sessions=state.sessions + (sess,),
        messages={**state.messages, sess.id: (_greeting(now),)},
        current_id=sess.id,
        tones={**state.tones, sess.id: DEFAULT_TONE},
        session_moods={**state.session_moods, sess.id: "neutral"},
        checklists={**state.checklists, sess.id: frozenset()},
        next_number=state.next_number + 1,
    )


def select_session(state: AppState, session_id: str) -> AppState:
    _require_session(state, session_id)
    return replace(state, current_id=session_id)


def delete_session(state: AppState, session_id: str, cascade: bool = CASCADE_MOOD_DELETE) -> AppState:
    """
    Drop a session with its messages, tone, theme and checklist.
    Mood entries stay in the log unless `cascade` is set.
    """
    _require_session(state, session_id)
    if len(state.sessions) <= 1:
        raise ValueError("cannot delete the only session")

    def _drop(d: dict) -> dict:
        return {k: v for k, v in d.items() if k != session_id}

    sessions = tuple(s for s in state.sessions if s.id != session_id)
    current = state.current_id if state.current_id != session_id else sessions[0].id
    log = state.mood_log.without_session(session_id) if cascade else state.mood_log
    return replace(
        state,
        sessions=sessions,
        messages=_drop(state.messages),
        current_id=current,
        tones=_drop(state.tones),
        session_moods=_drop(state.session_moods),
        checklists=_drop(state.checklists),
        mood_log=log,
    )


def set_tone(state: AppState, tone: str) -> AppState:
    if tone not in TONES:
        raise ValueError(f"unknown tone: {tone!r}")
    return replace(state, tones={**state.tones, state.current_id: tone})


def add_user_message(
    state: AppState,
    text: str,
    mood: str,
    now: Optional[datetime] = None,
    day: Optional[date] = None,
) -> AppState:
    """Append the user's message, log its mood and retheme the session."""
    if not is_mood_tag(mood):
        raise ValueError(f"unknown mood tag: {mood!r}")
    sid = state.current_id
    msg = ChatMessage(sender=USER, text=text, timestamp=_clock(now), mood=mood)
    entry = MoodEntry(date=day or (now.date() if now else date.today()), mood=mood, session=sid)
    return replace(
        state,
        messages={**state.messages, sid: state.messages.get(sid, ()) + (msg,)},
        session_moods={**state.session_moods, sid: mood},
        mood_log=state.mood_log.appended(entry),
    )


def add_assistant_message(state: AppState, text: str, now: Optional[datetime] = None) -> AppState:
    sid = state.current_id
    msg = ChatMessage(sender=ASSISTANT, text=text, timestamp=_clock(now))
    return replace(state, messages={**state.messages, sid: state.messages.get(sid, ()) + (msg,)})


def toggle_checklist_item(state: AppState, item: str) -> AppState:
    if item not in CHECKLIST_ITEMS:
        raise ValueError(f"unknown checklist item: {item!r}")
    done = current_checklist(state)
    done = done - {item} if item in done else done | {item}
    return replace(state, checklists={**state.checklists, state.current_id: done})
