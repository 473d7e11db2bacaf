# rantme/services/chat.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional

from ..config import REPLY_FALLBACK
from . import emotion, llm
from .moods import classify_text, normalize_label
from .state import (
    AppState,
    add_assistant_message,
    add_user_message,
    chat_history,
    current_tone,
)

logger = logging.getLogger(__name__)

Detector = Callable[[str], str]
Responder = Callable[[List[Dict[str, str]], str], str]


def resolve_mood(text: str, detect: Optional[Detector] = None) -> str:
    """
    Remote label -> MoodTag when a detector is in play, lexicon otherwise.
    A failing detector counts as 'neutral'.
    """
    if detect is None:
        if not emotion.remote_available():
            return classify_text(text)
        detect = emotion.detect_emotion
    try:
        label = detect(text) or "neutral"
    except Exception as e:
        logger.warning("Emotion detection failed, using neutral: %s", e)
        label = "neutral"
    return normalize_label(label)


def fetch_reply(history: List[Dict[str, str]], tone: str, reply: Optional[Responder] = None) -> str:
    reply = reply or llm.generate_reply
    try:
        return reply(history, tone)
    except Exception as e:
        logger.warning("Chat reply failed, using fallback: %s", e)
        return REPLY_FALLBACK


def handle_turn(
    state: AppState,
    text: str,
    *,
    detect: Optional[Detector] = None,
    reply: Optional[Responder] = None,
    now: Optional[datetime] = None,
) -> AppState:
    """
    One user turn: mood first, then the chat call with the updated history.
    Blank input leaves the state as it was.
    """
    user_text = (text or "").strip()
    if not user_text:
        return state

    mood = resolve_mood(user_text, detect)
    state = add_user_message(state, user_text, mood, now=now)
    answer = fetch_reply(chat_history(state), current_tone(state), reply)
    return add_assistant_message(state, answer, now=now)
