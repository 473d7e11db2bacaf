# rantme/services/moods.py
from __future__ import annotations

import re
from typing import Dict, List, Tuple

from ..config import MOOD_INCLUDE_DEPRESSED

MOOD_TAGS: Tuple[str, ...] = (
    "happy", "relieved", "neutral", "sad", "anxious",
    "angry", "tired", "stressed", "lonely", "depressed",
)

MOOD_WEIGHTS: Dict[str, int] = {
    "happy": 2,
    "relieved": 1,
    "neutral": 0,
    "sad": -2,
    "anxious": -1,
    "angry": -2,
    "tired": -1,
    "stressed": -1,
    "lonely": -1,
    "depressed": -2,
}

MOOD_EMOJI: Dict[str, str] = {
    "happy": "😊",
    "relieved": "😌",
    "neutral": "😐",
    "sad": "😢",
    "anxious": "😰",
    "angry": "😠",
    "tired": "😴",
    "stressed": "😫",
    "lonely": "😞",
    "depressed": "💧",
}

# external classifier vocabulary -> ours
_LABEL_MAP: Dict[str, str] = {
    "sadness": "sad",
    "anger": "angry",
    "fear": "anxious",
    "joy": "happy",
    "neutral": "neutral",
    "disgust": "stressed",
    "surprise": "relieved",
}

# ---- Lexicon (first match wins, order matters) ----
_LEXICON: List[Tuple[str, List[str]]] = [
    ("happy", ["happy", "glad", "grateful", "excited", "joy", "joyful", "great", "awesome", "thrilled"]),
    ("sad", ["sad", "down", "unhappy", "upset", "cry", "crying", "miserable", "heartbroken"]),
    ("angry", ["angry", "mad", "furious", "annoyed", "irritated", "pissed", "hate"]),
    ("stressed", ["stressed", "stress", "overwhelmed", "pressure", "deadline", "deadlines", "swamped"]),
    ("anxious", ["anxious", "nervous", "worried", "worry", "scared", "panic", "afraid"]),
]
_DEPRESSED_WORDS = ["depressed", "hopeless", "worthless", "empty", "numb"]


def _compile(words: List[str]) -> re.Pattern:
    return re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b")


_LEXICON_RE = [(mood, _compile(words)) for mood, words in _LEXICON]
_DEPRESSED_RE = _compile(_DEPRESSED_WORDS)


def is_mood_tag(value) -> bool:
    return isinstance(value, str) and value in MOOD_WEIGHTS


def classify_text(text, include_depressed: bool = MOOD_INCLUDE_DEPRESSED) -> str:
    """
    Keyword fallback when no remote detector is available.
    Returns exactly one MoodTag; 'neutral' when nothing matches.
    """
    if not isinstance(text, str) or not text.strip():
        return "neutral"
    s = text.lower()
    for mood, pattern in _LEXICON_RE:
        if pattern.search(s):
            return mood
    if include_depressed and _DEPRESSED_RE.search(s):
        return "depressed"
    return "neutral"


def normalize_label(label) -> str:
    """Map an emotion-model label (joy, anger, ...) onto a MoodTag. Total over all inputs."""
    if not isinstance(label, str):
        return "neutral"
    return _LABEL_MAP.get(label.lower(), "neutral")
