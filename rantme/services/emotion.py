# rantme/services/emotion.py
from __future__ import annotations

import logging
import os
from typing import Any

import requests

from .. import config

logger = logging.getLogger(__name__)


def _api_url() -> str:
    return os.getenv("EMOTION_API_URL") or config.EMOTION_API_URL

def _api_key() -> str:
    return os.getenv("HUGGINGFACE_API_KEY") or config.HUGGINGFACE_API_KEY


def remote_available() -> bool:
    return config.MOOD_SOURCE == "remote" and bool(_api_key())


def _score(candidate: dict) -> float:
    s = candidate.get("score")
    return float(s) if isinstance(s, (int, float)) else 0.0


def _top_label(data: Any) -> str:
    """
    Expected payload: [[{"label": str, "score": float}, ...]].
    Anything else reads as 'neutral'.
    """
    if not isinstance(data, list) or not data or not isinstance(data[0], list):
        return "neutral"
    candidates = [
        c for c in data[0]
        if isinstance(c, dict) and isinstance(c.get("label"), str) and c["label"]
    ]
    if not candidates:
        return "neutral"
    top = max(candidates, key=_score)
    label = top["label"].lower()
    logger.info("Detected emotion: %s (score: %.4f)", label, _score(top))
    return label


def detect_emotion(text: str) -> str:
    """
    Raw emotion-model label for `text` (e.g. 'joy', 'anger').
    Raises ValueError on empty input and requests errors on transport/HTTP failure.
    """
    if not isinstance(text, str) or not text.strip():
        raise ValueError("Invalid text")
    r = requests.post(
        _api_url(),
        headers={
            "Authorization": f"Bearer {_api_key()}",
            "Content-Type": "application/json",
        },
        json={"inputs": text},
        timeout=config.HTTP_TIMEOUT,
    )
    r.raise_for_status()
    return _top_label(r.json())
