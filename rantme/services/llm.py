# rantme/services/llm.py
from __future__ import annotations

import logging
import os
from typing import Any, Dict, List

import requests

from .. import config
from .prompts import build_chat_messages

logger = logging.getLogger(__name__)

NO_REPLY = "Sorry, I didn’t quite catch that."
_ROLES = {"user", "assistant"}


# ---- Config (OpenRouter) ----
def _api_url() -> str:
    return os.getenv("OPENROUTER_URL") or config.OPENROUTER_URL

def _api_key() -> str:
    return os.getenv("OPENROUTER_API_KEY") or config.OPENROUTER_API_KEY

def _model() -> str:
    return os.getenv("CHAT_MODEL") or config.CHAT_MODEL

# ---- Status for UI debug ----
_LAST_STATUS: dict = {}

def get_last_llm_status() -> dict:
    return _LAST_STATUS or {"path": "unknown"}


def _validate(history: Any, tone: Any) -> None:
    if not isinstance(history, list) or not isinstance(tone, str):
        raise ValueError("Invalid payload")
    if tone not in config.TONES:
        raise ValueError(f"unknown tone: {tone!r}")
    for m in history:
        if not isinstance(m, dict) or m.get("role") not in _ROLES or not isinstance(m.get("content"), str):
            raise ValueError(f"bad history message: {m!r}")


def _reply_text(data: Any) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return NO_REPLY
    return content if isinstance(content, str) and content else NO_REPLY


def generate_reply(history: List[Dict[str, str]], tone: str) -> str:
    """
    Send the conversation to the chat model in the chosen tone.
    Raises on bad input or HTTP failure; the turn handler picks the fallback text.
    """
    _validate(history, tone)
    status = {"provider": "openrouter", "model": _model(), "path": "", "reason": ""}
    try:
        r = requests.post(
            _api_url(),
            headers={
                "Authorization": f"Bearer {_api_key()}",
                "Content-Type": "application/json",
            },
            json={
                "model": _model(),
                "messages": build_chat_messages(history, tone),
                "temperature": 0.75,
                "max_tokens": 512,
            },
            timeout=config.HTTP_TIMEOUT,
        )
        r.raise_for_status()
    except requests.RequestException as e:
        status.update({"path": "error", "reason": str(e)[:180]})
        _LAST_STATUS.clear()
        _LAST_STATUS.update(status)
        logger.warning("Chat completion failed: %s", e)
        raise

    reply = _reply_text(r.json())
    status.update({"path": "llm_ok" if reply != NO_REPLY else "empty", "raw_sample": reply[:180]})
    _LAST_STATUS.clear()
    _LAST_STATUS.update(status)
    return reply
