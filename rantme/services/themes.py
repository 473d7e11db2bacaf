# rantme/services/themes.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Theme:
    background: str
    text_color: str
    tint: str


def _gradient(top: str, bottom: str) -> str:
    return f"linear-gradient(to bottom, {top}, {bottom})"


# Inverse, calming palette: each mood gets colors that counter it.
THEMES: Dict[str, Theme] = {
    "sad":       Theme(_gradient("#A5D6A7", "#E8F5E9"), "#1B5E20", "#A2C8A3"),
    "angry":     Theme(_gradient("#64B5F6", "#E3F2FD"), "#0D47A1", "#90B2E3"),
    "anxious":   Theme(_gradient("#FFF176", "#FFFDE7"), "#F57F17", "#FBBF80"),
    "stressed":  Theme(_gradient("#CE93D8", "#F3E5F5"), "#4A148C", "#B280CC"),
    "depressed": Theme(_gradient("#B0BEC5", "#FFFFFF"), "#37474F", "#90A4AE"),
    "neutral":   Theme(_gradient("#FFFFFF", "#FFFFFF"), "#000000", "#FFFFFF"),
    "happy":     Theme(_gradient("#4DD0E1", "#E0F7FA"), "#006064", "#4DB6AC"),
    "relieved":  Theme(_gradient("#AED581", "#F1F8E9"), "#33691E", "#A5D6A7"),
    "tired":     Theme(_gradient("#FFB74D", "#FFF3E0"), "#E65100", "#FFB380"),
    "lonely":    Theme(_gradient("#4FC3F7", "#E1F5FE"), "#01579B", "#64B5F6"),
}

NEUTRAL_THEME = THEMES["neutral"]


def resolve_theme(mood) -> Theme:
    if not isinstance(mood, str):
        return NEUTRAL_THEME
    return THEMES.get(mood, NEUTRAL_THEME)
