from rantme.services.moods import MOOD_TAGS, normalize_label
from rantme.services.themes import NEUTRAL_THEME, THEMES, resolve_theme


def test_every_mood_has_a_theme():
    assert set(THEMES) == set(MOOD_TAGS)


def test_anger_label_resolves_to_angry_theme():
    theme = resolve_theme(normalize_label("Anger"))
    assert theme.text_color == "#0D47A1"
    assert theme.background.startswith("linear-gradient")


def test_unknown_mood_falls_back_to_neutral():
    assert resolve_theme("ecstatic") == NEUTRAL_THEME
    assert resolve_theme(None) == NEUTRAL_THEME
    assert NEUTRAL_THEME.text_color == "#000000"
