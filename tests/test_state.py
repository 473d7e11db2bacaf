from datetime import date, datetime

import pytest

from rantme.config import GREETING
from rantme.services.state import (
    add_assistant_message,
    add_user_message,
    chat_history,
    current_checklist,
    current_messages,
    current_session,
    current_theme,
    current_tone,
    delete_session,
    initial_state,
    new_session,
    select_session,
    set_tone,
    toggle_checklist_item,
)

NOW = datetime(2025, 3, 1, 21, 5)


def test_initial_state():
    state = initial_state(now=NOW)
    assert current_session(state).name == "Day 1"
    msgs = current_messages(state)
    assert len(msgs) == 1
    assert msgs[0].sender == "assistant" and msgs[0].text == GREETING
    assert msgs[0].timestamp == "09:05 PM"
    assert current_tone(state) == "empathetic"
    assert len(state.mood_log) == 0


def test_new_session_names_stay_unique_after_delete():
    s = new_session(initial_state())          # Day 2
    s = new_session(s)                        # Day 3
    s = delete_session(s, s.sessions[1].id)   # drop Day 2
    s = new_session(s)
    assert [x.name for x in s.sessions] == ["Day 1", "Day 3", "Day 4"]
    assert current_session(s).name == "Day 4"


def test_user_message_logs_mood_and_themes_session():
    s0 = initial_state()
    s1 = add_user_message(s0, "so mad", "angry", now=NOW)
    assert len(s0.mood_log) == 0  # input untouched
    assert current_messages(s1)[-1].mood == "angry"
    entries = s1.mood_log.query_by_session("default")
    assert [e.mood for e in entries] == ["angry"]
    assert entries[0].date == date(2025, 3, 1)
    assert current_theme(s1).text_color == "#0D47A1"


def test_theme_follows_selected_session():
    s = add_user_message(initial_state(), "ugh", "angry")
    s = new_session(s)
    assert current_theme(s).text_color == "#000000"
    s = select_session(s, "default")
    assert current_theme(s).text_color == "#0D47A1"


def test_chat_history_roles():
    s = add_user_message(initial_state(), "hi", "neutral")
    s = add_assistant_message(s, "hey you")
    assert chat_history(s) == [
        {"role": "assistant", "content": GREETING},
        {"role": "user", "content": "hi"},
        {"role": "assistant", "content": "hey you"},
    ]


def test_tone_is_per_session():
    s = set_tone(initial_state(), "funny")
    s = new_session(s)
    assert current_tone(s) == "empathetic"
    s = select_session(s, "default")
    assert current_tone(s) == "funny"
    with pytest.raises(ValueError):
        set_tone(s, "sarcastic")


def test_delete_keeps_mood_entries_by_default():
    s = new_session(initial_state())
    sid = s.current_id
    s = add_user_message(s, "sad day", "sad")
    kept = delete_session(s, sid)
    assert kept.current_id == "default"
    assert sid not in kept.messages
    assert len(kept.mood_log) == 1

    dropped = delete_session(s, sid, cascade=True)
    assert len(dropped.mood_log) == 0


def test_delete_rules():
    s = initial_state()
    with pytest.raises(ValueError):
        delete_session(s, "default")
    with pytest.raises(KeyError):
        delete_session(new_session(s), "nope")
    with pytest.raises(KeyError):
        select_session(s, "nope")


def test_add_user_message_rejects_bad_mood():
    with pytest.raises(ValueError):
        add_user_message(initial_state(), "hm", "meh")


def test_checklist_toggle():
    s = toggle_checklist_item(initial_state(), "Drink some water")
    assert current_checklist(s) == {"Drink some water"}
    s = toggle_checklist_item(s, "Drink some water")
    assert current_checklist(s) == frozenset()
    with pytest.raises(ValueError):
        toggle_checklist_item(s, "Buy a boat")
