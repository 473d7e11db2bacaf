from __future__ import annotations

import html

import altair as alt
import pandas as pd
import streamlit as st

from .config import APP_TITLE, CHECKLIST_ITEMS, MOOD_SCORE_MODE, TONES
from .services.analytics import mood_distribution, session_stats, weekly_summary
from .services.chat import handle_turn
from .services.emotion import remote_available
from .services.llm import get_last_llm_status, _model
from .services.moods import MOOD_EMOJI
from .services.state import (
    AppState,
    current_checklist,
    current_messages,
    current_mood,
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
from .services.themes import NEUTRAL_THEME

ACCENT = "#9C83D3"
TONE_LABELS = {
    "empathetic": "Empathetic",
    "motivational": "Motivational",
    "reflective": "Reflective",
    "funny": "Light-hearted",
}


# ---------- State helpers ----------
def _state() -> AppState:
    if "app_state" not in st.session_state:
        st.session_state.app_state = initial_state()
    return st.session_state.app_state

def _put(state: AppState) -> None:
    st.session_state.app_state = state

def _on_new_session():
    _put(new_session(_state()))

def _on_select(session_id: str):
    _put(select_session(_state(), session_id))

def _on_delete(session_id: str):
    _put(delete_session(_state(), session_id))

def _on_tone(widget_key: str):
    _put(set_tone(_state(), st.session_state[widget_key]))

def _on_check(item: str):
    _put(toggle_checklist_item(_state(), item))

def _toggle_stats():
    st.session_state.show_stats = not st.session_state.get("show_stats", False)


# ---------- Theming ----------
def _apply_theme(state: AppState) -> None:
    theme = current_theme(state)
    themed = theme != NEUTRAL_THEME
    side_bg = theme.tint if themed else "#D8CCF1"
    st.markdown(
        f"""
        <style>
        .stApp {{
          background: {theme.background};
          color: {theme.text_color};
          transition: background 1s ease-in-out;
        }}
        section[data-testid="stSidebar"] {{
          background-color: {side_bg};
        }}
        .rant-bubble {{
          padding: 8px 14px; border-radius: 10px; margin: 4px 0;
          box-shadow: 0 1px 2px rgba(0,0,0,.12); max-width: 38rem;
        }}
        .rant-bot  {{ background: #ffffff; color: #1f2937; }}
        .rant-user {{ background: {ACCENT}; color: #ffffff; margin-left: auto; }}
        .rant-user.moody {{ background: #ffffff; color: #000000; }}
        .rant-ts {{ font-size: 11px; opacity: .6; text-align: right; margin-top: 2px; }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def _bubble(msg) -> str:
    if msg.sender == "assistant":
        cls = "rant-bubble rant-bot"
    else:
        cls = "rant-bubble rant-user" + (" moody" if msg.mood and msg.mood != "neutral" else "")
    text = html.escape(msg.text).replace("\n", "<br>")
    return f'<div class="{cls}"><div>{text}</div><div class="rant-ts">{msg.timestamp}</div></div>'


# ---------- Stats ----------
def _session_chart(df: pd.DataFrame) -> alt.Chart:
    y_scale = alt.Scale(domain=[-2, 2]) if MOOD_SCORE_MODE == "average" else alt.Scale(zero=True, nice=True)
    y_title = "Avg mood" if MOOD_SCORE_MODE == "average" else "Mood points"
    base = alt.Chart(df).encode(
        x=alt.X("session:N", sort=None, title="Session"),
        y=alt.Y("score:Q", title=y_title, scale=y_scale),
        tooltip=[
            alt.Tooltip("session:N", title="Session"),
            alt.Tooltip("score:Q", title=y_title, format="+.2f"),
            alt.Tooltip("entries:Q", title="Entries"),
            alt.Tooltip("dominant_mood:N", title="Mostly"),
        ],
    )
    line = base.mark_line(color=ACCENT, strokeWidth=2)
    dots = base.mark_point(size=120, filled=True, color="#ffffff", stroke="#FF8CD1", strokeWidth=2)
    emoji = base.mark_text(dy=-16, fontSize=16).encode(text="emoji:N")
    layers = line + dots + emoji
    if MOOD_SCORE_MODE == "sum":
        cumulative = alt.Chart(df).mark_line(strokeDash=[4, 4], color="#ffde59").encode(
            x=alt.X("session:N", sort=None), y="cumulative:Q"
        )
        layers = layers + cumulative
    return layers.properties(height=320)


def _render_stats(state: AppState) -> None:
    theme = current_theme(state)
    head_color = theme.text_color if theme != NEUTRAL_THEME else ACCENT
    with st.container(border=True):
        st.markdown(f"<h4 style='color:{head_color}'>📊 Mood Stats by Session</h4>", unsafe_allow_html=True)

        summary = weekly_summary(state.mood_log)
        st.markdown(f"Overall Mood: **{summary.display()}**")

        if len(state.mood_log) == 0:
            st.info("No moods logged yet. Say something and come back!")
            return

        df = session_stats(state.mood_log, state.sessions)
        st.altair_chart(_session_chart(df), use_container_width=True)

        st.markdown("#### Mood mix (all sessions)")
        dist = mood_distribution(state.mood_log)
        dist = dist[dist > 0].reset_index()
        dist.columns = ["mood", "count"]
        dist["label"] = dist["mood"].map(lambda m: f"{MOOD_EMOJI.get(m, '')} {m}")
        bars = (
            alt.Chart(dist)
            .mark_bar(color=ACCENT)
            .encode(
                y=alt.Y("label:N", sort="-x", title=None),
                x=alt.X("count:Q", title="Entries", scale=alt.Scale(domainMin=0, nice=True)),
                tooltip=[alt.Tooltip("mood:N", title="Mood"), alt.Tooltip("count:Q", title="Entries")],
            )
            .properties(height=max(80, 28 * len(dist)))
        )
        st.altair_chart(bars, use_container_width=True)

        names = {s.id: s.name for s in state.sessions}
        out = state.mood_log.to_frame()
        out["session"] = out["session"].map(lambda sid: names.get(sid, f"(deleted) {sid[:8]}"))
        st.download_button(
            "Download mood log (CSV)",
            data=out.to_csv(index=False).encode("utf-8"),
            file_name="mood_log.csv",
            mime="text/csv",
            use_container_width=True,
        )


# ---------- Main render ----------
def render_app():
    state = _state()
    _apply_theme(state)

    # ---------- Sidebar ----------
    with st.sidebar:
        st.title(f"🗯️ {APP_TITLE}")
        st.button("+ New Rant", on_click=_on_new_session, use_container_width=True)
        st.button("📊 View Stats", on_click=_toggle_stats, use_container_width=True)

        st.divider()
        st.subheader("Chat History")
        for sess in state.sessions:
            active = sess.id == state.current_id
            st.button(
                f"**{sess.name}**" if active else sess.name,
                key=f"sess|{sess.id}",
                on_click=_on_select,
                args=(sess.id,),
                type="primary" if active else "secondary",
                use_container_width=True,
            )

        if len(state.sessions) > 1:
            with st.expander("⚠️ Delete this session", expanded=False):
                st.caption("Removes the chat, its theme and checklist.")
                st.button(
                    f"Delete {current_session(state).name}",
                    on_click=_on_delete,
                    args=(state.current_id,),
                    type="secondary",
                )

        st.divider()
        st.subheader("Self-care checklist")
        done = current_checklist(state)
        for item in CHECKLIST_ITEMS:
            st.checkbox(
                item,
                value=item in done,
                key=f"chk|{state.current_id}|{item}",
                on_change=_on_check,
                args=(item,),
            )
        st.caption(f"{len(done)}/{len(CHECKLIST_ITEMS)} done")

        st.divider()
        with st.expander("Debug", expanded=False):
            st.caption(f"Mood source: {'remote' if remote_available() else 'local lexicon'}")
            st.caption(f"Chat model: {_model()}")
            st.json(get_last_llm_status())

    # ---------- Tone selector ----------
    tone_key = f"tone|{state.current_id}"
    st.selectbox(
        "Bot Tone:",
        options=TONES,
        index=TONES.index(current_tone(state)),
        format_func=lambda t: TONE_LABELS.get(t, t),
        key=tone_key,
        on_change=_on_tone,
        args=(tone_key,),
    )
    mood = current_mood(state)
    st.caption(f"{current_session(state).name} · current mood: {MOOD_EMOJI.get(mood, '')} {mood}")

    # ---------- Messages ----------
    for msg in current_messages(state):
        st.markdown(_bubble(msg), unsafe_allow_html=True)

    # ---------- Input ----------
    text = st.chat_input("your rant here...")
    if text and text.strip():
        with st.spinner("Listening…"):
            _put(handle_turn(state, text))
        st.rerun()

    # ---------- Stats ----------
    if st.session_state.get("show_stats", False):
        _render_stats(_state())
