"""Results page — winner banner, final standings, and turn log."""

from __future__ import annotations

import streamlit as st

from src.ui.components.scoreboard import render_scoreboard
from src.ui.components.turn_log import render_turn_log
from src.ui.themes.animations import render_knock_out_banner, render_victory_animation


def render_results_page() -> None:
    """Render the results / victory page."""
    ss = st.session_state
    game = ss.get("game")
    recorder = ss.get("recorder")

    if game is None or recorder is None:
        ss["page"] = "home"
        st.rerun()
        return

    winner = game.winner
    if winner:
        render_victory_animation(f"Player {winner.id}", winner.score)
    else:
        render_knock_out_banner()

    st.subheader("Final Standings")
    render_scoreboard(game.standings(), winner.id if winner else None)

    st.caption(f"{game.turns_taken} turns on a {game.die.sides}-sided die")
    render_turn_log(recorder.turns())

    st.divider()

    if st.button("New Game", type="primary", use_container_width=True):
        _return_home()


def _return_home():
    """Clean up session and go home."""
    ss = st.session_state
    for key in ("game", "recorder"):
        ss.pop(key, None)
    ss["page"] = "home"
    st.rerun()
