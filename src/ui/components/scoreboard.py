"""Scoreboard component — final standings and knock-out status."""

from __future__ import annotations

import streamlit as st

from src.engine.base import WIN_THRESHOLD, Player


def render_scoreboard(players: list[Player], winner_id: int | None) -> None:
    """Render the scoreboard panel.

    Args:
        players: Players in the order they should be listed.
        winner_id: Id of the player who reached the threshold, if any.
    """
    html = ['<div class="scoreboard">']
    html.append(f'<div class="scoreboard-title">Scoreboard &mdash; {WIN_THRESHOLD} to Win</div>')

    for player in players:
        row_classes = ["player-row"]
        if player.id == winner_id:
            row_classes.append("winner")
        if player.eliminated:
            row_classes.append("knocked-out")

        indicator = "&#9813; " if player.id == winner_id else ""

        html.append(
            f'<div class="{" ".join(row_classes)}">'
            f'<span class="name">{indicator}Player {player.id}'
            f'<span class="knock-out-number">KO {player.knock_out_number}</span></span>'
            f'<span class="score">{player.score}</span>'
            f"</div>"
        )

    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)
