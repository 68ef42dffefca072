"""Turn log component — every roll of the game in order."""

from __future__ import annotations

import streamlit as st

from src.engine.events import EventPayload


def render_turn_log(turns: list[EventPayload]) -> None:
    """Render the recorded turns inside an expander.

    Args:
        turns: ``TURN_STARTED`` payloads in the order they happened.
    """
    with st.expander(f"Turn log ({len(turns)} turns)"):
        html = []
        for number, payload in enumerate(turns, 1):
            roll = payload.data["dice_roll_sum"]
            knocked_out = roll == payload.data["knock_out_number"]
            css = "turn-log-entry knock-out" if knocked_out else "turn-log-entry"
            outcome = "knocked out!" if knocked_out else f"{payload.data['score_before'] + roll} pts"
            html.append(
                f'<div class="{css}">#{number} &mdash; Player {payload.player_id} '
                f"rolled {roll} ({outcome})</div>"
            )
        st.markdown("".join(html), unsafe_allow_html=True)
