"""Home page — title, rules, and game setup."""

from __future__ import annotations

import logging

import streamlit as st

from src.config.settings import get_settings
from src.engine.base import Die, SeededRandomSource
from src.engine.events import EventRecorder
from src.engine.knock_out import KnockOutGame
from src.engine.validators import parse_seed

logger = logging.getLogger(__name__)


def render_home_page() -> None:
    """Render the home / landing page."""
    settings = get_settings()

    st.title("Knock Out!")
    st.caption("Two dice, one unlucky number")

    with st.form("new_game"):
        num_players = st.number_input(
            "Players", min_value=1, max_value=20, value=min(settings.num_players, 20), step=1
        )
        seed_text = st.text_input(
            "Seed (optional)",
            value="" if settings.seed is None else str(settings.seed),
            help="Use the same seed to replay the same game.",
        )
        submitted = st.form_submit_button("Play", type="primary", use_container_width=True)

    if submitted:
        try:
            seed = parse_seed(seed_text)
        except ValueError as exc:
            st.error(str(exc))
        else:
            _play_game(int(num_players), seed, settings.dice_sides)

    st.divider()

    with st.expander("Knock Out! — Rules"):
        st.markdown(
            """
**Roll two dice every turn and stay away from your number!**

- Each player gets a **knock-out number** between 6 and 9
- On your turn, roll both dice and add them together
- Roll your knock-out number and you are **knocked out**
- Anything else is added to your score
- First to **100 points** wins; if everyone is knocked out, nobody does
"""
        )


def _play_game(num_players: int, seed: int | None, dice_sides: int) -> None:
    """Play a full game and switch to the results page."""
    ss = st.session_state
    source = SeededRandomSource(seed)
    recorder = EventRecorder()
    game = KnockOutGame(
        num_players=num_players,
        die=Die(dice_sides, source),
        random_source=source,
        observer=recorder,
    )
    game.play()
    logger.info("Played a %d-player game in %d turns", num_players, game.turns_taken)

    ss["game"] = game
    ss["recorder"] = recorder
    ss["page"] = "results"
    st.rerun()
