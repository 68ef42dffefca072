"""UI components for Knock Out!."""

from src.ui.components.scoreboard import render_scoreboard
from src.ui.components.turn_log import render_turn_log

__all__ = [
    "render_scoreboard",
    "render_turn_log",
]
