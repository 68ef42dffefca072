"""Tabletop theme for Knock Out!."""

from src.ui.themes.animations import (
    load_css,
    render_knock_out_banner,
    render_victory_animation,
)

__all__ = [
    "load_css",
    "render_knock_out_banner",
    "render_victory_animation",
]
