"""CSS injection and HTML banner helpers for the tabletop theme."""

from pathlib import Path

import streamlit as st


def load_css() -> None:
    """Inject the tabletop CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "tabletop.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_victory_animation(name: str, score: int) -> None:
    """Render the victory overlay with glow animation."""
    st.markdown(
        '<div class="victory-overlay">'
        '<span class="crown">&#9813;</span>'
        f"<h1>{name} Wins!</h1>"
        f"<p>Finished on {score} points without rolling the knock-out number.</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_knock_out_banner() -> None:
    """Render the banner shown when every player has been knocked out."""
    st.markdown(
        '<div class="knock-out-overlay">'
        "<h2>KNOCKED OUT!</h2>"
        "<p>Every player rolled their knock-out number. Nobody wins.</p>"
        "</div>",
        unsafe_allow_html=True,
    )
