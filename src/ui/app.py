"""Knock Out! — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st
from pydantic import ValidationError

from src.config.settings import configure_logging


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Knock Out!",
        page_icon="🎲",
        layout="centered",
        initial_sidebar_state="collapsed",
    )
    try:
        configure_logging()
    except ValidationError as exc:
        st.error(f"Invalid configuration:\n\n{exc}")
        st.stop()

    from src.ui.themes import load_css
    load_css()

    if "page" not in st.session_state:
        st.session_state["page"] = "home"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "home":
        from src.ui.views.home import render_home_page
        render_home_page()
    elif page == "results":
        from src.ui.views.results import render_results_page
        render_results_page()
    else:
        st.session_state["page"] = "home"
        st.rerun()


if __name__ == "__main__":
    main()
