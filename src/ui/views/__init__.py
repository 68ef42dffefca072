"""Page renderers for Knock Out!."""

from src.ui.views.home import render_home_page
from src.ui.views.results import render_results_page

__all__ = ["render_home_page", "render_results_page"]
