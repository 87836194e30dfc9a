"""StockBoard Dashboard - Main Entry Point.

Fetches quotes for the configured watchlist on first visit and on every
explicit refresh, then filters and sorts them in memory.
"""

import streamlit as st
from loguru import logger

from stockboard.app.logic.data_loader import DashboardState, build_fetcher, load_quotes
from stockboard.app.logic.projector import project_quotes, summarize_quotes, toggle_sort
from stockboard.app.views.common import render_empty_state, render_error, render_kpi_cards
from stockboard.app.views.quotes import render_quote_table, render_search_bar, render_sort_controls
from stockboard.config.settings import load_config
from stockboard.core.config import settings
from stockboard.etl.pipeline import QuoteFetcher

st.set_page_config(
    page_title="Stock Price Dashboard",
    page_icon="📈",
    layout="wide",
)


@st.cache_resource  # type: ignore[misc]
def get_fetcher() -> QuoteFetcher:
    return build_fetcher(settings)


@st.cache_data(show_spinner=False)  # type: ignore[misc]
def get_watchlist() -> list[str]:
    return load_config(settings.config_path).watchlist.tickers


# Session defaults; the first visit starts in loading state
for key, default in {
    "dashboard_state": None,
    "sort_config": None,
    "is_loading": True,
}.items():
    if key not in st.session_state:
        st.session_state[key] = default

# Header
st.title("📈 Stock Price Dashboard")
st.caption("Real-time stock prices and percentage changes")

search_term, refresh = render_search_bar(st.session_state.is_loading)

if refresh:
    st.session_state.is_loading = True
    st.rerun()

if st.session_state.is_loading:
    symbols = get_watchlist()
    with st.spinner(f"Loading {len(symbols)} quotes..."):
        st.session_state.dashboard_state = load_quotes(get_fetcher(), symbols)
    st.session_state.is_loading = False
    st.rerun()

state: DashboardState = st.session_state.dashboard_state

if state.error:
    render_error(state.error)
    st.stop()

if state.is_empty:
    if not settings.has_api_key:
        logger.warning("Dashboard loaded without a configured API key")
    render_empty_state("No stock data available")
    st.stop()

projected = project_quotes(state.quotes, search_term, st.session_state.sort_config)
render_kpi_cards(summarize_quotes(state.quotes, projected))

clicked = render_sort_controls(st.session_state.sort_config)
if clicked is not None:
    st.session_state.sort_config = toggle_sort(st.session_state.sort_config, clicked)
    st.rerun()

if projected:
    render_quote_table(projected)
    st.caption("💡 Tip: Use the column buttons to sort")
else:
    render_empty_state(f"No symbols match '{search_term}'", icon="🔍")

if state.loaded_at is not None:
    st.caption(f"Last update: {state.loaded_at:%Y-%m-%d %H:%M:%S} · Data source: Alpha Vantage")
