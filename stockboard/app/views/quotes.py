from collections.abc import Sequence

import pandas as pd
import polars as pl
import streamlit as st

from stockboard.app.logic.projector import quotes_to_frame
from stockboard.app.views.colors import CHANGE_COLORS
from stockboard.core.domain_models import Quote, SortConfig, SortDirection, SortKey

COLUMN_LABELS = {
    SortKey.SYMBOL: "Symbol",
    SortKey.PRICE: "Price",
    SortKey.CHANGE_PERCENT: "% Change",
}


def format_price(price: float) -> str:
    return f"${price:.2f}"


def format_percent(percent: float) -> str:
    sign = "+" if percent >= 0 else ""
    return f"{sign}{percent:.2f}%"


def change_color(percent: float) -> str:
    """Green for gains, red for losses, gray when unchanged."""
    if percent > 0:
        return CHANGE_COLORS["positive"]
    if percent < 0:
        return CHANGE_COLORS["negative"]
    return CHANGE_COLORS["neutral"]


def sort_icon(sort_config: SortConfig | None, key: SortKey) -> str:
    if sort_config is None or sort_config.key != key:
        return "↕"
    return "↑" if sort_config.direction == SortDirection.ASC else "↓"


def color_change_cell(val: float) -> str:
    if pd.isna(val):
        return ""
    return f"color: {change_color(val)}; font-weight: 600"


def render_search_bar(is_loading: bool) -> tuple[str, bool]:
    """Render search input and refresh button.

    The button stays disabled while a fetch cycle is running.

    Returns:
        Tuple of (search term, refresh clicked)
    """
    col1, col2 = st.columns([4, 1])
    with col1:
        search_term = st.text_input(
            "Search",
            placeholder="Search stock symbol...",
            key="search_term",
            label_visibility="collapsed",
        )
    with col2:
        refresh = st.button(
            "Loading..." if is_loading else "Refresh Data",
            disabled=is_loading,
            type="primary",
            use_container_width=True,
        )
    return search_term, refresh


def render_sort_controls(sort_config: SortConfig | None) -> SortKey | None:
    """Render one sort button per column.

    Returns:
        Key of the clicked column or None
    """
    clicked = None
    cols = st.columns(len(COLUMN_LABELS))
    for col, (key, label) in zip(cols, COLUMN_LABELS.items(), strict=True):
        with col:
            if st.button(
                f"{label} {sort_icon(sort_config, key)}",
                key=f"sort_{key.value}",
                use_container_width=True,
            ):
                clicked = key
    return clicked


def render_quote_table(quotes: Sequence[Quote]) -> None:
    """Render the projected quotes in their given order."""
    df_quotes: pl.DataFrame = quotes_to_frame(quotes)
    df_pandas = df_quotes.to_pandas()
    styler = df_pandas.style.apply(
        lambda _: df_pandas["change_percent"].map(color_change_cell),
        subset=["change_percent"],
    )

    st.dataframe(
        styler,
        hide_index=True,
        column_order=["symbol", "price", "change_percent"],
        column_config={
            "symbol": st.column_config.TextColumn(COLUMN_LABELS[SortKey.SYMBOL], width="small"),
            "price": st.column_config.NumberColumn(
                COLUMN_LABELS[SortKey.PRICE], format="$%.2f"
            ),
            "change_percent": st.column_config.NumberColumn(
                COLUMN_LABELS[SortKey.CHANGE_PERCENT], format="%+.2f%%"
            ),
        },
        use_container_width=True,
    )
