"""Common UI components shared across pages.

Pure rendering functions for reusable Streamlit widgets.
"""

import streamlit as st

from stockboard.core.domain_models import QuoteSummary


def render_kpi_cards(summary: QuoteSummary) -> None:
    """Render headline numbers as metric cards.

    Args:
        summary: QuoteSummary with totals over fetched and displayed quotes
    """
    cols = st.columns(3)

    with cols[0]:
        st.metric(label="Total Stocks", value=summary.total)

    with cols[1]:
        average = "-" if summary.average_price is None else f"${summary.average_price:,.2f}"
        st.metric(
            label="Average Price",
            value=average,
            help=f"{summary.gainers} up, {summary.losers} down",
        )

    with cols[2]:
        st.metric(label="Filtered Results", value=summary.filtered)


def render_empty_state(message: str, icon: str = "📊") -> None:
    """Render empty state placeholder when no data is available.

    Args:
        message: Message to display
        icon: Emoji icon to show
    """
    st.info(f"{icon} {message}")


def render_error(message: str) -> None:
    st.error(f"**Error**\n\n{message}")
