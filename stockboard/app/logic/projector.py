"""Derived table view: filtering, sorting and headline statistics.

Pure Python/Polars - recomputed from scratch on every search or sort change.
"""

import locale
from collections.abc import Callable, Sequence
from typing import Any

import polars as pl

from stockboard.core.domain_models import (
    QUOTE_SCHEMA,
    Quote,
    QuoteSummary,
    SortConfig,
    SortDirection,
    SortKey,
)


def filter_quotes(quotes: Sequence[Quote], search_term: str) -> list[Quote]:
    """Keep quotes whose symbol contains the search term, ignoring case."""
    term = (search_term or "").strip().lower()
    if not term:
        return list(quotes)
    return [quote for quote in quotes if term in quote.symbol.lower()]


def _sort_value(key: SortKey) -> Callable[[Quote], Any]:
    if key == SortKey.SYMBOL:
        return lambda quote: locale.strxfrm(quote.symbol)
    if key == SortKey.PRICE:
        return lambda quote: quote.price
    return lambda quote: quote.change_percent


def sort_quotes(quotes: Sequence[Quote], sort_config: SortConfig | None) -> list[Quote]:
    """
    Stable sort by the configured attribute.

    Symbols compare with the current locale's collation, numbers numerically.
    Equal values keep their input order in both directions.
    """
    if sort_config is None:
        return list(quotes)
    return sorted(
        quotes,
        key=_sort_value(sort_config.key),
        reverse=sort_config.direction == SortDirection.DESC,
    )


def project_quotes(
    quotes: Sequence[Quote],
    search_term: str = "",
    sort_config: SortConfig | None = None,
) -> list[Quote]:
    """
    Produce the list shown in the table.

    Args:
        quotes: All fetched quotes, never modified
        search_term: Case-insensitive symbol substring, empty keeps all
        sort_config: Column and direction, None keeps fetch order

    Returns:
        New list of the filtered and ordered quotes
    """
    return sort_quotes(filter_quotes(quotes, search_term), sort_config)


def toggle_sort(current: SortConfig | None, key: SortKey | str) -> SortConfig:
    """Clicking the active column flips direction, a new column starts ascending."""
    key = SortKey(key)
    if current is not None and current.key == key:
        direction = (
            SortDirection.DESC if current.direction == SortDirection.ASC else SortDirection.ASC
        )
        return SortConfig(key=key, direction=direction)
    return SortConfig(key=key, direction=SortDirection.ASC)


def quotes_to_frame(quotes: Sequence[Quote]) -> pl.DataFrame:
    """Tabular form of the quotes in list order."""
    return pl.DataFrame([quote.model_dump() for quote in quotes], schema=QUOTE_SCHEMA)


def summarize_quotes(quotes: Sequence[Quote], projected: Sequence[Quote]) -> QuoteSummary:
    """
    Headline numbers for the statistics cards.

    Total, average price and gainers/losers cover all fetched quotes;
    `filtered` counts what is currently displayed.
    """
    if not quotes:
        return QuoteSummary(total=0, filtered=len(projected))

    df = quotes_to_frame(quotes)
    stats = df.select(
        pl.len().alias("total"),
        pl.col("price").mean().alias("average_price"),
        (pl.col("change_percent") > 0).sum().alias("gainers"),
        (pl.col("change_percent") < 0).sum().alias("losers"),
    ).row(0, named=True)

    return QuoteSummary(
        total=stats["total"],
        filtered=len(projected),
        average_price=stats["average_price"],
        gainers=stats["gainers"],
        losers=stats["losers"],
    )
