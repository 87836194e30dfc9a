"""Filtering, sorting and summary of the quote table."""

import polars as pl
import pytest

from stockboard.app.logic.projector import (
    project_quotes,
    quotes_to_frame,
    summarize_quotes,
    toggle_sort,
)
from stockboard.core.domain_models import Quote, SortConfig, SortDirection, SortKey


def symbols(quotes: list[Quote]) -> list[str]:
    return [q.symbol for q in quotes]


def test_empty_search_without_sort_returns_all_in_order(sample_quotes: list[Quote]) -> None:
    projected = project_quotes(sample_quotes, "", None)

    assert projected == sample_quotes
    assert projected is not sample_quotes


def test_search_is_case_insensitive_substring() -> None:
    quotes = [
        Quote(symbol="AAPL", price=1.0),
        Quote(symbol="MSFT", price=2.0),
        Quote(symbol="BAAC", price=3.0),
    ]

    assert symbols(project_quotes(quotes, "aa")) == ["AAPL", "BAAC"]
    assert symbols(project_quotes(quotes, "Ms")) == ["MSFT"]
    assert project_quotes(quotes, "zzz") == []


def test_search_ignores_surrounding_whitespace(sample_quotes: list[Quote]) -> None:
    assert symbols(project_quotes(sample_quotes, "  a ")) == ["A"]


def test_sort_by_price_ascending(sample_quotes: list[Quote]) -> None:
    config = SortConfig(key=SortKey.PRICE, direction=SortDirection.ASC)

    projected = project_quotes(sample_quotes, "", config)

    assert [(q.symbol, q.price) for q in projected] == [("A", 10.0), ("C", 20.0), ("B", 30.0)]


def test_sort_by_symbol_descending(sample_quotes: list[Quote]) -> None:
    config = SortConfig(key=SortKey.SYMBOL, direction=SortDirection.DESC)

    assert symbols(project_quotes(sample_quotes, "", config)) == ["C", "B", "A"]


def test_sort_by_change_percent_handles_negatives(sample_quotes: list[Quote]) -> None:
    config = SortConfig(key=SortKey.CHANGE_PERCENT)

    assert symbols(project_quotes(sample_quotes, "", config)) == ["A", "C", "B"]


@pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC])
def test_sort_is_stable_for_ties(direction: SortDirection) -> None:
    quotes = [
        Quote(symbol="X", price=5.0),
        Quote(symbol="Y", price=1.0),
        Quote(symbol="Z", price=5.0),
    ]
    config = SortConfig(key=SortKey.PRICE, direction=direction)

    projected = symbols(project_quotes(quotes, "", config))

    assert projected.index("X") < projected.index("Z")


def test_projection_does_not_mutate_input(sample_quotes: list[Quote]) -> None:
    original = list(sample_quotes)

    project_quotes(sample_quotes, "b", SortConfig(key=SortKey.PRICE))

    assert sample_quotes == original


def test_toggle_sort_flips_same_key_and_resets_new_key(sample_quotes: list[Quote]) -> None:
    first = toggle_sort(None, SortKey.PRICE)
    second = toggle_sort(first, SortKey.PRICE)
    third = toggle_sort(second, SortKey.PRICE)
    other = toggle_sort(second, "symbol")

    assert first.direction == SortDirection.ASC
    assert second.direction == SortDirection.DESC
    assert third.direction == SortDirection.ASC
    assert other == SortConfig(key=SortKey.SYMBOL, direction=SortDirection.ASC)
    assert symbols(project_quotes(sample_quotes, "", first)) == ["A", "C", "B"]
    assert symbols(project_quotes(sample_quotes, "", second)) == ["B", "C", "A"]


def test_quotes_to_frame_keeps_order(sample_quotes: list[Quote]) -> None:
    df = quotes_to_frame(sample_quotes)

    assert df.columns == ["symbol", "price", "change_percent"]
    assert df["symbol"].to_list() == ["B", "A", "C"]
    assert df.schema["price"] == pl.Float64


def test_quotes_to_frame_empty() -> None:
    df = quotes_to_frame([])

    assert df.is_empty()
    assert df.columns == ["symbol", "price", "change_percent"]


def test_summary(sample_quotes: list[Quote]) -> None:
    projected = project_quotes(sample_quotes, "a")

    summary = summarize_quotes(sample_quotes, projected)

    assert summary.total == 3
    assert summary.filtered == 1
    assert summary.average_price == pytest.approx(20.0)
    assert summary.gainers == 1
    assert summary.losers == 1


def test_summary_without_quotes() -> None:
    summary = summarize_quotes([], [])

    assert summary.total == 0
    assert summary.average_price is None
