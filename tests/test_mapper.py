"""Parsing of GLOBAL_QUOTE response bodies."""

import pytest
from conftest import global_quote

from stockboard.core.domain_models import SkipReason
from stockboard.core.errors import (
    EmptyQuoteError,
    InvalidChangePercentError,
    InvalidPriceError,
    QuoteAPIError,
    QuoteFetchError,
    QuoteRateLimitError,
)
from stockboard.core.mapper import map_global_quote, parse_change_percent, parse_price


def test_parses_price_and_change_percent() -> None:
    quote = map_global_quote("MSFT", global_quote("123.45", "-2.31%"))

    assert quote.price == 123.45
    assert quote.change_percent == -2.31


def test_symbol_is_normalized_to_uppercase() -> None:
    quote = map_global_quote("aapl", global_quote())

    assert quote.symbol == "AAPL"


def test_missing_change_percent_defaults_to_zero() -> None:
    quote = map_global_quote("AAPL", global_quote("10.00", None))

    assert quote.change_percent == 0.0


@pytest.mark.parametrize(
    "raw, expected",
    [("1.25%", 1.25), ("0.0000%", 0.0), ("-0.5", -0.5), ("", 0.0), ("%", 0.0), (None, 0.0)],
)
def test_parse_change_percent(raw: str | None, expected: float) -> None:
    assert parse_change_percent("AAPL", raw) == expected


def test_unparseable_change_percent_is_rejected() -> None:
    with pytest.raises(InvalidChangePercentError):
        parse_change_percent("AAPL", "n/a%")


@pytest.mark.parametrize("raw", [None, "", "   ", "N/A", "abc", "nan", "inf", "-1.00"])
def test_invalid_prices_are_rejected(raw: str | None) -> None:
    with pytest.raises(InvalidPriceError) as exc_info:
        parse_price("AAPL", raw)

    assert exc_info.value.reason == SkipReason.INVALID_PRICE


def test_price_tolerates_surrounding_whitespace() -> None:
    assert parse_price("AAPL", " 187.2000 ") == 187.2


def test_error_message_field_raises_api_error() -> None:
    payload = {"Error Message": "Invalid API call."}

    with pytest.raises(QuoteAPIError) as exc_info:
        map_global_quote("XXXX", payload)

    assert "Invalid API call." in exc_info.value.message
    assert exc_info.value.symbol == "XXXX"


def test_note_field_raises_rate_limit_even_with_quote() -> None:
    payload = {**global_quote(), "Note": "Thank you for using Alpha Vantage!"}

    with pytest.raises(QuoteRateLimitError):
        map_global_quote("AAPL", payload)


def test_information_with_quote_still_parses() -> None:
    payload = {**global_quote("50.00", "1.00%"), "Information": "Premium endpoint."}

    quote = map_global_quote("AAPL", payload)

    assert quote.price == 50.0


def test_information_without_quote_is_rate_limited() -> None:
    payload = {"Information": "Daily request limit reached."}

    with pytest.raises(QuoteRateLimitError) as exc_info:
        map_global_quote("AAPL", payload)

    assert "Daily request limit reached." in exc_info.value.message


@pytest.mark.parametrize("payload", [{}, {"Global Quote": {}}, {"Global Quote": None}, []])
def test_empty_quote_payloads(payload: object) -> None:
    with pytest.raises(EmptyQuoteError):
        map_global_quote("AAPL", payload)


def test_all_errors_share_base_class() -> None:
    with pytest.raises(QuoteFetchError):
        map_global_quote("AAPL", global_quote(price="N/A"))
