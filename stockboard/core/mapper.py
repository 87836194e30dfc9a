"""
Mapping Layer: Transforms Alpha Vantage GLOBAL_QUOTE payloads to domain models.

Validates the JSON body field by field and raises a `QuoteFetchError`
subclass for anything that must not become a Quote.
"""

import math
from typing import Any

from loguru import logger

from stockboard.core.domain_models import Quote
from stockboard.core.errors import (
    EmptyQuoteError,
    InvalidChangePercentError,
    InvalidPriceError,
    QuoteAPIError,
    QuoteRateLimitError,
)

GLOBAL_QUOTE_KEY = "Global Quote"
PRICE_KEY = "05. price"
CHANGE_PERCENT_KEY = "10. change percent"

ERROR_MESSAGE_KEY = "Error Message"
NOTE_KEY = "Note"
INFORMATION_KEY = "Information"

# Placeholders the API uses instead of a price
_MISSING_VALUES = {"", "N/A", "NONE", "NULL", "-"}


def normalize_symbol(symbol: str) -> str:
    return symbol.strip().upper()


def parse_price(symbol: str, raw: Any) -> float:
    """
    Parse the string-encoded price field.

    Args:
        symbol: Ticker the price belongs to (for error messages)
        raw: Raw value of "05. price"

    Returns:
        Price as float

    Raises:
        InvalidPriceError: If the value is missing, a placeholder, not numeric,
            not finite or negative
    """
    if raw is None or str(raw).strip().upper() in _MISSING_VALUES:
        raise InvalidPriceError(symbol, f"Invalid price data: {raw!r}")

    try:
        price = float(str(raw).strip())
    except ValueError as e:
        raise InvalidPriceError(symbol, f"Invalid price data: {raw!r}") from e

    if not math.isfinite(price) or price < 0:
        raise InvalidPriceError(symbol, f"Invalid price data: {raw!r}")
    return price


def parse_change_percent(symbol: str, raw: Any) -> float:
    """
    Parse a percentage like "-2.31%" into -2.31.

    Missing or empty values count as no change.
    """
    if raw is None:
        return 0.0

    text = str(raw).strip()
    if text.endswith("%"):
        text = text[:-1].strip()
    if not text:
        return 0.0

    try:
        change_percent = float(text)
    except ValueError as e:
        raise InvalidChangePercentError(symbol, f"Invalid change percent: {raw!r}") from e

    if not math.isfinite(change_percent):
        raise InvalidChangePercentError(symbol, f"Invalid change percent: {raw!r}")
    return change_percent


def check_api_notices(symbol: str, payload: dict[str, Any]) -> None:
    """
    Inspect top-level status fields of a response body.

    "Error Message" and "Note" abort the symbol. "Information" is only
    logged, the quote may still be present next to it.

    Raises:
        QuoteAPIError: On an explicit upstream error
        QuoteRateLimitError: On a rate limit note
    """
    if payload.get(ERROR_MESSAGE_KEY):
        raise QuoteAPIError(symbol, f"API error: {payload[ERROR_MESSAGE_KEY]}")

    if payload.get(INFORMATION_KEY):
        logger.warning(f"[{symbol}] API information: {payload[INFORMATION_KEY]}")

    if payload.get(NOTE_KEY):
        raise QuoteRateLimitError(symbol, f"API rate limit reached: {payload[NOTE_KEY]}")


def map_global_quote(symbol: str, payload: Any) -> Quote:
    """
    Map a GLOBAL_QUOTE response body to a Quote.

    Args:
        symbol: Requested ticker, normalized to uppercase for the result
        payload: Decoded JSON body

    Returns:
        Parsed Quote

    Raises:
        QuoteFetchError: Any subclass, if the body does not describe a usable quote
    """
    symbol = normalize_symbol(symbol)

    if not isinstance(payload, dict):
        raise EmptyQuoteError(symbol, f"Unexpected response body: {type(payload).__name__}")

    check_api_notices(symbol, payload)

    quote = payload.get(GLOBAL_QUOTE_KEY)
    if not isinstance(quote, dict) or not quote:
        # An empty "Global Quote" object is how the API answers when throttled
        if payload.get(INFORMATION_KEY):
            raise QuoteRateLimitError(
                symbol, f"No quote data, API information: {payload[INFORMATION_KEY]}"
            )
        raise EmptyQuoteError(symbol, "No quote data - may be rate limited")

    price = parse_price(symbol, quote.get(PRICE_KEY))
    change_percent = parse_change_percent(symbol, quote.get(CHANGE_PERCENT_KEY))

    return Quote(symbol=symbol, price=price, change_percent=change_percent)
