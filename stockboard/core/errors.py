"""Per-symbol fetch errors.

Every failure while fetching a single quote is raised as a `QuoteFetchError`
subclass carrying the `SkipReason` it maps to. The pipeline catches them per
symbol and turns them into skipped outcomes.
"""

from stockboard.core.domain_models import SkipReason


class QuoteFetchError(Exception):
    """Base class for errors that cause a symbol to be skipped."""

    reason: SkipReason = SkipReason.API_ERROR

    def __init__(self, symbol: str, message: str) -> None:
        super().__init__(message)
        self.symbol = symbol
        self.message = message


class MissingApiKeyError(QuoteFetchError):
    reason = SkipReason.MISSING_API_KEY


class QuoteTransportError(QuoteFetchError):
    """Network failure or unreadable response body."""

    reason = SkipReason.TRANSPORT_ERROR


class QuoteHTTPError(QuoteFetchError):
    reason = SkipReason.HTTP_ERROR

    def __init__(self, symbol: str, message: str, status_code: int) -> None:
        super().__init__(symbol, message)
        self.status_code = status_code


class QuoteAPIError(QuoteFetchError):
    """Upstream reported an explicit error message."""

    reason = SkipReason.API_ERROR


class QuoteRateLimitError(QuoteFetchError):
    reason = SkipReason.RATE_LIMITED


class EmptyQuoteError(QuoteFetchError):
    reason = SkipReason.EMPTY_QUOTE


class InvalidPriceError(QuoteFetchError):
    reason = SkipReason.INVALID_PRICE


class InvalidChangePercentError(QuoteFetchError):
    reason = SkipReason.INVALID_CHANGE_PERCENT
