from enum import Enum

import polars as pl
from pydantic import BaseModel, ConfigDict, Field

# --- Constants & Schemas ---

# Polars schema for the quote table handed to the dashboard
QUOTE_SCHEMA = {
    "symbol": pl.Utf8,
    "price": pl.Float64,
    "change_percent": pl.Float64,
}


# --- Enums ---


class SortKey(str, Enum):
    """Quote attributes the table can be sorted by."""

    SYMBOL = "symbol"
    PRICE = "price"
    CHANGE_PERCENT = "change_percent"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SkipReason(str, Enum):
    """Why a symbol was dropped from a fetch batch."""

    MISSING_API_KEY = "missing_api_key"
    TRANSPORT_ERROR = "transport_error"
    HTTP_ERROR = "http_error"
    API_ERROR = "api_error"
    RATE_LIMITED = "rate_limited"
    EMPTY_QUOTE = "empty_quote"
    INVALID_PRICE = "invalid_price"
    INVALID_CHANGE_PERCENT = "invalid_change_percent"
    UNEXPECTED_ERROR = "unexpected_error"


class OutcomeStatus(str, Enum):
    OK = "ok"
    SKIPPED = "skipped"


# --- Domain Models ---


class Quote(BaseModel):
    """
    Latest quote for a single ticker.

    Only ever built from a fully parsed GLOBAL_QUOTE response, see
    `stockboard.core.mapper.map_global_quote`.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str
    price: float = Field(ge=0)
    change_percent: float = 0.0


class SortConfig(BaseModel):
    """Column and direction the dashboard table is currently sorted by."""

    model_config = ConfigDict(frozen=True)

    key: SortKey
    direction: SortDirection = SortDirection.ASC


class QuoteOutcome(BaseModel):
    """
    Tagged per-symbol result of a fetch.

    Either `ok` with a quote, or `skipped` with the reason and the
    diagnostic message that was logged for it.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str
    status: OutcomeStatus
    quote: Quote | None = None
    reason: SkipReason | None = None
    message: str | None = None

    @classmethod
    def ok(cls, quote: Quote) -> "QuoteOutcome":
        return cls(symbol=quote.symbol, status=OutcomeStatus.OK, quote=quote)

    @classmethod
    def skipped(cls, symbol: str, reason: SkipReason, message: str) -> "QuoteOutcome":
        return cls(
            symbol=symbol.upper(),
            status=OutcomeStatus.SKIPPED,
            reason=reason,
            message=message,
        )

    @property
    def is_ok(self) -> bool:
        return self.status == OutcomeStatus.OK


class QuoteSummary(BaseModel):
    """Headline numbers shown above the quote table."""

    model_config = ConfigDict(frozen=True)

    total: int
    filtered: int
    average_price: float | None = None
    gainers: int = 0
    losers: int = 0
