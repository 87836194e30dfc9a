"""Data extraction layer for the Alpha Vantage quote endpoint.

Wraps a single GLOBAL_QUOTE request. Transport and HTTP failures are raised
as `QuoteFetchError` subclasses; there is no retry, a failing symbol is
simply skipped by the pipeline.
"""

from typing import Any

import requests
from loguru import logger

from stockboard.core.config import Settings, settings
from stockboard.core.errors import MissingApiKeyError, QuoteHTTPError, QuoteTransportError
from stockboard.core.mapper import normalize_symbol


class QuoteExtractor:
    """Handles all external quote fetching from Alpha Vantage."""

    FUNCTION = "GLOBAL_QUOTE"

    def __init__(
        self,
        config: Settings | None = None,
        session: Any | None = None,
    ) -> None:
        """
        Args:
            config: Settings providing API key, endpoint and timeout
            session: requests-compatible session, injectable for tests
        """
        self.config = config or settings
        self.session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return self.config.has_api_key

    def build_params(self, symbol: str) -> dict[str, str]:
        return {
            "function": self.FUNCTION,
            "symbol": symbol,
            "apikey": self.config.alpha_vantage_api_key or "",
        }

    def get_global_quote(self, symbol: str) -> dict[str, Any]:
        """
        Fetch the raw GLOBAL_QUOTE body for one symbol.

        Args:
            symbol: Stock ticker symbol (e.g., "AAPL")

        Returns:
            Decoded JSON body, not yet validated

        Raises:
            MissingApiKeyError: If no usable API key is configured
            QuoteTransportError: Network failure or non-JSON body
            QuoteHTTPError: Non-success HTTP status
        """
        ticker = normalize_symbol(symbol)
        if not self.is_configured:
            raise MissingApiKeyError(ticker, "API key not configured")

        logger.info(f"[{ticker}] Fetching quote")

        try:
            response = self.session.get(
                self.config.alpha_vantage_api_url,
                params=self.build_params(symbol),
                timeout=self.config.request_timeout_seconds,
            )
        except requests.RequestException as e:
            raise QuoteTransportError(ticker, f"Request failed: {e}") from e

        if not response.ok:
            raise QuoteHTTPError(
                ticker,
                f"API request failed: {response.status_code} {response.reason}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise QuoteTransportError(ticker, f"Response is not valid JSON: {e}") from e

        return payload
