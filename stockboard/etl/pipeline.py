"""Quote fetch orchestration with fixed request pacing.

Fetches one symbol at a time because the upstream quota is counted per
minute across the whole process. Every per-symbol failure is logged and
skipped; a batch never raises for them.
"""

import time
from collections.abc import Callable, Iterable

from loguru import logger

from stockboard.core.domain_models import Quote, QuoteOutcome, SkipReason
from stockboard.core.errors import QuoteFetchError
from stockboard.core.mapper import map_global_quote, normalize_symbol
from stockboard.etl.extract import QuoteExtractor

# Skips caused by our side or the network; upstream notices are only warnings
_ERROR_REASONS = frozenset(
    {
        SkipReason.MISSING_API_KEY,
        SkipReason.TRANSPORT_ERROR,
        SkipReason.HTTP_ERROR,
        SkipReason.UNEXPECTED_ERROR,
    }
)


class QuoteFetcher:
    """Sequential, rate limited quote fetching with dependency injection for testability."""

    def __init__(
        self,
        extractor: QuoteExtractor,
        delay_seconds: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize fetcher with extraction and pacing dependencies.

        Args:
            extractor: QuoteExtractor instance issuing the HTTP requests
            delay_seconds: Pause between two requests, defaults to the
                extractor's configured delay
            sleep: Function used to pause, replaced in tests
        """
        self.extractor = extractor
        if delay_seconds is None:
            delay_seconds = extractor.config.request_delay_seconds
        self.delay_seconds = delay_seconds
        self.sleep = sleep

    def fetch_quotes(self, symbols: Iterable[str]) -> list[Quote]:
        """
        Fetch quotes for multiple symbols and keep only the successful ones.

        Args:
            symbols: Ticker symbols in request order

        Returns:
            Quotes in completion order; skipped symbols are absent
        """
        return [
            outcome.quote
            for outcome in self.fetch_quote_outcomes(symbols)
            if outcome.quote is not None
        ]

    def fetch_quote_outcomes(self, symbols: Iterable[str]) -> list[QuoteOutcome]:
        """
        Fetch quotes for multiple symbols, one request at a time.

        Sleeps `delay_seconds` before every request except the first, so a
        batch of N requests pauses N-1 times and never after the last one.
        Symbols skipped before any request (missing API key) do not pause.

        Args:
            symbols: Ticker symbols in request order

        Returns:
            One outcome per input symbol, in input order
        """
        batch = list(symbols)
        logger.info(f"Starting quote fetch for {len(batch)} symbols")

        outcomes: list[QuoteOutcome] = []
        requested = False

        for symbol in batch:
            if not self.extractor.is_configured:
                outcomes.append(
                    self._skip(symbol, SkipReason.MISSING_API_KEY, "API key not configured")
                )
                continue

            if requested and self.delay_seconds > 0:
                logger.debug(f"Waiting {self.delay_seconds:.0f}s before next request")
                self.sleep(self.delay_seconds)

            requested = True
            outcomes.append(self.fetch_quote(symbol))

        fetched = sum(1 for outcome in outcomes if outcome.is_ok)
        if batch and not fetched:
            logger.warning(f"No quotes fetched for {len(batch)} symbols")
        else:
            logger.info(f"Fetched {fetched}/{len(batch)} quotes")
        return outcomes

    def fetch_quote(self, symbol: str) -> QuoteOutcome:
        """
        Fetch a single quote without pacing.

        Args:
            symbol: Ticker symbol, any case

        Returns:
            `ok` outcome with the parsed quote, or `skipped` with the reason
        """
        try:
            payload = self.extractor.get_global_quote(symbol)
            quote = map_global_quote(symbol, payload)

        except QuoteFetchError as e:
            return self._skip(symbol, e.reason, e.message)

        except Exception as e:
            # Unexpected error - log but don't crash the whole batch
            return self._skip(symbol, SkipReason.UNEXPECTED_ERROR, f"Quote fetch failed: {e}")

        logger.success(f"[{quote.symbol}] {quote.price:.2f} ({quote.change_percent:+.2f}%)")
        return QuoteOutcome.ok(quote)

    @staticmethod
    def _skip(symbol: str, reason: SkipReason, message: str) -> QuoteOutcome:
        ticker = normalize_symbol(symbol)
        if reason in _ERROR_REASONS:
            logger.error(f"[{ticker}] Skipped ({reason.value}): {message}")
        else:
            logger.warning(f"[{ticker}] Skipped ({reason.value}): {message}")
        return QuoteOutcome.skipped(ticker, reason, message)
