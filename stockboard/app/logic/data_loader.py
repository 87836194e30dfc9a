"""Quote loader for the Streamlit application.

Runs one fetch cycle for the dashboard and converts unexpected failures
into a single user-facing message.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from loguru import logger

from stockboard.core.config import Settings, settings
from stockboard.core.domain_models import Quote
from stockboard.etl.extract import QuoteExtractor
from stockboard.etl.pipeline import QuoteFetcher

LOAD_ERROR_MESSAGE = "Failed to load stock data. Please try again later."


@dataclass
class DashboardState:
    """Container for the result of one load cycle."""

    quotes: list[Quote] = field(default_factory=list)
    error: str | None = None
    loaded_at: datetime | None = None

    @property
    def is_empty(self) -> bool:
        return not self.quotes


def build_fetcher(config: Settings | None = None) -> QuoteFetcher:
    """Wire extractor and fetcher from settings."""
    config = config or settings
    return QuoteFetcher(QuoteExtractor(config))


def load_quotes(fetcher: QuoteFetcher, symbols: Sequence[str]) -> DashboardState:
    """Fetch quotes for the dashboard.

    Per-symbol problems are already absorbed by the fetcher and only show up
    as fewer rows. Anything escaping it is logged and reported generically.

    Args:
        fetcher: Configured QuoteFetcher
        symbols: Tickers to load

    Returns:
        DashboardState with either quotes or an error message
    """
    logger.info(f"Loading quotes for {len(symbols)} symbols")
    try:
        quotes = fetcher.fetch_quotes(symbols)
    except Exception as e:
        logger.exception(f"Quote loading error: {e}")
        return DashboardState(error=LOAD_ERROR_MESSAGE, loaded_at=datetime.now())

    if not quotes:
        logger.warning("Load finished without usable quotes")
    return DashboardState(quotes=quotes, loaded_at=datetime.now())
