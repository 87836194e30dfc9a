"""Curated S&P 500 ticker universe.

Top large caps grouped by sector. The free Alpha Vantage tier allows
5 calls per minute and 500 per day, so the dashboard only fetches the
demo subset by default.
"""

from enum import Enum
from types import MappingProxyType


class Sector(str, Enum):
    TECHNOLOGY = "Technology"
    FINANCIALS = "Financials"
    HEALTHCARE = "Healthcare"
    CONSUMER_DISCRETIONARY = "Consumer Discretionary"
    INDUSTRIALS = "Industrials"
    ENERGY = "Energy"
    COMMUNICATION = "Communication Services"
    CONSUMER_STAPLES = "Consumer Staples"
    UTILITIES = "Utilities"
    REAL_ESTATE = "Real Estate"
    MATERIALS = "Materials"


# Number of symbols that fit into one minute of the free API quota
DEMO_SIZE = 5

# A ticker listed in several sectors (NFLX, WMT, COST) counts under the first one
_SECTOR_TABLE: tuple[tuple[Sector, tuple[str, ...]], ...] = (
    (
        Sector.TECHNOLOGY,
        (
            "AAPL", "MSFT", "NVDA", "GOOGL", "GOOG", "AMZN", "META", "TSLA", "AVGO", "ORCL",
            "NFLX", "CRM", "AMD", "INTC", "ADBE", "CSCO", "QCOM", "TXN", "AMAT", "MU",
        ),
    ),
    (
        Sector.FINANCIALS,
        ("JPM", "BAC", "WFC", "GS", "MS", "C", "SCHW", "BLK", "CME", "AXP"),
    ),
    (
        Sector.HEALTHCARE,
        (
            "UNH", "JNJ", "ABBV", "LLY", "MRK", "TMO", "ABT", "DHR", "BMY", "AMGN",
            "CVS", "CI", "HUM", "ELV", "SYK", "ISRG", "ZTS", "BSX", "BDX", "EW",
        ),
    ),
    (
        Sector.CONSUMER_DISCRETIONARY,
        ("WMT", "COST", "HD", "NKE", "SBUX", "TGT", "LOW", "TJX", "BKNG", "MCD"),
    ),
    (
        Sector.INDUSTRIALS,
        ("BA", "CAT", "GE", "HON", "RTX", "LMT", "DE", "EMR", "ETN", "ITW"),
    ),
    (
        Sector.ENERGY,
        ("XOM", "CVX", "COP", "SLB", "EOG", "MPC", "PSX", "VLO", "OXY", "HAL"),
    ),
    (
        Sector.COMMUNICATION,
        ("VZ", "T", "CMCSA", "DIS", "NFLX", "CHTR", "TMUS", "FOX", "FOXA", "PARA"),
    ),
    (
        Sector.CONSUMER_STAPLES,
        ("PG", "KO", "PEP", "WMT", "COST", "CL", "KMB", "MDLZ", "GIS", "HSY"),
    ),
    (
        Sector.UTILITIES,
        ("NEE", "DUK", "SO", "AEP", "SRE", "EXC", "XEL", "ES", "PEG", "ETR"),
    ),
    (
        Sector.REAL_ESTATE,
        ("AMT", "PLD", "EQIX", "PSA", "WELL", "SPG", "DLR", "O", "VICI", "CBRE"),
    ),
    (
        Sector.MATERIALS,
        ("LIN", "APD", "ECL", "SHW", "DD", "FCX", "NEM", "PPG", "DOW", "VALE"),
    ),
)  # fmt: skip


def _build_sector_index() -> dict[str, Sector]:
    index: dict[str, Sector] = {}
    for sector, tickers in _SECTOR_TABLE:
        for ticker in tickers:
            index.setdefault(ticker, sector)
    return index


SECTOR_BY_SYMBOL = MappingProxyType(_build_sector_index())

# Insertion order of the index keeps the table order
SP500_STOCKS: tuple[str, ...] = tuple(SECTOR_BY_SYMBOL)


def get_sp500_stocks(limit: int | None = None) -> list[str]:
    """
    Return the curated universe.

    Args:
        limit: Only return the first N symbols when a positive number is given

    Returns:
        List of ticker symbols in table order
    """
    if limit and limit > 0:
        return list(SP500_STOCKS[:limit])
    return list(SP500_STOCKS)


def get_demo_stocks() -> list[str]:
    """Default fetch batch, sized to one minute of the free API quota."""
    return list(SP500_STOCKS[:DEMO_SIZE])


def get_sector_stocks(sector: Sector | str) -> list[str]:
    """Return all symbols assigned to a sector."""
    sector = Sector(sector)
    return [symbol for symbol, s in SECTOR_BY_SYMBOL.items() if s == sector]


def sector_of(symbol: str) -> Sector | None:
    return SECTOR_BY_SYMBOL.get(symbol.strip().upper())
