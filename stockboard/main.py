"""StockBoard - Main Entry Point with CLI Commands.

Supports:
- fetch: Fetch quotes and print the filtered, sorted table
- symbols: List the curated ticker universe
- dashboard: Launch the Streamlit dashboard
"""

import argparse
import subprocess
import sys
from pathlib import Path

import polars as pl
from loguru import logger

from stockboard.app.logic.data_loader import build_fetcher, load_quotes
from stockboard.app.logic.projector import project_quotes, quotes_to_frame, summarize_quotes
from stockboard.config.settings import load_config
from stockboard.core.config import settings
from stockboard.core.domain_models import SortConfig, SortDirection, SortKey
from stockboard.core.universe import (
    SECTOR_BY_SYMBOL,
    Sector,
    get_demo_stocks,
    get_sector_stocks,
    get_sp500_stocks,
)

DASHBOARD_PAGE = Path(__file__).parent / "app" / "00_Dashboard.py"


def configure_logging(level: str) -> None:
    """Route loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def resolve_symbols(args: argparse.Namespace) -> list[str]:
    """Explicit --symbols, then --limit, then the configured watchlist."""
    if args.symbols:
        return [s.strip().upper() for s in args.symbols if s.strip()]
    if args.limit:
        return get_sp500_stocks(args.limit)
    return load_config(settings.config_path).watchlist.tickers


def cmd_fetch(args: argparse.Namespace) -> None:
    """Fetch quotes and print them as a table."""
    logger.info("=== Fetching Quotes ===")

    if not settings.has_api_key:
        logger.warning("ALPHA_VANTAGE_API_KEY is not set, every symbol will be skipped")

    fetcher = build_fetcher(settings)
    if args.delay is not None:
        fetcher.delay_seconds = args.delay

    symbols = resolve_symbols(args)
    state = load_quotes(fetcher, symbols)
    if state.error:
        logger.error(state.error)
        sys.exit(1)

    sort_config = None
    if args.sort_key:
        direction = SortDirection.DESC if args.desc else SortDirection.ASC
        sort_config = SortConfig(key=SortKey(args.sort_key), direction=direction)

    projected = project_quotes(state.quotes, args.search, sort_config)
    summary = summarize_quotes(state.quotes, projected)

    if not projected:
        logger.info("No stock data available")
        return

    with pl.Config(tbl_rows=-1, tbl_hide_dataframe_shape=True):
        print(quotes_to_frame(projected))

    average = "-" if summary.average_price is None else f"${summary.average_price:,.2f}"
    logger.success(
        f"✅ {summary.total} quotes fetched, {summary.filtered} shown, average price {average}"
    )


def cmd_symbols(args: argparse.Namespace) -> None:
    """List ticker symbols of the universe."""
    if args.demo:
        symbols = get_demo_stocks()
    elif args.sector:
        symbols = get_sector_stocks(args.sector)
        if args.limit:
            symbols = symbols[: args.limit]
    else:
        symbols = get_sp500_stocks(args.limit)

    for symbol in symbols:
        print(f"{symbol:<6} {SECTOR_BY_SYMBOL[symbol].value}")
    logger.info(f"{len(symbols)} symbol(s)")


def cmd_dashboard(args: argparse.Namespace) -> None:
    """Launch the Streamlit dashboard."""
    logger.info(f"Starting dashboard from {DASHBOARD_PAGE}")
    command = [sys.executable, "-m", "streamlit", "run", str(DASHBOARD_PAGE)]
    if args.port:
        command += ["--server.port", str(args.port)]
    sys.exit(subprocess.call(command))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="StockBoard - Stock Price Dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    # Fetch command
    parser_fetch = subparsers.add_parser("fetch", help="Fetch quotes and print them")
    parser_fetch.add_argument(
        "--symbols",
        nargs="+",
        help="Symbols to fetch (default: configured watchlist)",
    )
    parser_fetch.add_argument(
        "--limit",
        type=int,
        help="Fetch the first N symbols of the universe",
    )
    parser_fetch.add_argument("--search", default="", help="Filter symbols by substring")
    parser_fetch.add_argument(
        "--sort-key",
        choices=[k.value for k in SortKey],
        help="Column to sort by",
    )
    parser_fetch.add_argument("--desc", action="store_true", help="Sort descending")
    parser_fetch.add_argument(
        "--delay",
        type=float,
        help="Seconds between requests (default: REQUEST_DELAY_SECONDS)",
    )
    parser_fetch.set_defaults(func=cmd_fetch)

    # Symbols command
    parser_symbols = subparsers.add_parser("symbols", help="List the ticker universe")
    parser_symbols.add_argument("--limit", type=int, help="Only list the first N symbols")
    parser_symbols.add_argument("--demo", action="store_true", help="List the demo subset")
    parser_symbols.add_argument(
        "--sector",
        choices=[s.value for s in Sector],
        help="Only list one sector",
    )
    parser_symbols.set_defaults(func=cmd_symbols)

    # Dashboard command
    parser_dashboard = subparsers.add_parser("dashboard", help="Launch the Streamlit dashboard")
    parser_dashboard.add_argument("--port", type=int, help="Server port")
    parser_dashboard.set_defaults(func=cmd_dashboard)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point with CLI argument parsing."""
    configure_logging(settings.log_level)

    # Parse arguments and execute
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
