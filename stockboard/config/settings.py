"""Watchlist configuration for StockBoard.

Selects which symbols the dashboard fetches. Without a config file the
demo subset of the ticker universe is used.
"""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from stockboard.core.universe import Sector, get_demo_stocks, get_sector_stocks, get_sp500_stocks


class WatchlistConfig(BaseModel):
    """Symbol selection for the fetch batch."""

    model_config = ConfigDict(frozen=True)

    symbols: list[str] = Field(default_factory=list, description="Explicit tickers to fetch")
    sector: Sector | None = Field(default=None, description="Fetch all tickers of one sector")
    limit: int | None = Field(
        default=None, gt=0, description="Fetch the first N tickers of the universe"
    )

    @field_validator("symbols")
    @classmethod
    def normalize_symbols(cls, v: list[str]) -> list[str]:
        """Uppercase, strip blanks and drop duplicates while keeping order."""
        seen: dict[str, None] = {}
        for symbol in v:
            cleaned = str(symbol).strip().upper()
            if cleaned:
                seen.setdefault(cleaned, None)
        return list(seen)

    @property
    def tickers(self) -> list[str]:
        """Resolve the selection: explicit symbols, then sector, then limit, then demo."""
        if self.symbols:
            return list(self.symbols)
        if self.sector is not None:
            tickers = get_sector_stocks(self.sector)
            return tickers[: self.limit] if self.limit else tickers
        if self.limit:
            return get_sp500_stocks(self.limit)
        return get_demo_stocks()


class Config(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(frozen=True)

    watchlist: WatchlistConfig = Field(default_factory=WatchlistConfig)


def load_config(config_path: Path = Path("config/config.yaml")) -> Config:
    """Load configuration from YAML file.

    A missing file is not an error, the defaults fetch the demo subset.

    Args:
        config_path: Path to config.yaml file

    Returns:
        Parsed configuration object

    Raises:
        yaml.YAMLError: If config file is malformed
        pydantic.ValidationError: If the watchlist section is invalid
    """
    if not config_path.exists():
        logger.info(f"No configuration at {config_path}, using demo watchlist")
        return Config()

    logger.info(f"Loading configuration from {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        raw_config: dict[str, Any] = yaml.safe_load(f) or {}

    config = Config(**raw_config)
    logger.debug(f"Watchlist resolved to {len(config.watchlist.tickers)} tickers")
    return config
