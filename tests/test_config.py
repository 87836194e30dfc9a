from pathlib import Path

import pytest
from pydantic import ValidationError

from stockboard.config.settings import WatchlistConfig, load_config
from stockboard.core.config import Settings
from stockboard.core.universe import get_demo_stocks


def test_missing_config_falls_back_to_demo(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.yaml")

    assert config.watchlist.tickers == get_demo_stocks()


def test_explicit_symbols_are_normalized(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("watchlist:\n  symbols: [' aapl', AAPL, msft, '']\n", encoding="utf-8")

    config = load_config(path)

    assert config.watchlist.tickers == ["AAPL", "MSFT"]


def test_sector_with_limit(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("watchlist:\n  sector: Utilities\n  limit: 2\n", encoding="utf-8")

    assert load_config(path).watchlist.tickers == ["NEE", "DUK"]


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path).watchlist.tickers == get_demo_stocks()


def test_limit_without_symbols() -> None:
    assert WatchlistConfig(limit=6).tickers[-1] == "AMZN"


def test_invalid_limit_is_rejected() -> None:
    with pytest.raises(ValidationError):
        WatchlistConfig(limit=0)


def test_settings_read_api_key_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "env-key")
    monkeypatch.setenv("REQUEST_DELAY_SECONDS", "1.5")

    settings = Settings(_env_file=None)

    assert settings.alpha_vantage_api_key == "env-key"
    assert settings.request_delay_seconds == 1.5
    assert settings.has_api_key


def test_settings_accept_vite_prefixed_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ALPHA_VANTAGE_API_KEY", raising=False)
    monkeypatch.setenv("VITE_ALPHA_VANTAGE_API_KEY", "vite-key")

    assert Settings(_env_file=None).alpha_vantage_api_key == "vite-key"


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ALPHA_VANTAGE_API_KEY", raising=False)
    monkeypatch.delenv("VITE_ALPHA_VANTAGE_API_KEY", raising=False)
    monkeypatch.delenv("REQUEST_DELAY_SECONDS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.request_delay_seconds == 12.0
    assert not settings.has_api_key
