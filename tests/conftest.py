from typing import Any
from unittest.mock import MagicMock

import pytest

from stockboard.core.config import Settings
from stockboard.core.domain_models import Quote


def make_response(payload: Any, status_code: int = 200, reason: str = "OK") -> MagicMock:
    """requests.Response stand-in returning `payload` from .json()."""
    response = MagicMock()
    response.ok = 200 <= status_code < 400
    response.status_code = status_code
    response.reason = reason
    response.json.return_value = payload
    return response


def global_quote(price: str = "123.45", change_percent: str | None = "-2.31%") -> dict[str, Any]:
    quote = {"01. symbol": "IGNORED", "05. price": price}
    if change_percent is not None:
        quote["10. change percent"] = change_percent
    return {"Global Quote": quote}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real key out of the tests."""
    for name in ("ALPHA_VANTAGE_API_KEY", "VITE_ALPHA_VANTAGE_API_KEY", "REQUEST_DELAY_SECONDS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        alpha_vantage_api_key="test-key",
        alpha_vantage_api_url="https://example.test/query",
        request_delay_seconds=12.0,
        request_timeout_seconds=5.0,
        _env_file=None,
    )


@pytest.fixture
def sample_quotes() -> list[Quote]:
    return [
        Quote(symbol="B", price=30.0, change_percent=1.5),
        Quote(symbol="A", price=10.0, change_percent=-0.5),
        Quote(symbol="C", price=20.0, change_percent=0.0),
    ]
