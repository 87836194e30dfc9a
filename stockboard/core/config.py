"""Application configuration using Pydantic V2."""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Value shipped in example configs, never a usable key
PLACEHOLDER_API_KEY = "demo"


class Settings(BaseSettings):
    """Application settings and configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="stockboard", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Alpha Vantage
    alpha_vantage_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ALPHA_VANTAGE_API_KEY", "VITE_ALPHA_VANTAGE_API_KEY"),
        description="Alpha Vantage API key",
    )
    alpha_vantage_api_url: str = Field(
        default="https://www.alphavantage.co/query", description="Quote endpoint"
    )
    # Free tier: 5 calls per minute, so one call every 12 seconds
    request_delay_seconds: float = Field(
        default=12.0, ge=0, description="Pause between consecutive quote requests"
    )
    request_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Timeout for a single quote request"
    )

    # Project paths
    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)

    @property
    def config_path(self) -> Path:
        """Optional watchlist configuration file."""
        return self.project_root / "config" / "config.yaml"

    @property
    def has_api_key(self) -> bool:
        """False if the key is missing, blank or the 'demo' placeholder."""
        key = (self.alpha_vantage_api_key or "").strip()
        return bool(key) and key.lower() != PLACEHOLDER_API_KEY


# Singleton instance
settings = Settings()
