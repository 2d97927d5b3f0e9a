"""Client configuration using Pydantic Settings."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MATKA_",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    API_BASE_URL: str = "http://localhost:8080"
    API_TOKEN: str | None = None

    # Request abandonment timeouts (seconds)
    GAME_TIMEOUT_S: float = 10.0
    WALLET_TIMEOUT_S: float = 8.0
    BET_TIMEOUT_S: float = 15.0

    # Game snapshot polling
    GAME_POLL_INTERVAL_S: int = 30

    # App
    DEBUG: bool = False
    LOG_FILE: Path | None = None
    CURRENCY: str = "₹"


settings = Settings()
