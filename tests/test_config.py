"""Tests for settings and logging setup."""

from loguru import logger

from matka_client.config import Settings, settings
from matka_client.log import configure_logging


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("MATKA_API_BASE_URL", "https://bets.example")
    monkeypatch.setenv("MATKA_BET_TIMEOUT_S", "5")

    s = Settings()

    assert s.API_BASE_URL == "https://bets.example"
    assert s.BET_TIMEOUT_S == 5.0
    assert s.WALLET_TIMEOUT_S == 8.0


def test_configure_logging_file_sink(tmp_path, monkeypatch):
    log_file = tmp_path / "logs" / "client.log"
    monkeypatch.setattr(settings, "LOG_FILE", log_file)

    configure_logging()
    logger.info("bet placed")
    logger.remove()

    assert "bet placed" in log_file.read_text(encoding="utf-8")
