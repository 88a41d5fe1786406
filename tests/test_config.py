"""Tests for dashboard configuration loading."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from stockdash.config import (
    FINNHUB_BASE_URL,
    DashboardConfig,
    ProviderType,
    config_from_env,
    mask_secret,
    read_env_file,
)
from stockdash.errors import ConfigError
from stockdash.symbols import DEFAULT_SYMBOLS_TEXT


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    keys = [
        "STOCKDASH_PROVIDER",
        "FINNHUB_API_KEY",
        "STOCKDASH_BASE_URL",
        "STOCKDASH_SYMBOLS",
        "STOCKDASH_NEWS_FROM",
        "STOCKDASH_NEWS_TO",
        "STOCKDASH_NEWS_LOOKBACK_DAYS",
        "STOCKDASH_REQUEST_TIMEOUT",
    ]
    for key in keys:
        monkeypatch.delenv(key, raising=False)


class TestDefaults:
    def test_config_defaults(self):
        config = DashboardConfig()
        assert config.provider is ProviderType.FINNHUB
        assert config.finnhub_api_key is None
        assert config.base_url == FINNHUB_BASE_URL
        assert config.symbols_text == DEFAULT_SYMBOLS_TEXT
        assert config.request_timeout is None

    def test_from_empty_env(self):
        config = config_from_env()
        assert config.provider is ProviderType.FINNHUB
        assert config.news_lookback_days == 20


class TestFromEnv:
    def test_reads_variables(self, monkeypatch):
        monkeypatch.setenv("STOCKDASH_PROVIDER", "Mock")
        monkeypatch.setenv("FINNHUB_API_KEY", "abc123")
        monkeypatch.setenv("STOCKDASH_BASE_URL", "https://example.test/api/")
        monkeypatch.setenv("STOCKDASH_SYMBOLS", "nvda,amd")
        monkeypatch.setenv("STOCKDASH_NEWS_FROM", "2025-08-01")
        monkeypatch.setenv("STOCKDASH_NEWS_TO", "2025-08-21")
        monkeypatch.setenv("STOCKDASH_REQUEST_TIMEOUT", "2.5")

        config = config_from_env()
        assert config.provider is ProviderType.MOCK
        assert config.finnhub_api_key == "abc123"
        assert config.base_url == "https://example.test/api"
        assert config.symbols_text == "nvda,amd"
        assert config.news_from == date(2025, 8, 1)
        assert config.news_to == date(2025, 8, 21)
        assert config.request_timeout == 2.5

    def test_env_file_fills_gaps(self, tmp_path: Path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# local settings\n"
            "export FINNHUB_API_KEY='from-file'\n"
            "STOCKDASH_SYMBOLS=aapl\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("STOCKDASH_SYMBOLS", "msft")
        config = config_from_env(env_file)
        assert config.finnhub_api_key == "from-file"
        assert config.symbols_text == "msft"

    def test_unknown_provider(self, monkeypatch):
        monkeypatch.setenv("STOCKDASH_PROVIDER", "polygon")
        with pytest.raises(ConfigError, match="Unsupported provider"):
            config_from_env()

    def test_bad_date(self, monkeypatch):
        monkeypatch.setenv("STOCKDASH_NEWS_FROM", "08/01/2025")
        with pytest.raises(ConfigError):
            config_from_env()

    def test_bad_lookback(self, monkeypatch):
        monkeypatch.setenv("STOCKDASH_NEWS_LOOKBACK_DAYS", "twenty")
        with pytest.raises(ConfigError):
            config_from_env()

    def test_inverted_range(self):
        with pytest.raises(ConfigError):
            DashboardConfig(news_from=date(2025, 8, 21), news_to=date(2025, 8, 1))

    def test_non_positive_timeout(self):
        with pytest.raises(ConfigError):
            DashboardConfig(request_timeout=0)


class TestHelpers:
    def test_missing_env_file(self, tmp_path: Path):
        assert read_env_file(tmp_path / "nope.env") == {}

    def test_mask_secret(self):
        assert mask_secret("") == ""
        assert mask_secret("abcd") == "****"
        assert mask_secret("pk_test_123456") == "pk**********56"
