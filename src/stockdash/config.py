"""Dashboard configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path

from stockdash.errors import ConfigError
from stockdash.symbols import DEFAULT_SYMBOLS_TEXT

FINNHUB_BASE_URL = "https://finnhub.io/api/v1"


class ProviderType(Enum):
    """Supported data provider backends."""

    FINNHUB = "finnhub"
    MOCK = "mock"


@dataclass
class DashboardConfig:
    """Configuration for a dashboard session.

    Attributes:
        provider: Data provider backend.
        finnhub_api_key: Finnhub access token, sent as the ``token`` query
            parameter.
        base_url: Finnhub REST root.
        symbols_text: Initial comma-separated symbol list.
        news_from: Fixed first day of the company-news window.
        news_to: Fixed last day of the company-news window.
        news_lookback_days: Window length used when no fixed start is set.
        request_timeout: Per-request timeout in seconds. ``None`` waits
            forever.
    """

    provider: ProviderType = ProviderType.FINNHUB
    finnhub_api_key: str | None = None
    base_url: str = FINNHUB_BASE_URL
    symbols_text: str = DEFAULT_SYMBOLS_TEXT
    news_from: date | None = None
    news_to: date | None = None
    news_lookback_days: int = 20
    request_timeout: float | None = None

    def __post_init__(self) -> None:
        if self.news_lookback_days < 0:
            raise ConfigError("news_lookback_days must be >= 0")
        if self.news_from and self.news_to and self.news_from > self.news_to:
            raise ConfigError(
                f"news_from ({self.news_from}) is after news_to ({self.news_to})"
            )
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigError("request_timeout must be positive when set")


def config_from_env(env_path: Path | str | None = None) -> DashboardConfig:
    """Build a config from environment variables.

    Values in ``env_path`` (a ``.env`` file) fill in anything the process
    environment does not set.

    Environment variables:
        STOCKDASH_PROVIDER: "finnhub" or "mock" (default: "finnhub").
        FINNHUB_API_KEY: Finnhub API token.
        STOCKDASH_BASE_URL: Finnhub REST root.
        STOCKDASH_SYMBOLS: Initial comma-separated symbols.
        STOCKDASH_NEWS_FROM: Fixed news window start, ``YYYY-MM-DD``.
        STOCKDASH_NEWS_TO: Fixed news window end, ``YYYY-MM-DD``.
        STOCKDASH_NEWS_LOOKBACK_DAYS: News window length (default: 20).
        STOCKDASH_REQUEST_TIMEOUT: Request timeout in seconds (default: none).
    """
    env = read_env_file(env_path) if env_path else {}
    for key, value in os.environ.items():
        if value:
            env[key] = value

    provider_name = env.get("STOCKDASH_PROVIDER", "finnhub").strip().lower()
    try:
        provider = ProviderType(provider_name)
    except ValueError:
        supported = ", ".join(p.value for p in ProviderType)
        raise ConfigError(
            f"Unsupported provider '{provider_name}'. Supported: {supported}"
        ) from None

    return DashboardConfig(
        provider=provider,
        finnhub_api_key=env.get("FINNHUB_API_KEY") or None,
        base_url=env.get("STOCKDASH_BASE_URL", FINNHUB_BASE_URL).rstrip("/"),
        symbols_text=env.get("STOCKDASH_SYMBOLS", DEFAULT_SYMBOLS_TEXT),
        news_from=_parse_date(env, "STOCKDASH_NEWS_FROM"),
        news_to=_parse_date(env, "STOCKDASH_NEWS_TO"),
        news_lookback_days=_parse_int(env, "STOCKDASH_NEWS_LOOKBACK_DAYS", 20),
        request_timeout=_parse_float(env, "STOCKDASH_REQUEST_TIMEOUT"),
    )


def read_env_file(path: Path | str) -> dict[str, str]:
    """Parse a ``KEY=value`` dotenv file. Missing file yields ``{}``."""
    env_path = Path(path)
    if not env_path.exists():
        return {}
    values: dict[str, str] = {}
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if value.startswith(("'", '"')) and value.endswith(("'", '"')):
            value = value[1:-1]
        values[key] = value
    return values


def mask_secret(value: str | None) -> str:
    """Mask all but the first and last two characters of a secret."""
    if not value:
        return ""
    if len(value) <= 4:
        return "*" * len(value)
    return f"{value[:2]}{'*' * (len(value) - 4)}{value[-2:]}"


def _parse_date(env: dict[str, str], key: str) -> date | None:
    raw = env.get(key, "").strip()
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise ConfigError(f"{key} must be YYYY-MM-DD, got '{raw}'") from None


def _parse_int(env: dict[str, str], key: str, default: int) -> int:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got '{raw}'") from None


def _parse_float(env: dict[str, str], key: str) -> float | None:
    raw = env.get(key, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got '{raw}'") from None
