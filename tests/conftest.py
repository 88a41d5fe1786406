"""Shared fixtures for stockdash tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from stockdash.models.news import NewsItem
from stockdash.models.quote import Quote
from stockdash.models.snapshot import QuoteSnapshot
from stockdash.providers.mock import MockProvider


@pytest.fixture
def mock_provider() -> MockProvider:
    return MockProvider()


@pytest.fixture
def sample_quote() -> Quote:
    return Quote(
        symbol="AAPL",
        price=227.52,
        change=2.12,
        change_pct=0.94,
        high=228.10,
        low=224.80,
        open=225.00,
        prev_close=225.40,
    )


@pytest.fixture
def sample_payload() -> dict:
    """Raw Finnhub /quote body."""
    return {
        "c": 227.52, "d": 2.12, "dp": 0.94,
        "h": 228.10, "l": 224.80, "o": 225.00, "pc": 225.40,
        "t": 1755806400,
    }


@pytest.fixture
def sample_snapshot() -> QuoteSnapshot:
    """Four quotes in symbol-list order."""
    return QuoteSnapshot.from_quotes([
        Quote(symbol="MSFT", price=505.0, change=-1.5, change_pct=-0.3, high=510.0, low=500.0),
        Quote(symbol="AAPL", price=227.5, change=2.1, change_pct=0.9, high=228.1, low=224.8),
        Quote(symbol="TSLA", price=330.0, change=5.0, change_pct=1.5),
        Quote(symbol="AMZN", price=227.5, change=-0.4, change_pct=-0.2, high=229.0, low=226.0),
    ])


@pytest.fixture
def sample_news() -> list[NewsItem]:
    return [
        NewsItem(
            headline="Apple unveils new iPhone lineup",
            summary="The company announced three new models.",
            url="https://example.com/apple-iphone",
            extra={"source": "Example Wire", "datetime": 1755700000},
        ),
        NewsItem(
            headline="Apple supplier outlook improves",
            summary="Analysts raise estimates.",
            url="https://example.com/apple-supplier",
        ),
    ]
