"""Mock provider for testing and offline demos — no API key required."""

from __future__ import annotations

import threading
from datetime import date
from typing import Any

from stockdash.errors import DashboardError
from stockdash.models.news import NewsItem
from stockdash.models.quote import Quote
from stockdash.providers.base import BaseQuoteProvider
from stockdash.validation import parse_news, parse_quote


class MockProvider(BaseQuoteProvider):
    """In-memory provider that returns configurable static data.

    Use ``set_quote``, ``set_quote_payload``, ``set_error`` etc. to pre-load
    responses, or leave defaults for synthetic data. Every call is recorded
    in ``quote_calls`` / ``news_calls``. ``set_gate`` holds a symbol's
    requests until the given event is set.
    """

    def __init__(self, gate_timeout: float = 5.0) -> None:
        self._quotes: dict[str, Quote] = {}
        self._payloads: dict[str, Any] = {}
        self._errors: dict[str, DashboardError] = {}
        self._news: dict[str, list[NewsItem]] = {}
        self._news_payloads: dict[str, Any] = {}
        self._news_errors: dict[str, DashboardError] = {}
        self._gates: dict[str, threading.Event] = {}
        self._gate_timeout = gate_timeout
        self._lock = threading.Lock()
        self.quote_calls: list[str] = []
        self.news_calls: list[tuple[str, date, date]] = []

    # --- Pre-load helpers ---

    def set_quote(self, symbol: str, quote: Quote) -> None:
        self._quotes[symbol.upper()] = quote

    def set_quote_payload(self, symbol: str, payload: Any) -> None:
        """Serve a raw endpoint payload, validated like the real provider."""
        self._payloads[symbol.upper()] = payload

    def set_error(self, symbol: str, error: DashboardError) -> None:
        self._errors[symbol.upper()] = error

    def set_news(self, symbol: str, items: list[NewsItem]) -> None:
        self._news[symbol.upper()] = items

    def set_news_payload(self, symbol: str, payload: Any) -> None:
        self._news_payloads[symbol.upper()] = payload

    def set_news_error(self, symbol: str, error: DashboardError) -> None:
        self._news_errors[symbol.upper()] = error

    def set_gate(self, symbol: str, gate: threading.Event) -> None:
        self._gates[symbol.upper()] = gate

    # --- Provider implementation ---

    def get_quote(self, symbol: str) -> Quote:
        key = symbol.upper()
        with self._lock:
            self.quote_calls.append(key)
        self._wait(key)
        if key in self._errors:
            raise self._errors[key]
        if key in self._payloads:
            return parse_quote(key, self._payloads[key])
        if key in self._quotes:
            return self._quotes[key]
        return Quote(
            symbol=key,
            price=150.00,
            change=1.50,
            change_pct=1.01,
            high=151.25,
            low=148.10,
            open=148.60,
            prev_close=148.50,
        )

    def get_company_news(self, symbol: str, start: date, end: date) -> list[NewsItem]:
        key = symbol.upper()
        with self._lock:
            self.news_calls.append((key, start, end))
        self._wait(key)
        if key in self._news_errors:
            raise self._news_errors[key]
        if key in self._news_payloads:
            return parse_news(key, self._news_payloads[key])
        return list(self._news.get(key, []))

    def capabilities(self) -> set[str]:
        return {"quotes", "news"}

    def _wait(self, key: str) -> None:
        gate = self._gates.get(key)
        if gate is not None:
            gate.wait(self._gate_timeout)
