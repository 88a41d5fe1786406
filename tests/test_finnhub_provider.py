"""Tests for FinnhubProvider with a fake HTTP session."""

from __future__ import annotations

import json
from datetime import date
from typing import Any

import pytest
import requests

from stockdash.errors import DashboardError, DashboardErrorCode
from stockdash.providers.finnhub import FinnhubProvider


def _response(status: int, body: Any = None, reason: str = "", raw: bytes | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp.encoding = "utf-8"
    resp._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    return resp


class FakeSession:
    """Records GET calls and replays queued responses or exceptions."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, params: dict | None = None, timeout: float | None = None) -> Any:
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    monkeypatch.delenv("FINNHUB_API_KEY", raising=False)


def _provider(session: FakeSession, **kwargs) -> FinnhubProvider:
    return FinnhubProvider(api_key="test-token-123", session=session, **kwargs)


class TestConstruction:
    def test_requires_api_key(self):
        with pytest.raises(DashboardError) as exc_info:
            FinnhubProvider(session=FakeSession())
        assert exc_info.value.code == DashboardErrorCode.AUTH_FAILED

    def test_api_key_from_env(self, monkeypatch):
        monkeypatch.setenv("FINNHUB_API_KEY", "env-token")
        provider = FinnhubProvider(session=FakeSession())
        assert provider.api_key == "env-token"

    def test_capabilities(self):
        assert _provider(FakeSession()).capabilities() == {"quotes", "news"}


class TestGetQuote:
    def test_success(self, sample_payload):
        session = FakeSession(_response(200, sample_payload, "OK"))
        quote = _provider(session).get_quote("AAPL")
        assert quote.symbol == "AAPL"
        assert quote.price == 227.52
        assert quote.prev_close == 225.40

    def test_request_shape(self, sample_payload):
        session = FakeSession(_response(200, sample_payload, "OK"))
        _provider(session, base_url="https://example.test/api/v1/", timeout=3.0).get_quote("MSFT")
        call = session.calls[0]
        assert call["url"] == "https://example.test/api/v1/quote"
        assert call["params"] == {"symbol": "MSFT", "token": "test-token-123"}
        assert call["timeout"] == 3.0

    def test_default_has_no_timeout(self, sample_payload):
        session = FakeSession(_response(200, sample_payload, "OK"))
        _provider(session).get_quote("AAPL")
        assert session.calls[0]["timeout"] is None

    def test_http_error(self):
        session = FakeSession(_response(404, {"error": "not found"}, "Not Found"))
        with pytest.raises(DashboardError) as exc_info:
            _provider(session).get_quote("BAD")
        assert str(exc_info.value) == "BAD: 404 Not Found"
        assert exc_info.value.code == DashboardErrorCode.HTTP_ERROR
        assert exc_info.value.status_code == 404

    def test_http_error_without_reason(self):
        session = FakeSession(_response(429, {}, ""))
        with pytest.raises(DashboardError, match=r"^AAPL: 429$"):
            _provider(session).get_quote("AAPL")

    def test_no_data_sentinel(self):
        session = FakeSession(_response(200, {"c": 0, "d": None, "dp": None}, "OK"))
        with pytest.raises(DashboardError) as exc_info:
            _provider(session).get_quote("ZZZZ")
        assert exc_info.value.code == DashboardErrorCode.NO_DATA
        assert str(exc_info.value) == "ZZZZ: No data"

    def test_malformed_json(self):
        session = FakeSession(_response(200, raw=b"<html>oops</html>", reason="OK"))
        with pytest.raises(DashboardError) as exc_info:
            _provider(session).get_quote("AAPL")
        assert exc_info.value.code == DashboardErrorCode.PARSE_ERROR

    def test_network_error_masks_token(self):
        exc = requests.ConnectionError(
            "Max retries exceeded with url: /api/v1/quote?symbol=AAPL&token=test-token-123"
        )
        session = FakeSession(exc)
        with pytest.raises(DashboardError) as exc_info:
            _provider(session).get_quote("AAPL")
        assert exc_info.value.code == DashboardErrorCode.NETWORK_ERROR
        assert "test-token-123" not in str(exc_info.value)
        assert "token=***" in str(exc_info.value)


class TestGetCompanyNews:
    def test_success(self):
        body = [
            {"headline": "A", "summary": "sa", "url": "https://example.com/a", "source": "X"},
            {"headline": "B", "summary": "sb", "url": "https://example.com/b"},
        ]
        session = FakeSession(_response(200, body, "OK"))
        items = _provider(session).get_company_news("AAPL", date(2025, 8, 1), date(2025, 8, 21))
        assert [i.headline for i in items] == ["A", "B"]
        assert items[0].extra == {"source": "X"}

    def test_request_shape(self):
        session = FakeSession(_response(200, [], "OK"))
        _provider(session).get_company_news("AAPL", date(2025, 8, 1), date(2025, 8, 21))
        call = session.calls[0]
        assert call["url"] == "https://finnhub.io/api/v1/company-news"
        assert call["params"] == {
            "symbol": "AAPL",
            "from": "2025-08-01",
            "to": "2025-08-21",
            "token": "test-token-123",
        }

    def test_http_error(self):
        session = FakeSession(_response(500, {}, "Internal Server Error"))
        with pytest.raises(DashboardError) as exc_info:
            _provider(session).get_company_news("AAPL", date(2025, 8, 1), date(2025, 8, 21))
        assert "500 Internal Server Error" in str(exc_info.value)
