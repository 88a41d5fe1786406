"""Finnhub data provider — quotes and company news over REST.

Both endpoints authenticate with the ``token`` query parameter.
"""

from __future__ import annotations

import logging
import os
import re
from datetime import date
from typing import Any

import requests

from stockdash.config import FINNHUB_BASE_URL, mask_secret
from stockdash.errors import DashboardError, DashboardErrorCode
from stockdash.models.news import NewsItem
from stockdash.models.quote import Quote
from stockdash.providers.base import BaseQuoteProvider
from stockdash.validation import parse_news, parse_quote

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"(token|apikey|api_key)=[^&\s]+", re.IGNORECASE)


class FinnhubProvider(BaseQuoteProvider):
    """Fetch quotes and company news from Finnhub.io.

    Capabilities: quotes, news.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = FINNHUB_BASE_URL,
        session: Any | None = None,
        timeout: float | None = None,
    ) -> None:
        self.api_key = api_key or os.getenv("FINNHUB_API_KEY")
        if not self.api_key:
            raise DashboardError(
                "Finnhub API key required. Set FINNHUB_API_KEY env var or pass api_key.",
                code=DashboardErrorCode.AUTH_FAILED,
            )
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def capabilities(self) -> set[str]:
        return {"quotes", "news"}

    # --------------------------------------------------------------- quotes

    def get_quote(self, symbol: str) -> Quote:
        payload = self._get("/quote", {"symbol": symbol}, label=symbol)
        return parse_quote(symbol, payload)

    # ----------------------------------------------------------------- news

    def get_company_news(self, symbol: str, start: date, end: date) -> list[NewsItem]:
        payload = self._get(
            "/company-news",
            {"symbol": symbol, "from": start.isoformat(), "to": end.isoformat()},
            label=f"Company News {symbol}",
        )
        return parse_news(symbol, payload)

    # ------------------------------------------------------------ internals

    def _get(self, path: str, params: dict[str, str], label: str) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(
            "GET %s params=%s token=%s", url, params, mask_secret(self.api_key),
        )
        try:
            resp = self.session.get(
                url,
                params={**params, "token": self.api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            detail = _TOKEN_RE.sub(r"\1=***", str(exc))
            raise DashboardError(
                f"{label}: {detail}",
                code=DashboardErrorCode.NETWORK_ERROR,
            ) from exc

        self._check_response(resp, label)
        try:
            return resp.json()
        except ValueError as exc:
            raise DashboardError(
                f"{label}: Invalid JSON response",
                code=DashboardErrorCode.PARSE_ERROR,
            ) from exc

    @staticmethod
    def _check_response(resp: Any, label: str) -> None:
        status = resp.status_code
        if 200 <= status < 300:
            return
        reason = resp.reason or ""
        raise DashboardError(
            f"{label}: {status} {reason}".rstrip(),
            code=DashboardErrorCode.HTTP_ERROR,
            status_code=status,
        )
