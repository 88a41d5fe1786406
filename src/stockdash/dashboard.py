"""Dashboard — the session state container driven by user events.

Owns the symbol list, the quote orchestrator, the news service, the view
controls, the selection and the theme. Every mutation goes through a method
here; derived data (rows, chart, empty-state messages) is recomputed from
state on access.
"""

from __future__ import annotations

import logging
from typing import Any

from stockdash.config import DashboardConfig, ProviderType, config_from_env
from stockdash.formatting import (
    NO_CHART_DATA,
    NO_CHART_SELECTION,
    NO_NEWS_DATA,
    NO_NEWS_SELECTION,
    NO_TABLE_DATA,
    SORT_COLUMNS,
    sort_indicator,
)
from stockdash.models.news import NewsItem
from stockdash.models.quote import Quote
from stockdash.models.snapshot import QuoteSnapshot
from stockdash.news import NewsDateRange, NewsFetchService
from stockdash.orchestrator import QuoteFetchOrchestrator
from stockdash.providers import create_provider
from stockdash.providers.base import BaseQuoteProvider
from stockdash.selection import SelectionStateMachine
from stockdash.symbols import parse_symbols
from stockdash.view import (
    ChartSeries,
    SortDirection,
    SortKey,
    ViewState,
    chart_series,
    project,
    toggle_sort,
    with_search,
)

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")


class Dashboard:
    """One dashboard session.

    Usage::

        dash = Dashboard(provider, DashboardConfig())
        await dash.start()
        dash.sort_by(SortKey.PRICE)
        await dash.click_row("MSFT")
        dash.rows, dash.news, dash.chart
    """

    def __init__(
        self,
        provider: BaseQuoteProvider,
        config: DashboardConfig | None = None,
    ) -> None:
        self.config = config or DashboardConfig()
        self.provider = provider
        self.quotes_fetcher = QuoteFetchOrchestrator(provider)
        self.news_fetcher = NewsFetchService(
            provider,
            NewsDateRange(
                start=self.config.news_from,
                end=self.config.news_to,
                lookback_days=self.config.news_lookback_days,
            ),
        )
        self.selection = SelectionStateMachine()
        self.view = ViewState()
        self.theme = THEMES[0]
        self.symbols_text = self.config.symbols_text
        self.symbols = parse_symbols(self.symbols_text)
        self._started = False

    # ------------------------------------------------------------ lifecycle

    async def start(self) -> None:
        """Session start: select the first symbol, then fetch quotes once."""
        if self._started:
            return
        self._started = True
        self.selection.on_symbols_changed(self.symbols)
        await self.quotes_fetcher.fetch(self.symbols)

    # --------------------------------------------------------------- events

    def set_symbols_text(self, text: str) -> None:
        """Symbol input edited. Quotes are only refetched on ``refresh``."""
        self.symbols_text = text
        self.symbols = parse_symbols(text)
        self.selection.on_symbols_changed(self.symbols)

    async def refresh(self) -> bool:
        return await self.quotes_fetcher.fetch(self.symbols)

    def set_search(self, text: str) -> None:
        self.view = with_search(self.view, text)

    def sort_by(self, key: SortKey | str) -> None:
        self.view = toggle_sort(self.view, SortKey(key))

    async def click_row(self, symbol: str) -> list[NewsItem]:
        """Select a row and load its news.

        Providers without the ``news`` capability only change the selection.
        """
        self.selection.select(symbol)
        if "news" not in self.provider.capabilities():
            logger.debug("Provider has no news capability; skipping news for %s", symbol)
            return self.news
        return await self.news_fetcher.fetch(symbol)

    def toggle_theme(self) -> str:
        self.theme = THEMES[1] if self.theme == THEMES[0] else THEMES[0]
        return self.theme

    # -------------------------------------------------------------- derived

    @property
    def snapshot(self) -> QuoteSnapshot:
        return self.quotes_fetcher.snapshot

    @property
    def loading(self) -> bool:
        return self.quotes_fetcher.loading

    @property
    def error(self) -> str | None:
        return self.quotes_fetcher.error

    @property
    def selected_symbol(self) -> str | None:
        return self.selection.symbol

    @property
    def news(self) -> list[NewsItem]:
        return self.news_fetcher.items

    @property
    def rows(self) -> list[Quote]:
        return project(self.snapshot, self.view)

    @property
    def chart(self) -> ChartSeries | None:
        return chart_series(self.snapshot, self.selected_symbol)

    @property
    def headers(self) -> list[dict[str, Any]]:
        """Column headers with the active sort marker."""
        ascending = self.view.sort_direction is SortDirection.ASC
        return [
            {
                "key": key.value,
                "label": label,
                "indicator": sort_indicator(key is self.view.sort_key, ascending),
            }
            for key, label in SORT_COLUMNS
        ]

    @property
    def table_message(self) -> str | None:
        if not self.loading and not self.error and not self.rows:
            return NO_TABLE_DATA
        return None

    @property
    def chart_message(self) -> str | None:
        if self.chart is not None:
            return None
        return NO_CHART_DATA if self.selected_symbol else NO_CHART_SELECTION

    @property
    def news_message(self) -> str | None:
        if self.selected_symbol and self.news:
            return None
        return NO_NEWS_DATA if self.selected_symbol else NO_NEWS_SELECTION


def create_dashboard_from_env(**provider_kwargs: Any) -> Dashboard:
    """Zero-config factory — reads provider, API key and symbols from env vars.

    See ``stockdash.config.config_from_env`` for the variables read.
    """
    config = config_from_env()
    kwargs: dict[str, Any] = dict(provider_kwargs)
    if config.provider is ProviderType.FINNHUB:
        kwargs.setdefault("api_key", config.finnhub_api_key)
        kwargs.setdefault("base_url", config.base_url)
        kwargs.setdefault("timeout", config.request_timeout)
    provider = create_provider(config.provider, **kwargs)
    logger.info("Created dashboard with %s provider", config.provider.value)
    return Dashboard(provider, config)
