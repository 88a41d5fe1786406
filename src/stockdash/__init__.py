"""stockdash — session core for a stock quote and news dashboard.

Polls Finnhub for per-symbol quotes and company news, and derives the
sortable table, chart series and news panel a UI layer renders.

Quick start::

    import asyncio
    from stockdash import create_dashboard_from_env

    dash = create_dashboard_from_env()
    asyncio.run(dash.start())
    for quote in dash.rows:
        print(quote.symbol, quote.price)
"""

from __future__ import annotations

from stockdash.config import DashboardConfig, ProviderType, config_from_env
from stockdash.dashboard import Dashboard, create_dashboard_from_env
from stockdash.errors import ConfigError, DashboardError, DashboardErrorCode
from stockdash.models.news import NewsItem
from stockdash.models.quote import Quote
from stockdash.models.snapshot import QuoteSnapshot
from stockdash.news import NewsDateRange, NewsFetchService
from stockdash.orchestrator import QuoteFetchOrchestrator
from stockdash.selection import NoSelection, Selected, SelectionStateMachine
from stockdash.symbols import DEFAULT_SYMBOLS, parse_symbols
from stockdash.view import (
    ChartSeries,
    SortDirection,
    SortKey,
    ViewState,
    chart_series,
    project,
    toggle_sort,
)

__version__ = "0.1.0"

__all__ = [
    # Session
    "Dashboard",
    "create_dashboard_from_env",
    # Config
    "DashboardConfig",
    "ProviderType",
    "config_from_env",
    # Errors
    "DashboardError",
    "DashboardErrorCode",
    "ConfigError",
    # Models
    "Quote",
    "QuoteSnapshot",
    "NewsItem",
    # Components
    "QuoteFetchOrchestrator",
    "NewsFetchService",
    "NewsDateRange",
    "SelectionStateMachine",
    "NoSelection",
    "Selected",
    "parse_symbols",
    "DEFAULT_SYMBOLS",
    # View projection
    "ViewState",
    "SortKey",
    "SortDirection",
    "ChartSeries",
    "project",
    "toggle_sort",
    "chart_series",
]
