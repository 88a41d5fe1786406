"""Display helpers for the quote table, chart and news panels."""

from __future__ import annotations

import math

from stockdash.view import SortKey

PLACEHOLDER = "–"

SORT_COLUMNS: tuple[tuple[SortKey, str], ...] = (
    (SortKey.SYMBOL, "Symbol"),
    (SortKey.PRICE, "Price"),
    (SortKey.CHANGE_PCT, "Change %"),
    (SortKey.CHANGE, "Change ($)"),
    (SortKey.HIGH, "High"),
    (SortKey.LOW, "Low"),
)

NO_TABLE_DATA = "No data. Enter API key and click Fetch."
NO_CHART_DATA = "No chart data yet. Click Reload."
NO_CHART_SELECTION = "Pick a row to see its chart."
NO_NEWS_DATA = "No news data yet. Click Reload."
NO_NEWS_SELECTION = "Pick a row to see its news."


def _missing(value: float | None) -> bool:
    return value is None or math.isnan(value)


def fmt_usd(value: float | None) -> str:
    """Format as US dollars: ``1234.5`` -> ``"$1,234.50"``."""
    if _missing(value):
        return PLACEHOLDER
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def fmt_pct(value: float | None) -> str:
    if _missing(value):
        return PLACEHOLDER
    return f"{value:.2f}%"


def is_up(value: float | None) -> bool:
    """Treat a missing change as flat (up)."""
    return (value or 0) >= 0


def sort_indicator(active: bool, ascending: bool) -> str:
    arrow = "▲" if ascending else "▼"
    return arrow if active else ""
