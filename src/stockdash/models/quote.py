"""Quote (last price and daily change) data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Quote:
    """Point-in-time price for one ticker.

    Attributes:
        symbol: Ticker symbol.
        price: Current price.
        change: Dollar change from previous close.
        change_pct: Percent change from previous close.
        high: High of the day.
        low: Low of the day.
        open: Opening price.
        prev_close: Previous session close.
    """

    symbol: str
    price: float
    change: float
    change_pct: float
    high: float | None = None
    low: float | None = None
    open: float | None = None
    prev_close: float | None = None
