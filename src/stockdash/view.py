"""View projection — filtered, sorted rows and chart series from a snapshot.

Everything here is a pure function of its inputs; the dashboard recomputes
the projection whenever the snapshot or the view controls change.
"""

from __future__ import annotations

import locale
from dataclasses import dataclass, field, replace
from enum import Enum
from functools import cmp_to_key

from stockdash.models.quote import Quote
from stockdash.models.snapshot import QuoteSnapshot


class SortKey(Enum):
    """Sortable table columns."""

    SYMBOL = "symbol"
    PRICE = "price"
    CHANGE_PCT = "changePct"
    CHANGE = "change"
    HIGH = "high"
    LOW = "low"

    @property
    def attr(self) -> str:
        """Quote attribute the column reads."""
        return _SORT_ATTRS[self]


_SORT_ATTRS: dict[SortKey, str] = {
    SortKey.SYMBOL: "symbol",
    SortKey.PRICE: "price",
    SortKey.CHANGE_PCT: "change_pct",
    SortKey.CHANGE: "change",
    SortKey.HIGH: "high",
    SortKey.LOW: "low",
}


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def sign(self) -> int:
        return 1 if self is SortDirection.ASC else -1

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class ViewState:
    """User-controlled table state.

    Attributes:
        search_text: Symbol substring filter (case-insensitive).
        sort_key: Active sort column.
        sort_direction: Active sort direction.
    """

    search_text: str = ""
    sort_key: SortKey = SortKey.SYMBOL
    sort_direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class ChartSeries:
    """Line-chart input: one point per snapshot symbol."""

    categories: list[str] = field(default_factory=list)
    data: list[float] = field(default_factory=list)
    name: str = "Price"


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _collate(a: str, b: str) -> int:
    return _sign(locale.strcoll(a, b))


def compare_quotes(a: Quote, b: Quote, key: SortKey, direction: SortDirection) -> int:
    """Three-way compare of two quotes for the given column.

    Equal values, or a missing value on either side, fall back to ascending
    symbol order; ``direction`` is not applied to that fallback.

    Strings are compared with ``locale.strcoll``. This package never calls
    ``locale.setlocale``, so the ordering follows the host application's
    ``LC_COLLATE`` setting and is plain code-point order under the default
    "C" locale.
    """
    va = getattr(a, key.attr)
    vb = getattr(b, key.attr)
    if va == vb or va is None or vb is None:
        return _collate(a.symbol, b.symbol)
    if isinstance(va, str) or isinstance(vb, str):
        return direction.sign * _collate(str(va), str(vb))
    return direction.sign * _sign(va - vb)


def filter_quotes(quotes: list[Quote], search_text: str) -> list[Quote]:
    """Keep quotes whose symbol contains ``search_text`` (case-insensitive)."""
    needle = search_text.upper()
    return [q for q in quotes if needle in q.symbol]


def project(snapshot: QuoteSnapshot, view: ViewState) -> list[Quote]:
    """Filter then sort the snapshot for display."""
    rows = filter_quotes(list(snapshot), view.search_text)
    return sorted(
        rows,
        key=cmp_to_key(
            lambda a, b: compare_quotes(a, b, view.sort_key, view.sort_direction)
        ),
    )


def toggle_sort(view: ViewState, key: SortKey) -> ViewState:
    """Column-header click: flip direction on the active key, else switch to ``key`` ascending."""
    if view.sort_key is key:
        return replace(view, sort_direction=view.sort_direction.flipped())
    return replace(view, sort_key=key, sort_direction=SortDirection.ASC)


def with_search(view: ViewState, text: str) -> ViewState:
    return replace(view, search_text=text)


def chart_series(snapshot: QuoteSnapshot, selected: str | None) -> ChartSeries | None:
    """Price series across the snapshot, shown once a symbol is selected."""
    if not selected or not len(snapshot):
        return None
    return ChartSeries(
        categories=snapshot.symbols,
        data=[q.price for q in snapshot],
    )
