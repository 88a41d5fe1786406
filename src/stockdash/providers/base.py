"""Abstract base class for dashboard data providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from stockdash.models.news import NewsItem
from stockdash.models.quote import Quote


class BaseQuoteProvider(ABC):
    """Abstract base for all data providers.

    Providers are blocking; the dashboard runs them in worker threads.
    Subclasses must implement ``get_quote``. Every failure must surface as
    a ``DashboardError`` whose message is fit for display.
    """

    # --- Quotes (required) ---

    @abstractmethod
    def get_quote(self, symbol: str) -> Quote:
        """Fetch the current quote for one symbol.

        Raises:
            DashboardError: HTTP failure, malformed payload or the
                "no data" sentinel.
        """
        ...

    # --- News ---

    def get_company_news(self, symbol: str, start: date, end: date) -> list[NewsItem]:
        """Fetch company news published between ``start`` and ``end`` (inclusive)."""
        raise NotImplementedError

    # --- Capabilities ---

    def capabilities(self) -> set[str]:
        """Return the set of supported features: ``quotes``, ``news``."""
        return {"quotes"}
