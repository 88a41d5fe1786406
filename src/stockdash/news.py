"""NewsFetchService — company news for the selected symbol."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, timedelta

from stockdash.models.news import NewsItem
from stockdash.providers.base import BaseQuoteProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewsDateRange:
    """Date window for company-news requests.

    Fixed ``start`` / ``end`` win when set. Otherwise the window is the
    ``lookback_days`` days ending on ``end`` (or today).
    """

    start: date | None = None
    end: date | None = None
    lookback_days: int = 20

    def resolve(self, today: date | None = None) -> tuple[date, date]:
        end = self.end or today or date.today()
        start = self.start or end - timedelta(days=self.lookback_days)
        return start, end


class NewsFetchService:
    """Fetch news for one symbol and replace the session's news list.

    Failures are logged and swallowed: the list is cleared so the UI falls
    back to its empty state, and no error is raised to the caller.
    """

    def __init__(
        self,
        provider: BaseQuoteProvider,
        date_range: NewsDateRange | None = None,
    ) -> None:
        self.provider = provider
        self.date_range = date_range or NewsDateRange()
        self.items: list[NewsItem] = []
        self.symbol: str | None = None
        self.generation = 0

    async def fetch(self, symbol: str) -> list[NewsItem]:
        self.generation += 1
        generation = self.generation
        start, end = self.date_range.resolve()
        logger.info("Fetching company news for %s (%s to %s)", symbol, start, end)
        try:
            items = await asyncio.to_thread(
                self.provider.get_company_news, symbol, start, end,
            )
        except Exception as exc:
            logger.warning("Company news fetch failed for %s: %s", symbol, exc)
            items = []

        if generation != self.generation:
            logger.debug("Dropping stale news response for %s", symbol)
            return self.items
        self.symbol = symbol
        self.items = list(items)
        return self.items
