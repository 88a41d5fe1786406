"""QuoteFetchOrchestrator — parallel, all-or-nothing quote batches."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from stockdash.models.quote import Quote
from stockdash.models.snapshot import QuoteSnapshot
from stockdash.providers.base import BaseQuoteProvider

logger = logging.getLogger(__name__)

FALLBACK_ERROR = "Failed to fetch stock quotes."


class QuoteFetchOrchestrator:
    """Fetch one quote per symbol concurrently and commit them as one snapshot.

    A batch either commits every quote or nothing. Each batch is stamped
    with an increasing generation number when issued; a batch that settles
    after a newer one was issued is dropped without touching state.

    Usage::

        orch = QuoteFetchOrchestrator(provider)
        await orch.fetch(["AAPL", "MSFT"])
        orch.snapshot["AAPL"].price
    """

    def __init__(self, provider: BaseQuoteProvider) -> None:
        self.provider = provider
        self.snapshot = QuoteSnapshot()
        self.loading = False
        self.error: str | None = None
        self.generation = 0

    async def fetch(self, symbols: Sequence[str]) -> bool:
        """Run one batch. Returns True if it committed a new snapshot."""
        self.generation += 1
        generation = self.generation
        batch = list(symbols)

        self.loading = True
        self.error = None
        logger.info("Fetching quotes for %d symbols: %s", len(batch), batch)
        try:
            quotes = await self._gather(batch)
            if generation != self.generation:
                logger.debug("Dropping stale quote batch %d", generation)
                return False
            self.snapshot = QuoteSnapshot.from_quotes(quotes)
            logger.info("Committed quote snapshot with %d symbols", len(self.snapshot))
            return True
        except Exception as exc:
            if generation != self.generation:
                logger.debug("Dropping stale failed quote batch %d: %s", generation, exc)
                return False
            self.error = str(exc) or FALLBACK_ERROR
            logger.warning("Quote batch failed: %s", self.error)
            return False
        finally:
            if generation == self.generation:
                self.loading = False

    async def _gather(self, symbols: list[str]) -> list[Quote]:
        """Issue every request, wait for all, then raise the first failure."""
        results = await asyncio.gather(
            *(asyncio.to_thread(self.provider.get_quote, sym) for sym in symbols),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return list(results)  # type: ignore[arg-type]
