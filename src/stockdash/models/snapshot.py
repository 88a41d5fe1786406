"""Quote snapshot model — every quote from one fetch cycle."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Iterator, Mapping

from stockdash.models.quote import Quote


@dataclass(frozen=True)
class QuoteSnapshot:
    """Symbol -> Quote mapping committed by a single batch fetch.

    Key order follows the symbol list the batch was issued for. A snapshot
    is never mutated; each successful batch builds a new one.

    Attributes:
        quotes: Quotes keyed by symbol.
        fetched_at: When the batch completed.
    """

    quotes: Mapping[str, Quote] = field(default_factory=dict)
    fetched_at: datetime | None = None

    @classmethod
    def from_quotes(
        cls,
        quotes: Iterable[Quote],
        fetched_at: datetime | None = None,
    ) -> QuoteSnapshot:
        return cls(
            quotes={q.symbol: q for q in quotes},
            fetched_at=fetched_at or datetime.now(timezone.utc),
        )

    def __getitem__(self, symbol: str) -> Quote:
        return self.quotes[symbol]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.quotes

    def __iter__(self) -> Iterator[Quote]:
        return iter(self.quotes.values())

    def __len__(self) -> int:
        return len(self.quotes)

    def get(self, symbol: str) -> Quote | None:
        return self.quotes.get(symbol)

    @property
    def symbols(self) -> list[str]:
        return list(self.quotes)
