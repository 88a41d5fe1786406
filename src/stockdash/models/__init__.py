"""Dashboard data models."""

from stockdash.models.news import NewsItem
from stockdash.models.quote import Quote
from stockdash.models.snapshot import QuoteSnapshot

__all__ = [
    "NewsItem",
    "Quote",
    "QuoteSnapshot",
]
