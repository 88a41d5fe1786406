"""Company news item model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class NewsItem:
    """Single company-news article.

    ``extra`` carries every other field the source returned (category,
    datetime, image, source, ...) without interpretation.
    """

    headline: str
    summary: str
    url: str
    extra: Mapping[str, Any] = field(default_factory=dict)
