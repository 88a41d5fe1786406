"""Payload validation at the API boundary.

Raw JSON from the quote and news endpoints is checked here and turned into
``Quote`` / ``NewsItem`` objects. Anything that does not fit raises a
``DashboardError`` so the rest of the package only sees well-formed data.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

from stockdash.errors import DashboardError, DashboardErrorCode
from stockdash.models.news import NewsItem
from stockdash.models.quote import Quote

logger = logging.getLogger(__name__)

# Finnhub quote keys -> Quote fields
QUOTE_FIELDS: dict[str, str] = {
    "c": "price",
    "d": "change",
    "dp": "change_pct",
    "h": "high",
    "l": "low",
    "o": "open",
    "pc": "prev_close",
}
REQUIRED_QUOTE_KEYS = ("c", "d", "dp")
NEWS_FIELDS = ("headline", "summary", "url")


@dataclass
class ValidationCheck:
    """Single validation check result."""

    name: str
    passed: bool
    message: str = ""


@dataclass
class ValidationResult:
    """Aggregate validation result."""

    checks: list[ValidationCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def failed_checks(self) -> list[ValidationCheck]:
        return [c for c in self.checks if not c.passed]


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        float(value)
    except OverflowError:
        return False
    return True


def validate_quote_payload(payload: Any) -> ValidationResult:
    """Run all checks on a raw quote payload.

    Checks:
        1. Is a JSON object
        2. Has data (``c`` present and non-zero)
        3. Required fields (``c``, ``d``, ``dp``) are finite numbers
        4. Optional fields are numbers or null

    Integers too large for a float count as invalid in checks 3 and 4.
    """
    result = ValidationResult()

    # 1. Shape
    if not isinstance(payload, dict):
        result.checks.append(ValidationCheck(
            "is_object", False, f"expected object, got {type(payload).__name__}",
        ))
        return result
    result.checks.append(ValidationCheck("is_object", True))

    # 2. No-data sentinel
    price = payload.get("c")
    if price is None or price == 0:
        result.checks.append(ValidationCheck("has_data", False, "No data"))
        return result
    result.checks.append(ValidationCheck("has_data", True))

    # 3. Required numerics
    bad_required = [
        key for key in REQUIRED_QUOTE_KEYS
        if not _is_number(payload.get(key)) or not math.isfinite(payload[key])
    ]
    if bad_required:
        result.checks.append(ValidationCheck(
            "required_fields", False, f"invalid {', '.join(bad_required)}",
        ))
    else:
        result.checks.append(ValidationCheck("required_fields", True))

    # 4. Optional numerics
    bad_optional = [
        key for key in QUOTE_FIELDS
        if key not in REQUIRED_QUOTE_KEYS
        and payload.get(key) is not None
        and not _is_number(payload[key])
    ]
    if bad_optional:
        result.checks.append(ValidationCheck(
            "optional_fields", False, f"invalid {', '.join(bad_optional)}",
        ))
    else:
        result.checks.append(ValidationCheck("optional_fields", True))

    return result


def parse_quote(symbol: str, payload: Any) -> Quote:
    """Convert a quote payload into a ``Quote``.

    Raises:
        DashboardError: ``NO_DATA`` for the zero/missing price sentinel,
            ``PARSE_ERROR`` for any other shape problem.
    """
    result = validate_quote_payload(payload)
    if not result.passed:
        failed = result.failed_checks[0]
        if failed.name == "has_data":
            raise DashboardError(f"{symbol}: No data", code=DashboardErrorCode.NO_DATA)
        raise DashboardError(
            f"{symbol}: Malformed quote ({failed.message})",
            code=DashboardErrorCode.PARSE_ERROR,
        )

    values: dict[str, float | None] = {}
    for key, name in QUOTE_FIELDS.items():
        raw = payload.get(key)
        if raw is None or not math.isfinite(raw):
            values[name] = None
        else:
            values[name] = float(raw)
    return Quote(symbol=symbol, **values)  # type: ignore[arg-type]


def parse_news(symbol: str, payload: Any) -> list[NewsItem]:
    """Convert a company-news payload into ``NewsItem`` objects.

    Entries missing a string ``headline``, ``summary`` or ``url`` are
    skipped. A payload that is not a list raises ``PARSE_ERROR``.
    """
    if not isinstance(payload, list):
        raise DashboardError(
            f"Company News: {symbol}: expected list, got {type(payload).__name__}",
            code=DashboardErrorCode.PARSE_ERROR,
        )

    items: list[NewsItem] = []
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        if not all(isinstance(entry.get(k), str) for k in NEWS_FIELDS):
            logger.debug("Skipping malformed news entry for %s: %r", symbol, entry)
            continue
        items.append(NewsItem(
            headline=entry["headline"],
            summary=entry["summary"],
            url=entry["url"],
            extra={k: v for k, v in entry.items() if k not in NEWS_FIELDS},
        ))
    return items
