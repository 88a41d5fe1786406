"""Ticker list parsing."""

from __future__ import annotations

DEFAULT_SYMBOLS: tuple[str, ...] = ("AAPL", "MSFT", "GOOGL", "AMZN", "TSLA", "NVDA")
DEFAULT_SYMBOLS_TEXT = ",".join(DEFAULT_SYMBOLS)


def parse_symbols(text: str | None) -> list[str]:
    """Split comma-separated ticker input into clean symbols.

    Tokens are trimmed and uppercased, empty tokens are dropped and
    repeated symbols keep only their first position::

        >>> parse_symbols(" aapl, ,msft ")
        ['AAPL', 'MSFT']
    """
    symbols: list[str] = []
    for token in (text or "").split(","):
        sym = token.strip().upper()
        if sym and sym not in symbols:
            symbols.append(sym)
    return symbols
