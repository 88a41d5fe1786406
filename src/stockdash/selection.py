"""Selection state machine — which symbol drives the chart and news panel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union


@dataclass(frozen=True)
class NoSelection:
    """Nothing selected yet."""


@dataclass(frozen=True)
class Selected:
    symbol: str


SelectionState = Union[NoSelection, Selected]


class SelectionStateMachine:
    """Tracks the active symbol.

    Transitions:
        on_symbols_changed: a non-empty list selects its first symbol,
            replacing any manual choice. An empty list changes nothing.
        select: a row click selects that symbol.

    There is no transition back to ``NoSelection``.
    """

    def __init__(self) -> None:
        self.state: SelectionState = NoSelection()

    @property
    def symbol(self) -> str | None:
        if isinstance(self.state, Selected):
            return self.state.symbol
        return None

    def on_symbols_changed(self, symbols: Sequence[str]) -> SelectionState:
        if symbols:
            self.state = Selected(symbols[0])
        return self.state

    def select(self, symbol: str) -> SelectionState:
        self.state = Selected(symbol)
        return self.state
