"""Player symbols and game outcomes."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from engine.errors import InvalidSymbol


class Symbol(str, Enum):
    """Player marker. X always moves first."""

    X = "X"
    O = "O"

    def opponent(self) -> "Symbol":
        return Symbol.O if self is Symbol.X else Symbol.X


class Outcome(Enum):
    """Result of inspecting a board for completed lines."""

    FIRST_WINS = "first_wins"
    SECOND_WINS = "second_wins"
    UNDECIDED = "undecided"

    @property
    def score(self) -> int:
        return OUTCOME_SCORES[self]

    @classmethod
    def from_winner(cls, winner: Optional[Symbol]) -> "Outcome":
        if winner is Symbol.X:
            return cls.FIRST_WINS
        if winner is Symbol.O:
            return cls.SECOND_WINS
        return cls.UNDECIDED


OUTCOME_SCORES: Dict[Outcome, int] = {
    Outcome.FIRST_WINS: 1,
    Outcome.SECOND_WINS: -1,
    Outcome.UNDECIDED: 0,
}

# Values stored in the numpy grid.
EMPTY = 0
CELL_VALUES: Dict[Symbol, int] = {
    Symbol.X: 1,
    Symbol.O: -1,
}
VALUE_SYMBOLS: Dict[int, Symbol] = {value: symbol for symbol, value in CELL_VALUES.items()}


def parse_symbol(text: str) -> Symbol:
    """Return the Symbol for an exact `X`/`O` literal."""
    if text == Symbol.X.value:
        return Symbol.X
    if text == Symbol.O.value:
        return Symbol.O
    raise InvalidSymbol(f"Invalid player: {text!r}")
