"""Move history notation, e.g. ``X-1-1_O-0-0``.

Moves are separated by ``_`` and each move is ``<symbol>-<row>-<col>``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from engine.board import Board
from engine.errors import InvalidCoordinate, MalformedMove
from engine.rules import Position
from engine.symbols import Symbol, parse_symbol

MOVE_SEPARATOR = "_"
FIELD_SEPARATOR = "-"


@dataclass(frozen=True)
class Move:
    """A symbol placed at (row, col)."""

    symbol: Symbol
    row: int
    col: int

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    def __str__(self) -> str:
        return FIELD_SEPARATOR.join((self.symbol.value, str(self.row), str(self.col)))


def parse_unsigned(text: str) -> Optional[int]:
    """Parse ASCII digits with at most one leading ``+``; None otherwise.

    int() would also accept ``-``, whitespace and ``1_0``.
    """
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(digits)


def _parse_coordinate(text: str, name: str) -> int:
    value = parse_unsigned(text)
    if value is None:
        raise InvalidCoordinate(f"Invalid {name}: {text!r}")
    return value


def parse_move(token: str) -> Move:
    """Parse a single ``X-1-1`` token."""
    parts = token.split(FIELD_SEPARATOR)
    if len(parts) != 3:
        raise MalformedMove(f"Invalid move format: {token!r}")
    symbol = parse_symbol(parts[0])
    row = _parse_coordinate(parts[1], "row")
    col = _parse_coordinate(parts[2], "column")
    return Move(symbol=symbol, row=row, col=col)


def iter_moves(text: str) -> Iterator[Move]:
    """Lazily parse a move history. The empty string is an empty history."""
    if text == "":
        return
    for token in text.split(MOVE_SEPARATOR):
        yield parse_move(token)


def parse_moves(text: str) -> List[Move]:
    return list(iter_moves(text))


def format_moves(moves: Iterable[Move]) -> str:
    return MOVE_SEPARATOR.join(str(move) for move in moves)


def apply_moves(board: Board, moves: Iterable[Move]) -> Board:
    """Place moves in order. Turn alternation is not checked."""
    for move in moves:
        board.place_at(move.row, move.col, move.symbol)
    return board


def board_from_history(size: int, text: str) -> Board:
    """Build a fresh board from a move history string.

    Tokens are parsed and placed one at a time, left to right. Raises a
    MoveError subclass on the first bad token or placement; the partially
    filled board is dropped with the exception.
    """
    board = Board(size)
    return apply_moves(board, iter_moves(text))
