"""Line-completion rules for N x N tic-tac-toe."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

import numpy as np

from engine.symbols import CELL_VALUES, Outcome, Symbol

if TYPE_CHECKING:
    from engine.board import Board

Position = Tuple[int, int]

# Within each line X is tested before O.
_SCAN_SYMBOLS = (Symbol.X, Symbol.O)


def in_bounds(pos: Position, size: int) -> bool:
    """Return whether a position is inside a size x size board."""
    row, col = pos
    return 0 <= row < size and 0 <= col < size


def iter_lines(size: int) -> Iterable[List[Position]]:
    """Yield every full line in scan order.

    Row i is followed by column i for each i, then the main diagonal and the
    anti-diagonal.
    """
    for i in range(size):
        yield [(i, col) for col in range(size)]
        yield [(row, i) for row in range(size)]
    yield [(i, i) for i in range(size)]
    yield [(i, size - 1 - i) for i in range(size)]


@lru_cache(maxsize=None)
def _lines(size: int) -> Tuple[List[Position], ...]:
    return tuple(iter_lines(size))


def line_sums(grid: np.ndarray) -> List[int]:
    """Sum of cell values along every line, in scan order.

    With X = +1 and O = -1 a line is complete for X exactly when its sum is
    `size`, and for O when it is `-size`.
    """
    size = grid.shape[0]
    row_sums = grid.sum(axis=1, dtype=np.int32)
    col_sums = grid.sum(axis=0, dtype=np.int32)
    sums: List[int] = []
    for i in range(size):
        sums.append(int(row_sums[i]))
        sums.append(int(col_sums[i]))
    sums.append(int(np.trace(grid, dtype=np.int32)))
    sums.append(int(np.trace(np.fliplr(grid), dtype=np.int32)))
    return sums


def _first_winning_line(board: "Board") -> Optional[Tuple[Symbol, List[Position]]]:
    size = board.size
    for line, total in zip(_lines(size), line_sums(board.grid)):
        for symbol in _SCAN_SYMBOLS:
            if total == CELL_VALUES[symbol] * size:
                return symbol, line
    return None


def check_winner(board: "Board") -> Optional[Symbol]:
    """Return the symbol owning a complete row, column or diagonal.

    A line only counts when all `size` cells hold the same symbol, on every
    board size.
    """
    found = _first_winning_line(board)
    return found[0] if found else None


def winning_line(board: "Board") -> Optional[List[Position]]:
    """Return the cells of the first complete line, if any."""
    found = _first_winning_line(board)
    return list(found[1]) if found else None


def evaluate(board: "Board") -> Outcome:
    return Outcome.from_winner(check_winner(board))


def score(board: "Board") -> int:
    """Numeric evaluation: +1 X wins, -1 O wins, 0 otherwise."""
    return evaluate(board).score


def is_terminal(board: "Board") -> bool:
    return check_winner(board) is not None or board.is_full()


def game_over(board: "Board") -> Tuple[bool, Optional[Symbol], bool]:
    """Return (is_terminal, winner, is_draw)."""
    winner = check_winner(board)
    if winner is not None:
        return True, winner, False
    if board.is_full():
        return True, None, True
    return False, None, False
