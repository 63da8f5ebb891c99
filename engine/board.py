"""Tic-tac-toe board state for an N x N grid."""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from engine.errors import CellOccupied, InvalidSize, OutOfBounds
from engine.rules import Position, in_bounds
from engine.symbols import CELL_VALUES, EMPTY, VALUE_SYMBOLS, Symbol


class Board:
    """Square grid of cells plus the symbol notionally due to move.

    Cells are stored in a numpy int8 array: 0 empty, +1 X, -1 O. The grid
    shape is fixed at construction.
    """

    def __init__(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size <= 0:
            raise InvalidSize(f"Board size must be a positive integer, got {size!r}")
        self.size = int(size)
        self.grid: np.ndarray = np.zeros((self.size, self.size), dtype=np.int8)
        self.turn = Symbol.X

    def get_cell(self, pos: Position) -> Optional[Symbol]:
        """Return the symbol at a position, or None if empty."""
        row, col = pos
        value = int(self.grid[row, col])
        if value == EMPTY:
            return None
        return VALUE_SYMBOLS[value]

    def place_at(self, row: int, col: int, symbol: Symbol, update_turn: bool = True) -> None:
        """Put a symbol on an empty cell.

        With `update_turn` the turn passes to the other symbol. Search
        backtracking places with `update_turn=False`.
        """
        if not in_bounds((row, col), self.size):
            raise OutOfBounds(f"Move out of bounds: ({row}, {col}) on a {self.size}x{self.size} board")
        if self.grid[row, col] != EMPTY:
            raise CellOccupied(f"Cell already taken: ({row}, {col})")
        self.grid[row, col] = CELL_VALUES[symbol]
        if update_turn:
            self.turn = symbol.opponent()

    def clear_at(self, row: int, col: int) -> None:
        """Empty a cell. Only used to undo a speculative placement."""
        self.grid[row, col] = EMPTY

    def is_full(self) -> bool:
        return not (self.grid == EMPTY).any()

    def empty_cells(self) -> List[Position]:
        """Empty positions in row-major order; search tie-breaks depend on it."""
        rows, cols = np.nonzero(self.grid == EMPTY)
        return [(int(row), int(col)) for row, col in zip(rows, cols)]

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def state_key(self) -> bytes:
        """Hashable snapshot of the cell contents."""
        return self.grid.tobytes()

    def render_ascii(self) -> str:
        """Return a simple human-readable board representation."""
        lines: List[str] = []
        separator = "-" * (self.size * 2 - 1)
        for row in range(self.size):
            cells: List[str] = []
            for col in range(self.size):
                cell = self.get_cell((row, col))
                cells.append(cell.value if cell is not None else " ")
            lines.append(" ".join(cells))
            if row < self.size - 1:
                lines.append(separator)
        return "\n".join(lines)
