"""Exhaustive minimax AI with alpha-beta pruning for N x N tic-tac-toe."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ai.base_ai import BaseAI
from engine.board import Board
from engine.rules import Position, score
from engine.symbols import Symbol

LOGGER = logging.getLogger(__name__)

Bound = float
_TranspositionKey = Tuple[bytes, Symbol, Bound, Bound]


@dataclass(frozen=True)
class SearchResult:
    """Exact evaluation (+1 X wins, -1 O wins, 0 draw) and the move that gets it.

    `move` is None only when the searched position was already terminal.
    """

    score: int
    move: Optional[Position]


class MinimaxAI(BaseAI):
    """Searches the full game tree; X maximizes and O minimizes.

    Wins are not discounted by distance, so ties between equally valued moves
    go to the first one found in row-major order.
    """

    def __init__(self, use_transposition: bool = True, warn_empty_cells: int = 10) -> None:
        self.use_transposition = use_transposition
        self.warn_empty_cells = warn_empty_cells
        self.nodes_searched = 0
        self._ttable: Dict[_TranspositionKey, SearchResult] = {}

    def choose_move(self, board: Board, player: Symbol) -> Optional[Position]:
        return self.search(board, player).move

    def search(self, board: Board, player: Symbol) -> SearchResult:
        """Return the minimax value of `board` with `player` to move.

        The board is modified during the search and restored before return.
        """
        self.nodes_searched = 0
        self._ttable.clear()
        empty = len(board.empty_cells())
        if empty > self.warn_empty_cells:
            LOGGER.warning(
                "Exhaustive search over %d empty cells on a %dx%d board may take very long",
                empty,
                board.size,
                board.size,
            )
        result = self._alphabeta(board, player, -math.inf, math.inf)
        LOGGER.debug(
            "Minimax for %s: score=%d move=%s nodes=%d",
            player.value,
            result.score,
            result.move,
            self.nodes_searched,
        )
        return result

    def _alphabeta(self, board: Board, player: Symbol, alpha: Bound, beta: Bound) -> SearchResult:
        # The result depends only on these four inputs, so caching is exact.
        if self.use_transposition:
            key = (board.state_key(), player, alpha, beta)
            cached = self._ttable.get(key)
            if cached is not None:
                return cached

        result = self._expand(board, player, alpha, beta)
        if self.use_transposition:
            self._ttable[key] = result
        return result

    def _expand(self, board: Board, player: Symbol, alpha: Bound, beta: Bound) -> SearchResult:
        self.nodes_searched += 1
        current = score(board)
        if current != 0 or board.is_full():
            return SearchResult(score=current, move=None)

        maximizing = player is Symbol.X
        best = -math.inf if maximizing else math.inf
        best_move: Optional[Position] = None
        opponent = player.opponent()

        for row, col in board.empty_cells():
            board.place_at(row, col, player, update_turn=False)
            try:
                value = self._alphabeta(board, opponent, alpha, beta).score
            finally:
                board.clear_at(row, col)

            if maximizing:
                if value > best:
                    best = value
                    best_move = (row, col)
                alpha = max(alpha, value)
            else:
                if value < best:
                    best = value
                    best_move = (row, col)
                beta = min(beta, value)
            if beta <= alpha:
                break

        return SearchResult(score=int(best), move=best_move)
