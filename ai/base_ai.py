"""Base AI interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from engine.board import Board
from engine.rules import Position
from engine.symbols import Symbol


class BaseAI(ABC):
    """Abstract move recommendation contract."""

    @abstractmethod
    def choose_move(self, board: Board, player: Symbol) -> Optional[Position]:
        """Choose an empty cell for `player`, or None if the game is over."""
        raise NotImplementedError
