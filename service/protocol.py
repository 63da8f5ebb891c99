"""Move request handling and the plain-text response format.

Every outcome is returned as ordinary text: a recommended move, a rejection
of bad input, or a notice that no move exists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ai.base_ai import BaseAI
from ai.minimax_ai import MinimaxAI
from engine.errors import InvalidPlayer, InvalidSymbol, MoveError
from engine.notation import Move, board_from_history
from engine.symbols import Symbol, parse_symbol

LOGGER = logging.getLogger(__name__)

MOVE_PREFIX = "Move:"
REJECTED_TEXT = "Error:Sorry. Can't do it bro."
NO_MOVE_TEXT = "Sorry. Can't do it bro."


@dataclass(frozen=True)
class MoveRequest:
    """A single move query. `gid` is only used for logging."""

    gid: str
    size: int
    playing: str
    moves: str


def parse_player(text: str) -> Symbol:
    try:
        return parse_symbol(text)
    except InvalidSymbol as exc:
        raise InvalidPlayer(str(exc)) from exc


def decide(request: MoveRequest, ai: BaseAI) -> Optional[Move]:
    """Return the recommended move, or None for a finished game.

    Raises MoveError for an invalid size, history or player. The history is
    decoded before the player is checked.
    """
    board = board_from_history(request.size, request.moves)
    player = parse_player(request.playing)
    position = ai.choose_move(board, player)
    if position is None:
        return None
    row, col = position
    return Move(symbol=player, row=row, col=col)


def format_move(move: Move) -> str:
    return f"{MOVE_PREFIX}{move}"


def recommend_move(request: MoveRequest, ai: Optional[BaseAI] = None) -> str:
    """Answer a request with the protocol text; never raises MoveError."""
    if ai is None:
        ai = MinimaxAI()
    try:
        move = decide(request, ai)
    except MoveError as exc:
        LOGGER.error("Rejected request gid=%s: %s", request.gid, exc)
        return REJECTED_TEXT

    if move is None:
        LOGGER.error("No best move found for gid=%s", request.gid)
        return NO_MOVE_TEXT
    LOGGER.info("Best move for gid=%s: row=%d col=%d", request.gid, move.row, move.col)
    return format_move(move)
