"""HTTP endpoint serving move recommendations.

The game server calls ``GET /move`` with query parameters:

    gid     - UUID of the game, logged only.
    size    - side length of the grid (3, 5 or 7 in practice).
    playing - symbol the player server must play, X or O.
    moves   - previous moves, e.g. ``X-1-1_O-0-0``.

On 5x5 and 7x7 grids the game server expects four in a row to win; the
engine here still requires a complete row, column or diagonal.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from flask import Flask, Response, request

from ai.minimax_ai import MinimaxAI
from engine.notation import parse_unsigned
from service.config import ServerConfig
from service.protocol import MoveRequest, recommend_move

LOGGER = logging.getLogger(__name__)

INVALID_QUERY_TEXT = "Invalid query string"
# size is an unsigned 32-bit query field.
MAX_SIZE = 2**32 - 1


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def parse_query(args) -> Optional[MoveRequest]:
    """Build a MoveRequest from query args, or None if they do not decode."""
    try:
        gid = str(uuid.UUID(args["gid"]))
        size_text = args["size"]
        playing = args["playing"]
        moves = args["moves"]
    except (KeyError, ValueError):
        return None
    size = parse_unsigned(size_text)
    if size is None or size > MAX_SIZE:
        return None
    return MoveRequest(gid=gid, size=size, playing=playing, moves=moves)


def create_app(config: Optional[ServerConfig] = None) -> Flask:
    config = config or ServerConfig()
    app = Flask(__name__)
    app.config["SERVER_CONFIG"] = config

    @app.route("/move", methods=["GET"])
    def get_move() -> Response:
        move_request = parse_query(request.args)
        if move_request is None:
            LOGGER.warning("Rejected undecodable query: %s", request.query_string.decode("utf-8", "replace"))
            return _text(INVALID_QUERY_TEXT, status=400)

        LOGGER.info(
            "Received request: gid:%s size:%d playing:%s moves:%s",
            move_request.gid,
            move_request.size,
            move_request.playing,
            move_request.moves,
        )
        ai = MinimaxAI(
            use_transposition=config.use_transposition,
            warn_empty_cells=config.warn_empty_cells,
        )
        return _text(recommend_move(move_request, ai))

    return app
