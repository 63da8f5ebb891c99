"""CLI entrypoint for playing tic-tac-toe against the minimax AI."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from ai.minimax_ai import MinimaxAI
from engine.board import Board
from engine.errors import MoveError
from engine.notation import Move, format_moves
from engine.rules import Position, game_over
from engine.symbols import Symbol

HELP_TEXT = "Commands: <row> <col> | help | quit"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play N x N tic-tac-toe in terminal.")
    parser.add_argument("--size", type=int, default=3, help="Board side length")
    parser.add_argument(
        "--human-side",
        type=str,
        default="X",
        choices=["X", "O"],
        help="Which symbol the human plays (X moves first)",
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args()


def parse_user_move(command: str) -> Optional[Position]:
    parts = command.strip().split()
    if len(parts) != 2:
        return None
    return int(parts[0]), int(parts[1])


def run_cli() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger("ttt.cli")

    board = Board(args.size)
    ai = MinimaxAI()
    human_side = Symbol(args.human_side)
    history: List[Move] = []

    logger.info("Starting %dx%d game. Human=%s AI=%s", board.size, board.size, human_side.value, human_side.opponent().value)
    print(HELP_TEXT)

    while True:
        terminal, winner, is_draw = game_over(board)
        print()
        print(board.render_ascii())
        print(f"Turn: {board.turn.value} | Moves: {format_moves(history) or '-'}")

        if terminal:
            if is_draw:
                print("Game ended in draw.")
            else:
                print(f"Winner: {winner.value if winner else 'none'}")
            break

        if board.turn is human_side:
            user_input = input("Your move> ").strip()
            if user_input.lower() in {"quit", "exit"}:
                print("Exiting game.")
                break
            if user_input.lower() == "help":
                print(HELP_TEXT)
                continue

            try:
                position = parse_user_move(user_input)
                if position is None:
                    print("Invalid command format.")
                    continue
                row, col = position
                board.place_at(row, col, human_side)
            except MoveError as exc:
                print(f"Illegal move: {exc}")
                continue
            except ValueError:
                print("Invalid numeric input.")
                continue
            history.append(Move(symbol=human_side, row=row, col=col))
        else:
            ai_side = board.turn
            position = ai.choose_move(board, ai_side)
            if position is None:
                break
            row, col = position
            board.place_at(row, col, ai_side)
            history.append(Move(symbol=ai_side, row=row, col=col))
            print(f"AI move: {row} {col}")


if __name__ == "__main__":
    run_cli()
