import logging

import numpy as np
import pytest

from ai.minimax_ai import MinimaxAI, SearchResult
from engine.board import Board
from engine.notation import board_from_history
from engine.symbols import Symbol


@pytest.fixture(params=[True, False], ids=["transposition", "plain"])
def ai(request):
    return MinimaxAI(use_transposition=request.param)


def test_empty_board_is_a_draw(ai):
    board = Board(3)
    result = ai.search(board, Symbol.X)
    assert result.score == 0
    # Every opening draws, so the first cell in row-major order is kept.
    assert result.move == (0, 0)


def test_takes_completing_win(ai):
    board = Board(3)
    board.place_at(0, 0, Symbol.X, update_turn=False)
    board.place_at(0, 1, Symbol.X, update_turn=False)
    assert ai.search(board, Symbol.X) == SearchResult(score=1, move=(0, 2))


def test_o_takes_completing_win(ai):
    board = board_from_history(3, "X-1-1_O-0-0_X-2-2_O-0-1_X-1-0")
    assert ai.search(board, Symbol.O) == SearchResult(score=-1, move=(0, 2))


def test_wins_are_not_discounted_by_distance(ai):
    # O can win at once on (1, 2), but (0, 2) forks and also wins, and it
    # comes first in row-major order.
    board = board_from_history(3, "X-0-0_O-1-0_X-0-1_O-1-1_X-2-2")
    assert ai.search(board, Symbol.O) == SearchResult(score=-1, move=(0, 2))


def test_blocks_immediate_threat(ai):
    board = board_from_history(3, "X-0-0_O-1-1_X-0-1")
    result = ai.search(board, Symbol.O)
    assert result.move == (0, 2)
    assert result.score == 0


def test_recommends_legal_cell_for_second_player(ai):
    board = board_from_history(3, "X-1-1_O-0-0")
    result = ai.search(board, Symbol.O)
    assert result.move is not None
    assert result.move in board.empty_cells()
    assert result.score in (-1, 0, 1)


def test_terminal_positions_have_no_move(ai):
    won = board_from_history(3, "X-0-0_O-1-1_X-0-1_O-1-0_X-0-2")
    assert ai.search(won, Symbol.O) == SearchResult(score=1, move=None)

    drawn = board_from_history(3, "X-0-0_O-0-1_X-0-2_O-1-1_X-1-0_O-2-0_X-1-2_O-2-2_X-2-1")
    assert ai.search(drawn, Symbol.O) == SearchResult(score=0, move=None)
    assert ai.choose_move(drawn, Symbol.O) is None


def test_player_comes_from_caller_not_board_turn(ai):
    # After "X-1-1" the board says O is due, but the caller asks for X.
    board = board_from_history(3, "X-1-1")
    assert board.turn is Symbol.O
    result = ai.search(board, Symbol.X)
    assert result.score == 1
    assert result.move is not None
    assert board.turn is Symbol.O


def test_search_restores_board(ai):
    board = board_from_history(3, "X-1-1_O-0-0")
    before = board.grid.copy()
    ai.search(board, Symbol.X)
    assert np.array_equal(board.grid, before)
    assert board.turn is Symbol.X


def test_search_is_deterministic(ai):
    board = board_from_history(3, "X-0-2_O-1-1")
    first = ai.search(board, Symbol.X)
    second = ai.search(board, Symbol.X)
    assert first == second


@pytest.mark.parametrize(
    "history,player",
    [
        ("", Symbol.X),
        ("", Symbol.O),
        ("X-1-1", Symbol.O),
        ("X-1-1_O-0-0", Symbol.X),
        ("X-0-0_O-2-2_X-0-2", Symbol.O),
        ("O-1-1_X-0-1", Symbol.O),
    ],
)
def test_transposition_matches_plain_search(history, player):
    cached = MinimaxAI(use_transposition=True).search(board_from_history(3, history), player)
    plain = MinimaxAI(use_transposition=False).search(board_from_history(3, history), player)
    assert cached == plain


def test_transposition_visits_fewer_nodes():
    cached = MinimaxAI(use_transposition=True)
    plain = MinimaxAI(use_transposition=False)
    cached.search(Board(3), Symbol.X)
    plain.search(Board(3), Symbol.X)
    assert 0 < cached.nodes_searched < plain.nodes_searched


def test_board_restored_when_recursion_fails(monkeypatch):
    ai = MinimaxAI(use_transposition=False)
    board = board_from_history(3, "X-1-1_O-0-0")
    before = board.grid.copy()
    calls = {"count": 0}
    original = ai._expand

    def failing_expand(board, player, alpha, beta):
        calls["count"] += 1
        if calls["count"] == 5:
            raise RuntimeError("boom")
        return original(board, player, alpha, beta)

    monkeypatch.setattr(ai, "_expand", failing_expand)
    with pytest.raises(RuntimeError):
        ai.search(board, Symbol.X)
    assert np.array_equal(board.grid, before)


def test_warns_on_large_search(caplog):
    ai = MinimaxAI(warn_empty_cells=2)
    board = board_from_history(3, "X-0-0_O-1-1_X-0-1_O-0-2_X-2-0_O-1-0")
    with caplog.at_level(logging.WARNING, logger="ai.minimax_ai"):
        result = ai.search(board, Symbol.X)
    assert result.move is not None
    assert any("empty cells" in record.getMessage() for record in caplog.records)


def test_four_by_four_immediate_win():
    board = board_from_history(4, "X-0-0_O-1-0_X-0-1_O-1-1_X-0-2_O-1-2")
    ai = MinimaxAI()
    result = ai.search(board, Symbol.X)
    assert result == SearchResult(score=1, move=(0, 3))
