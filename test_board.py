"""
Tests for board evaluation: winner, draw, would_win, available moves.
"""

import pytest

from engine import (
    LINES,
    GameOutcome,
    Marker,
    available_moves,
    evaluate,
    is_full,
    new_board,
    winner,
    winning_line,
    would_win,
)

X = Marker.PLAYER
O = Marker.OPPONENT
_ = None

DRAWN_BOARD = [
    X, O, X,
    X, O, O,
    O, X, X,
]


def board_with(marker, indices):
    board = new_board()
    for index in indices:
        board[index] = marker
    return board


@pytest.mark.parametrize("line", LINES)
@pytest.mark.parametrize("marker", [X, O])
def test_winner_detects_every_line(line, marker):
    board = board_with(marker, line)
    assert winner(board) == marker
    assert winning_line(board) == line


def test_lines_are_in_canonical_order():
    assert LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


def test_no_winner_on_empty_or_partial_board():
    assert winner(new_board()) is None

    board = [
        X, O, _,
        _, X, _,
        _, _, O,
    ]
    assert winner(board) is None
    assert winning_line(board) is None


def test_mixed_line_is_not_a_win():
    board = [
        X, X, O,
        _, _, _,
        _, _, _,
    ]
    assert winner(board) is None


def test_drawn_board():
    assert winner(DRAWN_BOARD) is None
    assert is_full(DRAWN_BOARD)
    assert evaluate(DRAWN_BOARD) == GameOutcome.DRAW


def test_is_full():
    assert not is_full(new_board())
    board = list(DRAWN_BOARD)
    board[4] = None
    assert not is_full(board)


def test_evaluate_outcomes():
    assert evaluate(new_board()) == GameOutcome.ONGOING
    assert evaluate(board_with(X, (0, 4, 8))) == GameOutcome.PLAYER_WINS
    assert evaluate(board_with(O, (2, 5, 8))) == GameOutcome.OPPONENT_WINS


def test_full_board_with_winner_is_not_a_draw():
    board = [
        X, X, X,
        O, O, X,
        X, O, O,
    ]
    assert is_full(board)
    assert evaluate(board) == GameOutcome.PLAYER_WINS


def test_available_moves_ascending():
    board = [
        X, _, O,
        _, X, _,
        O, _, _,
    ]
    assert available_moves(board) == [1, 3, 5, 7, 8]
    assert available_moves(new_board()) == list(range(9))
    assert available_moves(DRAWN_BOARD) == []


def test_would_win_completes_top_row():
    board = [
        X, X, _,
        O, _, _,
        _, _, _,
    ]
    assert would_win(board, X, 2)
    assert not would_win(board, O, 2)
    assert not would_win(board, X, 4)


def test_would_win_does_not_mutate_board():
    board = [
        X, X, _,
        O, _, _,
        _, _, _,
    ]
    snapshot = list(board)

    for move in available_moves(board):
        would_win(board, X, move)
        would_win(board, O, move)

    assert board == snapshot


def test_would_win_accepts_tuple_board():
    board = (O, _, _, _, O, _, _, _, _)
    assert would_win(board, O, 8)


def test_would_win_on_occupied_cell_is_false():
    # X already holds the whole top row; asking about one of its cells
    # must not report a win.
    board = [
        X, X, X,
        O, O, _,
        _, _, _,
    ]
    assert not would_win(board, X, 0)
    assert not would_win(board, O, 3)


def test_marker_opposite():
    assert X.opposite() == O
    assert O.opposite() == X
    assert X.value == "X"
    assert O.value == "O"
