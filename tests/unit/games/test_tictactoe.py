"""Test the reference tic-tac-toe game."""

import pytest

from mctser.games import CROSS, NOUGHT, TicTacToe, Tie, Win


def test_initial_position(empty_board):
    assert empty_board.player() == NOUGHT
    assert empty_board.end_status() is None
    assert len(empty_board.possible_actions()) == 9


def test_act_is_pure(empty_board):
    after = empty_board.act((0, 0))

    assert empty_board.board[0][0] is None
    assert after.board[0][0] == NOUGHT
    assert after.player() == CROSS
    assert (0, 0) not in after.possible_actions()
    assert len(after.possible_actions()) == 8


def test_act_on_taken_cell(empty_board):
    with pytest.raises(ValueError):
        empty_board.act((1, 1)).act((1, 1))


@pytest.mark.parametrize("rows,winner", [
    (["OOO", "XX-", "---"], NOUGHT),
    (["XO-", "XO-", "X-O"], CROSS),
    (["O-X", "-OX", "--O"], NOUGHT),
    (["OOX", "-X-", "XO-"], CROSS),
])
def test_win_detection(rows, winner):
    state = TicTacToe.from_rows(rows)
    assert state.end_status() == Win(winner)
    assert state.possible_actions() == []


def test_tie():
    state = TicTacToe.from_rows(["OXO", "OXX", "XOO"])
    assert state.end_status() == Tie()
    assert state.possible_actions() == []


def test_from_rows_infers_player():
    assert TicTacToe.from_rows(["O--", "---", "---"]).player() == CROSS
    assert TicTacToe.from_rows(["OX-", "---", "---"]).player() == NOUGHT
    assert TicTacToe.from_rows(["OX-", "---", "---"], to_move=CROSS).player() == CROSS


@pytest.mark.parametrize("rows", [["OOO", "---"], ["OO", "---", "---"], ["OOQ", "---", "---"]])
def test_from_rows_rejects_bad_board(rows):
    with pytest.raises(ValueError):
        TicTacToe.from_rows(rows)


def test_rewards():
    assert NOUGHT.reward_when_outcome_is(Win(NOUGHT)) == 1.0
    assert NOUGHT.reward_when_outcome_is(Win(CROSS)) == 0.0
    assert CROSS.reward_when_outcome_is(Tie()) == 0.5


def test_render():
    state = TicTacToe.from_rows(["O--", "-X-", "--O"])
    assert state.render().splitlines() == ["┌───┐", "│O--│", "│-X-│", "│--O│", "└───┘"]
