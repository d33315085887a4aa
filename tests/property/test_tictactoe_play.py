"""Zero-sum sanity checks: the search must find wins and block losses."""

import pytest

from mctser import SearchConfig, SearchTree
from mctser.games import TicTacToe


@pytest.mark.parametrize("seed", range(10))
def test_takes_immediate_win(seed):
    state = TicTacToe.from_rows(["OO-", "XX-", "---"])
    tree = SearchTree(state, SearchConfig(seed=seed))

    assert tree.search(1000) == (0, 2)


@pytest.mark.parametrize("seed", range(5))
def test_takes_immediate_win_as_second_player(seed):
    state = TicTacToe.from_rows(["XX-", "OO-", "O--"])
    assert state.player().symbol == "X"

    tree = SearchTree(state, SearchConfig(seed=seed))
    assert tree.search(1000) == (0, 2)


@pytest.mark.parametrize("seed", range(5))
def test_blocks_immediate_threat(seed):
    state = TicTacToe.from_rows(["XX-", "O--", "--O"])
    tree = SearchTree(state, SearchConfig(seed=seed))

    assert tree.search(2000) == (0, 2)


def test_self_play_with_renew(empty_board):
    tree = SearchTree(empty_board, SearchConfig(seed=0))
    state = empty_board

    while state.end_status() is None:
        action = tree.search(300)
        assert action in state.possible_actions()
        tree.renew(action)
        state = state.act(action)
        assert tree.get_game_state() == state

    assert tree.get_game_state().end_status() is not None
