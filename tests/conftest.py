"""Pytest fixtures for testing."""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import pytest

from mctser.game import GameState, Player


@dataclass(frozen=True)
class NimPlayer(Player):
    """Player in single-pile Nim: whoever takes the last stone wins."""
    index: int

    def reward_when_outcome_is(self, outcome: int) -> float:
        return 1.0 if outcome == self.index else 0.0


@dataclass(frozen=True)
class Nim(GameState):
    """Take 1-3 stones per turn. Outcome is the index of the winner."""
    stones: int
    to_move: int = 0

    def player(self) -> NimPlayer:
        return NimPlayer(self.to_move)

    def end_status(self) -> Optional[int]:
        if self.stones == 0:
            # The previous mover took the last stone.
            return 1 - self.to_move
        return None

    def possible_actions(self) -> List[int]:
        return [take for take in (1, 2, 3) if take <= self.stones]

    def act(self, action: int) -> "Nim":
        return Nim(stones=self.stones - action, to_move=1 - self.to_move)


@dataclass(frozen=True)
class BrokenCountdown(GameState):
    """Counts down to 0, but reports no actions at ``broken_at`` without ending."""
    remaining: int
    broken_at: int = 1

    def player(self) -> NimPlayer:
        return NimPlayer(0)

    def end_status(self) -> Optional[int]:
        return 0 if self.remaining == 0 else None

    def possible_actions(self) -> List[str]:
        if self.remaining == self.broken_at:
            return []
        return ["step"]

    def act(self, action: str) -> "BrokenCountdown":
        return BrokenCountdown(remaining=self.remaining - 1, broken_at=self.broken_at)


@pytest.fixture
def seed():
    """Seed for reproducibility."""
    return 42


@pytest.fixture
def rng(seed):
    return np.random.default_rng(seed)


@pytest.fixture
def nim():
    """Nim with 5 stones: taking 1 is the only winning move."""
    return Nim(stones=5)


@pytest.fixture
def broken_game():
    return BrokenCountdown(remaining=3)


@pytest.fixture
def empty_board():
    from mctser.games import TicTacToe
    return TicTacToe()


@pytest.fixture
def make_nim():
    """Factory for Nim positions: make_nim(stones, to_move=0)."""
    return Nim


@pytest.fixture
def make_broken_game():
    return BrokenCountdown
