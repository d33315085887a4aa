"""Game abstraction the search engine is written against.

The engine never looks inside a game. It only needs four capabilities:

- GameState: whose turn it is, whether the game is over, the legal
  actions, and the successor reached by an action.
- Player: the payoff it receives for a terminal outcome.
- Action: any value comparable with ``==``. Actions do not need to be
  hashable; the engine keeps them in ordered lists.
- EndStatus: an opaque terminal result, only ever handed back to
  ``Player.reward_when_outcome_is``.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

# Opaque to the engine; aliases kept for readability of signatures.
Action = Any
EndStatus = Any


class Player(ABC):
    """Identifies whose turn it is and whose payoff is being measured."""

    @abstractmethod
    def reward_when_outcome_is(self, outcome: EndStatus) -> float:
        """Payoff for this player when the game ends with ``outcome``.

        Conventionally in [0, 1]. Different players may map the same
        outcome to different rewards.
        """
        pass


class GameState(ABC):
    """One immutable point in a game.

    Implementations must never mutate themselves: ``act`` returns a new
    state and leaves the receiver untouched.
    """

    @abstractmethod
    def player(self) -> Player:
        """Player to move at this state."""
        pass

    @abstractmethod
    def end_status(self) -> Optional[EndStatus]:
        """None while the game is running, else the terminal outcome."""
        pass

    @abstractmethod
    def possible_actions(self) -> Iterable[Action]:
        """Legal actions from this state.

        Finite and free of duplicates. Any iterable will do (a set is
        fine); order is irrelevant. Must be non-empty for every
        non-terminal state.
        """
        pass

    @abstractmethod
    def act(self, action: Action) -> "GameState":
        """Successor state after ``action``.

        Behaviour is undefined for actions outside ``possible_actions()``.
        """
        pass
