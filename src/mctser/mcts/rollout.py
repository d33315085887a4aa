"""Random rollout from a state to the end of the game."""

from typing import Tuple

import numpy as np

from ..errors import EmptyActionSetError
from ..game import EndStatus, GameState


def rollout(state: GameState, rng: np.random.Generator) -> Tuple[EndStatus, int]:
    """Play uniformly random actions until the game ends.

    No tree bookkeeping happens here.

    Args:
        state: State to start from (possibly already terminal)
        rng: Random generator

    Returns:
        (outcome, number of moves played)

    Raises:
        EmptyActionSetError: A non-terminal state had no legal action
    """
    moves = 0
    outcome = state.end_status()

    while outcome is None:
        actions = list(state.possible_actions())
        if len(actions) == 0:
            raise EmptyActionSetError(
                f"Non-terminal state has no possible actions after {moves} rollout moves"
            )
        state = state.act(actions[int(rng.integers(len(actions)))])
        moves += 1
        outcome = state.end_status()

    return outcome, moves
