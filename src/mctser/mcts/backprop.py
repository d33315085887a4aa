"""Backpropagation for game MCTS.

Each simulation updates, for every node on its path:
- Visit count
- Total reward, seen by the node's ``perspective`` player

A non-root node records reward for the player who chose the move into
it, so a parent compares its children by value to the player about to
move at the parent.
"""

from typing import List

from ..game import EndStatus
from .node import Node
from .tree import NodeArena


def reward_for(node: Node, outcome: EndStatus) -> float:
    return float(node.perspective.reward_when_outcome_is(outcome))


def path_rewards(nodes: List[Node], outcome: EndStatus) -> List[float]:
    """Reward each node on a path would receive for ``outcome``."""
    return [reward_for(node, outcome) for node in nodes]


def apply_rewards(nodes: List[Node], rewards: List[float]) -> None:
    """Credit precomputed rewards, leaf first."""
    for node, reward in zip(reversed(nodes), reversed(rewards)):
        node.update(reward)


def backpropagate_path(arena: NodeArena, path: List[int], outcome: EndStatus) -> None:
    """Backpropagate a rollout outcome along explicit path.

    Rewards are all computed before any node is updated, so a failing
    ``reward_when_outcome_is`` leaves statistics untouched.

    Args:
        arena: Node storage
        path: Handles from root to the simulated node
        outcome: Terminal result of the rollout
    """
    nodes = [arena.get(handle) for handle in path]
    apply_rewards(nodes, path_rewards(nodes, outcome))
