"""Expansion: grow the tree by one node per simulation.

Expansion is split in two so the search loop can build the new child,
run the rollout from it, and only then insert it. A rollout that fails on
a malformed game therefore leaves the tree exactly as it was.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..errors import TerminalStateError
from ..game import Action
from .node import Node
from .tree import NodeArena

EXPANSION_ORDERS = ("random", "first")


@dataclass
class PendingExpansion:
    """A child built but not yet inserted into the tree."""
    parent: int
    index: int
    action: Action
    child: Node


def pick_unexpanded(
    node: Node,
    order: str = "random",
    rng: Optional[np.random.Generator] = None
) -> int:
    """Index into ``node.unexpanded_actions`` of the action to expand next."""
    if order == "first":
        return 0
    if rng is None:
        raise ValueError("Random expansion order needs a random generator")
    return int(rng.integers(len(node.unexpanded_actions)))


def prepare_expansion(
    arena: NodeArena,
    handle: int,
    order: str = "random",
    rng: Optional[np.random.Generator] = None
) -> PendingExpansion:
    """Build the next child of ``handle`` without touching the tree.

    Raises:
        TerminalStateError: The node is terminal
        ValueError: The node is already fully expanded
    """
    node = arena.get(handle)
    if node.is_terminal():
        raise TerminalStateError("Cannot expand a terminal node")
    if node.is_fully_expanded():
        raise ValueError("Node is already fully expanded")

    index = pick_unexpanded(node, order, rng)
    action = node.unexpanded_actions[index]
    child = Node.from_state(node.state.act(action), perspective=node.acting_player)
    return PendingExpansion(parent=handle, index=index, action=action, child=child)


def commit_expansion(arena: NodeArena, pending: PendingExpansion) -> int:
    """Insert a prepared child and return its handle."""
    parent = arena.get(pending.parent)
    del parent.unexpanded_actions[pending.index]
    child_handle = arena.add(pending.child)
    parent.children.append((pending.action, child_handle))
    return child_handle


def expand(
    arena: NodeArena,
    handle: int,
    order: str = "random",
    rng: Optional[np.random.Generator] = None
) -> int:
    """Expand one child of ``handle`` and return its handle."""
    return commit_expansion(arena, prepare_expansion(arena, handle, order, rng))
