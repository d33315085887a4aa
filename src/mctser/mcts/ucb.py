"""UCB selection for game MCTS."""

import math
from typing import Callable, List, Optional

import numpy as np

from .tree import NodeArena, ROOT

# (total_reward, visit_count, parent_visits) -> score
TreePolicy = Callable[[float, int, int], float]

DEFAULT_EXPLORATION = math.sqrt(2)
TIE_BREAKS = ("first", "random")


def uct(
    total_reward: float,
    visit_count: int,
    parent_visits: int,
    c: float = DEFAULT_EXPLORATION
) -> float:
    """Compute UCB1 score.

    UCT = W / n + c * sqrt(ln(N) / n)

    Args:
        total_reward: W - reward accumulated by the child
        visit_count: n - child visits (must be >= 1)
        parent_visits: N - parent visits
        c: Exploration constant

    Returns:
        UCB score
    """
    exploitation = total_reward / visit_count
    exploration = c * math.sqrt(math.log(parent_visits) / visit_count)
    return exploitation + exploration


def make_uct_policy(c: float = DEFAULT_EXPLORATION) -> TreePolicy:
    """UCT tree policy bound to an exploration constant."""
    def policy(total_reward: float, visit_count: int, parent_visits: int) -> float:
        return uct(total_reward, visit_count, parent_visits, c)
    return policy


def ucb_select_child(
    arena: NodeArena,
    handle: int,
    policy: TreePolicy,
    tie_break: str = "first",
    rng: Optional[np.random.Generator] = None
) -> int:
    """Pick the child of ``handle`` with the highest tree-policy score.

    Only valid for a fully expanded, non-terminal node: every child then has
    at least one visit.

    Args:
        arena: Node storage
        handle: Parent node handle
        policy: Tree policy scoring each child
        tie_break: "first" keeps expansion order, "random" draws uniformly
        rng: Random generator, required for "random" tie-break

    Returns:
        Handle of the selected child
    """
    node = arena.get(handle)
    if node.is_terminal() or not node.is_fully_expanded():
        raise ValueError("Selection requires a fully expanded, non-terminal node")

    best: List[int] = []
    best_score = -math.inf

    for _, child_handle in node.children:
        child = arena.get(child_handle)
        score = policy(child.total_reward, child.visit_count, node.visit_count)
        if score > best_score:
            best_score = score
            best = [child_handle]
        elif score == best_score:
            best.append(child_handle)

    if not best:
        raise ValueError("Tree policy gave no comparable score for any child")

    if tie_break == "random" and len(best) > 1:
        if rng is None:
            raise ValueError("Random tie-break needs a random generator")
        return best[int(rng.integers(len(best)))]
    return best[0]


def ucb_select(
    arena: NodeArena,
    policy: TreePolicy,
    tie_break: str = "first",
    rng: Optional[np.random.Generator] = None,
    start: int = ROOT
) -> List[int]:
    """Descend by UCB until a terminal or not fully expanded node.

    Returns:
        Handles visited, from ``start`` to the selected node
    """
    path = [start]
    node = arena.get(start)

    while not node.is_terminal() and node.is_fully_expanded():
        handle = ucb_select_child(arena, path[-1], policy, tie_break, rng)
        path.append(handle)
        node = arena.get(handle)

    return path


def select_most_visited(arena: NodeArena, handle: int = ROOT) -> Optional[int]:
    """Most visited child (final move choice); first in order on ties."""
    children = arena.get(handle).children
    if not children:
        return None

    best_handle = None
    best_visits = -1
    for _, child_handle in children:
        visits = arena.get(child_handle).visit_count
        if visits > best_visits:
            best_visits = visits
            best_handle = child_handle
    return best_handle
