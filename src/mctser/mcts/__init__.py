"""MCTS module: tree search over abstract turn-based games.

Selection walks down by UCT.
Expansion adds one node per simulation.
A uniform random rollout plays the game out.
Backpropagation credits every node on the path.
The tree is kept and re-rooted as real moves are played.
"""

from .node import Node
from .tree import NodeArena, get_statistics
from .ucb import uct, make_uct_policy, ucb_select, ucb_select_child, select_most_visited
from .expansion import expand, prepare_expansion, commit_expansion
from .rollout import rollout
from .backprop import backpropagate_path
from .search import SearchConfig, SearchTree

__all__ = [
    "Node",
    "NodeArena",
    "get_statistics",
    "uct",
    "make_uct_policy",
    "ucb_select",
    "ucb_select_child",
    "select_most_visited",
    "expand",
    "prepare_expansion",
    "commit_expansion",
    "rollout",
    "backpropagate_path",
    "SearchConfig",
    "SearchTree",
]
