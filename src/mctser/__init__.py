"""mctser: Monte Carlo Tree Search for turn-based games.

Give it any game that implements the abstraction in ``mctser.game`` and
ask for a move:

    tree = SearchTree(initial_state)
    action = tree.search(1000)
    tree.renew(action)

Components:
- game - GameState / Player interfaces the engine depends on
- mcts/ - Node arena, UCT selection, expansion, rollout, backprop
- games/ - Reference tic-tac-toe implementation
- comparison/ - Engine-vs-engine matches and significance tests
"""

__version__ = "0.1.0"

from .errors import (
    MCTSError,
    TerminalStateError,
    IllegalActionError,
    EmptyActionSetError,
    NoChildrenError,
)
from .game import GameState, Player
from .mcts.search import SearchConfig, SearchTree
from .config import load_config, config_from_dict

__all__ = [
    "MCTSError",
    "TerminalStateError",
    "IllegalActionError",
    "EmptyActionSetError",
    "NoChildrenError",
    "GameState",
    "Player",
    "SearchConfig",
    "SearchTree",
    "load_config",
    "config_from_dict",
]
