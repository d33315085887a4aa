"""Main MCTS search over an abstract game.

One simulation:

    path = ucb_select(root)              # descend while fully expanded
    if path[-1] is terminal:
        outcome = its end status
    else:
        child = expand(path[-1])         # one new node
        outcome = rollout(child.state)   # uniform random playout
    backprop(path + [child], outcome)

After the budget the root child with the most visits is recommended.
Visit counts are less sensitive to rollout variance than mean reward.
"""

import copy
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ..errors import EmptyActionSetError, IllegalActionError, NoChildrenError, TerminalStateError
from ..game import Action, EndStatus, GameState
from .backprop import apply_rewards, path_rewards
from .expansion import EXPANSION_ORDERS, commit_expansion, prepare_expansion
from .node import Node
from .rollout import rollout
from .tree import NodeArena, ROOT, get_statistics
from .ucb import DEFAULT_EXPLORATION, TIE_BREAKS, TreePolicy, make_uct_policy, select_most_visited, ucb_select

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Configuration for the search tree."""
    exploration_constant: float = DEFAULT_EXPLORATION
    # "first" keeps expansion order on UCB ties, "random" draws uniformly
    tie_break: str = "first"
    # Which unexpanded action to materialise next: "random" or "first"
    expansion_order: str = "random"
    seed: Optional[int] = None
    # Debug progress log every N simulations (0 disables)
    log_every: int = 0

    def validate(self) -> "SearchConfig":
        if not self.exploration_constant > 0:
            raise ValueError(
                f"exploration_constant must be positive, got {self.exploration_constant}"
            )
        if self.tie_break not in TIE_BREAKS:
            raise ValueError(f"Unknown tie_break: {self.tie_break}")
        if self.expansion_order not in EXPANSION_ORDERS:
            raise ValueError(f"Unknown expansion_order: {self.expansion_order}")
        if self.log_every < 0:
            raise ValueError(f"log_every must be >= 0, got {self.log_every}")
        return self


class SearchTree:
    """Monte Carlo search tree rooted at the current game state.

    The tree is reused across real moves: ``renew`` moves the root to the
    child for the move actually played and keeps its statistics.

    Not thread-safe; one tree belongs to one caller.
    """

    def __init__(
        self,
        game_state: GameState,
        config: Optional[SearchConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Args:
            game_state: Initial root state
            config: Search configuration
            rng: Random generator for rollouts, expansion and tie-breaks.
                Built from ``config.seed`` when omitted.
        """
        self.config = (config or SearchConfig()).validate()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.tree_policy: TreePolicy = make_uct_policy(self.config.exploration_constant)
        self.arena = NodeArena(Node.from_state(game_state))
        # Lifetime count; renew keeps it
        self.total_simulations = 0

    def with_tree_policy(self, tree_policy: TreePolicy) -> "SearchTree":
        """Replace UCT with ``tree_policy(total_reward, visits, parent_visits)``."""
        self.tree_policy = tree_policy
        return self

    def iterate(self) -> EndStatus:
        """Run one simulation and return its outcome.

        Nothing is written to the tree until the rollout has finished and
        every reward on the path is known.
        """
        arena = self.arena
        if arena.root.is_terminal():
            raise TerminalStateError("Game is over at the root; nothing to simulate")

        path = ucb_select(arena, self.tree_policy, self.config.tie_break, self.rng)
        nodes = [arena.get(handle) for handle in path]
        leaf = nodes[-1]

        pending = None
        try:
            if leaf.is_terminal():
                outcome = leaf.outcome
            else:
                pending = prepare_expansion(
                    arena, path[-1], self.config.expansion_order, self.rng
                )
                nodes.append(pending.child)
                outcome, _ = rollout(pending.child.state, self.rng)
        except EmptyActionSetError:
            logger.warning("Game model reported a non-terminal state without actions")
            raise

        rewards = path_rewards(nodes, outcome)
        if pending is not None:
            commit_expansion(arena, pending)
        apply_rewards(nodes, rewards)

        self.total_simulations += 1
        return outcome

    def search(self, n_simulations: int) -> Action:
        """Run ``n_simulations`` simulations and return the best action.

        Args:
            n_simulations: Simulation budget (0 just reads the current tree)

        Returns:
            Copy of the action leading to the most visited root child

        Raises:
            TerminalStateError: The root is terminal
            NoChildrenError: Budget is 0 and the root has no children
        """
        if n_simulations < 0:
            raise ValueError(f"n_simulations must be >= 0, got {n_simulations}")
        if self.arena.root.is_terminal():
            raise TerminalStateError("Game is over at the root; no action to recommend")

        log_every = self.config.log_every
        for i in range(n_simulations):
            self.iterate()

            if log_every and (i + 1) % log_every == 0:
                logger.debug(
                    "Simulation %d/%d: root_visits=%d, nodes=%d",
                    i + 1, n_simulations, self.arena.root.visit_count, len(self.arena)
                )

        best = select_most_visited(self.arena)
        if best is None:
            raise NoChildrenError("Root has no children; run at least one simulation")

        action = self._action_to(best)
        logger.debug(
            "Search done: simulations=%d, root_visits=%d, nodes=%d, action=%r",
            n_simulations, self.arena.root.visit_count, len(self.arena), action
        )
        return copy.copy(action)

    def renew(self, action: Action) -> None:
        """Advance the root along ``action``.

        An expanded child becomes the new root with its subtree and
        statistics; all sibling subtrees are dropped. An unexpanded legal
        action gets a fresh root.

        Raises:
            IllegalActionError: ``action`` is not legal at the root. The
                tree is left exactly as it was.
        """
        root = self.arena.root
        handle = root.child_handle(action)

        if handle is not None:
            arena = self.arena.reroot(handle)
            logger.debug("Renew %r: reusing subtree of %d nodes", action, len(arena))
        elif root.has_unexpanded(action):
            arena = NodeArena(
                Node.from_state(root.state.act(action), perspective=root.acting_player)
            )
            logger.debug("Renew %r: fresh root", action)
        else:
            raise IllegalActionError(f"Action {action!r} is not legal at the root")

        self.arena = arena

    def get_game_state(self) -> GameState:
        """Current root state. States are immutable, so this is never aliased mutably."""
        return self.arena.root.state

    def root_node(self) -> Node:
        return self.arena.root

    def child_nodes(self, handle: int = ROOT) -> List[Tuple[Action, Node]]:
        """(action, child) pairs of the node at ``handle``."""
        return [(action, self.arena.get(child)) for action, child in self.arena.get(handle).children]

    def root_action_stats(self) -> List[Tuple[Action, int, float]]:
        """(action, visits, mean reward) for each expanded root action."""
        return [(action, node.visit_count, node.Q) for action, node in self.child_nodes()]

    def statistics(self) -> dict:
        """Tree statistics of the current root plus ``total_simulations``.

        ``total_simulations`` counts every simulation this object has run,
        including those spent under earlier roots before ``renew``, so it
        can exceed ``root_visits``.
        """
        stats = get_statistics(self.arena)
        stats["total_simulations"] = self.total_simulations
        return stats

    def _action_to(self, handle: int) -> Action:
        for action, child in self.arena.root.children:
            if child == handle:
                return action
        raise KeyError(handle)

    def __repr__(self) -> str:
        return (f"SearchTree(nodes={len(self.arena)}, "
                f"root_visits={self.arena.root.visit_count})")
