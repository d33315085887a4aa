"""MCTS node for game search."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..errors import EmptyActionSetError
from ..game import Action, EndStatus, GameState, Player


@dataclass
class Node:
    """One explored game state and its statistics.

    Children are referenced by handle into the owning ``NodeArena``, so a
    node on its own never holds other nodes.

    Attributes:
        state: Game state snapshot this node represents
        acting_player: Player to move at ``state``
        perspective: Player whose rewards ``total_reward`` accumulates.
            For every non-root node this is the parent's acting player.
        outcome: Terminal result of ``state`` (None if the game goes on)
        children: (action, handle) pairs in expansion order
        unexpanded_actions: Legal actions without a child yet
        visit_count: N - simulations that passed through this node
        total_reward: W - sum of backpropagated rewards
    """
    state: GameState
    acting_player: Player
    perspective: Player
    outcome: Optional[EndStatus] = None
    children: List[Tuple[Action, int]] = field(default_factory=list)
    unexpanded_actions: List[Action] = field(default_factory=list)
    visit_count: int = 0
    total_reward: float = 0.0

    @classmethod
    def from_state(cls, state: GameState, perspective: Optional[Player] = None) -> "Node":
        """Build an unvisited node for ``state``.

        Args:
            state: Game state
            perspective: Player who moved into this state. Defaults to the
                player to move, which is what a fresh root uses.
        """
        acting_player = state.player()
        outcome = state.end_status()

        if outcome is None:
            unexpanded = list(state.possible_actions())
            if not unexpanded:
                raise EmptyActionSetError(
                    "Non-terminal state reports no possible actions"
                )
        else:
            unexpanded = []

        return cls(
            state=state,
            acting_player=acting_player,
            perspective=perspective if perspective is not None else acting_player,
            outcome=outcome,
            unexpanded_actions=unexpanded,
        )

    @property
    def Q(self) -> float:
        """Average reward (Q = W / N), from ``perspective``."""
        if self.visit_count == 0:
            return 0.0
        return self.total_reward / self.visit_count

    def is_terminal(self) -> bool:
        return self.outcome is not None

    def is_fully_expanded(self) -> bool:
        """Every legal action has a child.

        A terminal node is trivially fully expanded, so callers that care
        about the difference check ``is_terminal`` first.
        """
        return len(self.unexpanded_actions) == 0

    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def child_handle(self, action: Action) -> Optional[int]:
        """Handle of the child reached by ``action``, if expanded."""
        for child_action, handle in self.children:
            if child_action == action:
                return handle
        return None

    def has_unexpanded(self, action: Action) -> bool:
        return any(candidate == action for candidate in self.unexpanded_actions)

    def update(self, reward: float) -> None:
        self.visit_count += 1
        self.total_reward += reward

    def __repr__(self) -> str:
        return (f"Node(player={self.acting_player!r}, N={self.visit_count}, "
                f"W={self.total_reward:.3f}, Q={self.Q:.3f}, "
                f"children={len(self.children)}, "
                f"unexpanded={len(self.unexpanded_actions)})")
