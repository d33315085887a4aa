"""Engine-vs-engine matches.

Each engine owns its own SearchTree. After every real move all trees are
renewed with that move, so every engine keeps reusing its own subtree.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np
from scipy import stats

from ..game import Action, EndStatus, GameState, Player
from ..mcts.search import SearchConfig, SearchTree

logger = logging.getLogger(__name__)


@dataclass
class Engine:
    """A search budget plus configuration, under a display name."""
    name: str
    simulations: int
    config: SearchConfig = field(default_factory=SearchConfig)


@dataclass
class GameRecord:
    """Result of one game.

    Attributes:
        moves: Actions in the order they were played
        outcome: Terminal result
        seats: Engine names in the order they first moved
        rewards: Engine name -> reward for the seat it played
    """
    moves: List[Action]
    outcome: EndStatus
    seats: List[str]
    rewards: Dict[str, float]


@dataclass
class MatchResult:
    """Per-game rewards for two engines over a match."""
    name_a: str
    name_b: str
    rewards_a: List[float] = field(default_factory=list)
    rewards_b: List[float] = field(default_factory=list)

    @property
    def wins_a(self) -> int:
        return sum(a > b for a, b in zip(self.rewards_a, self.rewards_b))

    @property
    def wins_b(self) -> int:
        return sum(b > a for a, b in zip(self.rewards_a, self.rewards_b))

    @property
    def draws(self) -> int:
        return len(self.rewards_a) - self.wins_a - self.wins_b

    def significance(self, alpha: float = 0.05) -> Dict[str, float]:
        """Test whether engine A is stronger than engine B.

        Win test: exact one-sided binomial test of A's wins among decisive
        games (draws excluded) against a 50% rate. Rank test: one-sided
        Mann-Whitney U on the per-game rewards, draws included.

        Returns:
            Dict with 'win_rate', 'win_p_value', 'rank_p_value' and
            'significant' (win test below ``alpha``)
        """
        decisive = self.wins_a + self.wins_b
        if decisive > 0:
            win_rate = self.wins_a / decisive
            result = stats.binomtest(self.wins_a, decisive, p=0.5, alternative="greater")
            win_p = float(result.pvalue)
        else:
            win_rate, win_p = 0.5, 1.0

        # mannwhitneyu is undefined when every reward is the same
        if len(set(self.rewards_a) | set(self.rewards_b)) > 1:
            _, p_value = stats.mannwhitneyu(self.rewards_a, self.rewards_b, alternative="greater")
            rank_p = float(p_value)
        else:
            rank_p = 1.0

        return {
            "win_rate": win_rate,
            "win_p_value": win_p,
            "rank_p_value": rank_p,
            "significant": win_p < alpha,
        }


def _seat_of(player: Player, seats: List[Player], num_engines: int) -> int:
    for i, seated in enumerate(seats):
        if seated == player:
            return i
    if len(seats) >= num_engines:
        raise ValueError(f"More players than engines ({num_engines})")
    seats.append(player)
    return len(seats) - 1


def play_game(
    initial_state: GameState,
    engines: Sequence[Engine],
    rng: Optional[np.random.Generator] = None
) -> GameRecord:
    """Play one game; the i-th distinct player to move is driven by engines[i].

    Args:
        initial_state: Starting position
        engines: Engines in seat order
        rng: Source of the per-engine random generators

    Returns:
        GameRecord of the finished game
    """
    rng = rng if rng is not None else np.random.default_rng()
    trees = [
        SearchTree(initial_state, engine.config, rng=np.random.default_rng(rng.integers(2**32)))
        for engine in engines
    ]

    seats: List[Player] = []
    moves: List[Action] = []
    state = initial_state

    while state.end_status() is None:
        seat = _seat_of(state.player(), seats, len(engines))
        action = trees[seat].search(engines[seat].simulations)
        for tree in trees:
            tree.renew(action)
        moves.append(action)
        state = trees[seat].get_game_state()

    outcome = state.end_status()
    rewards = {
        engines[i].name: float(player.reward_when_outcome_is(outcome))
        for i, player in enumerate(seats)
    }
    logger.debug("Game over after %d moves: %r", len(moves), rewards)

    return GameRecord(
        moves=moves,
        outcome=outcome,
        seats=[engines[i].name for i in range(len(seats))],
        rewards=rewards,
    )


def play_match(
    initial_state: GameState,
    engine_a: Engine,
    engine_b: Engine,
    n_games: int,
    seed: Optional[int] = None
) -> MatchResult:
    """Play ``n_games`` two-player games, alternating who moves first."""
    if engine_a.name == engine_b.name:
        raise ValueError("Engines need distinct names")

    rng = np.random.default_rng(seed)
    result = MatchResult(name_a=engine_a.name, name_b=engine_b.name)

    for i in range(n_games):
        order = (engine_a, engine_b) if i % 2 == 0 else (engine_b, engine_a)
        record = play_game(initial_state, order, rng)

        result.rewards_a.append(record.rewards[engine_a.name])
        result.rewards_b.append(record.rewards[engine_b.name])

        logger.info(
            "Game %d/%d (%s first): %s=%.2f %s=%.2f",
            i + 1, n_games, order[0].name,
            engine_a.name, result.rewards_a[-1],
            engine_b.name, result.rewards_b[-1]
        )

    return result
