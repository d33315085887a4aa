#!/usr/bin/env python3
"""Match two simulation budgets against each other at tic-tac-toe.

Seats alternate every game. Reports the win/draw split, an exact
binomial test on decisive games and a rank test on per-game rewards.

Usage:
    python experiments/compare_budgets.py \
        --budget_a 500 --budget_b 50 --num_games 40
"""

import argparse
import logging

from mctser import SearchConfig, load_config
from mctser.comparison import Engine, play_match
from mctser.games import TicTacToe
from mctser.utils import setup_logging

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Compare MCTS simulation budgets")
    parser.add_argument("--budget_a", type=int, default=500,
                        help="Simulations per move for engine A")
    parser.add_argument("--budget_b", type=int, default=50,
                        help="Simulations per move for engine B")
    parser.add_argument("--num_games", type=int, default=40,
                        help="Games to play")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML search config shared by both engines")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--log_level", type=str, default="INFO",
                        help="Logging level")

    args = parser.parse_args()
    setup_logging(args.log_level)

    config = load_config(args.config) if args.config else SearchConfig()

    engine_a = Engine(name=f"mcts{args.budget_a}", simulations=args.budget_a, config=config)
    engine_b = Engine(name=f"mcts{args.budget_b}", simulations=args.budget_b, config=config)

    result = play_match(TicTacToe(), engine_a, engine_b, args.num_games, seed=args.seed)

    logger.info("=" * 60)
    logger.info("SUMMARY")
    logger.info("=" * 60)
    logger.info(f"{engine_a.name} wins: {result.wins_a}, "
                f"{engine_b.name} wins: {result.wins_b}, draws: {result.draws}")

    report = result.significance()
    logger.info(f"Decisive win rate of {engine_a.name}: {report['win_rate']:.3f} "
                f"(p={report['win_p_value']:.4f}, significant={report['significant']})")
    logger.info(f"Rank test p={report['rank_p_value']:.4f}")


if __name__ == "__main__":
    main()
