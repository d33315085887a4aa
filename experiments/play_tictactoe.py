#!/usr/bin/env python3
"""Self-play tic-tac-toe with a single reused search tree.

Each turn runs the search, plays the recommended move and re-roots the
tree on it, so statistics gathered for the reply carry over.

Usage:
    python experiments/play_tictactoe.py \
        --simulations 1000 \
        --config configs/search.yaml \
        --seed 42
"""

import argparse
import logging
import time

from mctser import SearchConfig, SearchTree, load_config
from mctser.games import TicTacToe
from mctser.utils import setup_logging

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Self-play tic-tac-toe with MCTS")
    parser.add_argument("--simulations", type=int, default=1000,
                        help="Simulations per move")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML search config")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (overrides the config)")
    parser.add_argument("--log_level", type=str, default="INFO",
                        help="Logging level")

    args = parser.parse_args()
    setup_logging(args.log_level)

    config = load_config(args.config) if args.config else SearchConfig()
    if args.seed is not None:
        config.seed = args.seed

    tree = SearchTree(TicTacToe(), config)
    game = tree.get_game_state()

    start = time.time()
    while game.end_status() is None:
        player = game.player()
        action = tree.search(args.simulations)
        stats = tree.statistics()
        tree.renew(action)
        game = tree.get_game_state()

        logger.info(f"{player!r} plays {action} "
                    f"(tree nodes={stats['total_nodes']}, root visits={stats['root_visits']})")
        logger.info("\n" + game.render())

    logger.info(f"Result: {game.end_status()} in {time.time() - start:.2f}s")


if __name__ == "__main__":
    main()
