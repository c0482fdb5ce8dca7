"""
Headless training run: AI shooters live, aim, die, and evolve round after round.
"""

from __future__ import annotations
import argparse
import logging
import random

import config
from arena.rounds import run_training
from evolution.gene_pool import GenePool

logger = logging.getLogger("last_stander")


def main(rounds: int, seed: int | None = None, dot_path: str | None = None) -> GenePool:
    pool = GenePool.new_eden(rng=random.Random(seed) if seed is not None else None)
    logger.info("Running %d round(s)", rounds)
    results = run_training(rounds, pool=pool, seed=seed, dot_path=dot_path)

    if results:
        longest = max(results, key=lambda r: r.time_alive)
        logger.info("Longest round: #%d, %.2fs", longest.round, longest.time_alive)
    best = pool.best()
    logger.info("Best preserved genotype (fitness %.2f):\n%s", best.fitness, best.genotype.pretty_print())
    return pool


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Evolve the last-stander shooter AI.")
    parser.add_argument("rounds", type=int, nargs="?", default=20)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--dot", default=None, help=f"write each spawned genotype as DOT (e.g. {config.DOT_EXPORT_PATH})")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format=config.LOG_FORMAT)
    main(args.rounds, seed=args.seed, dot_path=args.dot)
