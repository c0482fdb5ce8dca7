"""
last_stander module: arena/rounds.py

Training loop: one AI borg per round, bred from and returned to the gene pool.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import logging
import random

import numpy as np

import config
from arena.arena import Arena
from evolution.export import export_dot
from evolution.gene_pool import GenePool, Genotype

logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    round: int
    genotype: Genotype
    time_alive: float
    kills: int
    timed_out: bool = False


def run_round(
    pool: GenePool,
    round_number: int = 0,
    rng: Optional[np.random.Generator] = None,
    dt: float = config.TICK_SECONDS,
    max_seconds: float = config.MAX_ROUND_SECONDS,
    dot_path: Optional[str] = None,
    mob_pool: Optional[GenePool] = None,
) -> RoundResult:
    genotype = pool.spawn()
    logger.debug("Spawned genotype\n%s", genotype.pretty_print())
    if dot_path:
        export_dot(genotype, dot_path)

    arena = Arena(genotype, rng=rng, mob_pool=mob_pool)
    while not arena.over and arena.time < max_seconds:
        arena.step(dt)

    timed_out = not arena.over
    if timed_out:
        logger.warning("Round %d hit the %.0fs limit", round_number, max_seconds)

    fitness = arena.borg.time_alive
    pool.preserve(genotype, fitness)
    return RoundResult(
        round=round_number,
        genotype=genotype,
        time_alive=fitness,
        kills=arena.kills,
        timed_out=timed_out,
    )


def run_training(
    rounds: int,
    pool: Optional[GenePool] = None,
    seed: Optional[int] = None,
    dot_path: Optional[str] = None,
    max_seconds: float = config.MAX_ROUND_SECONDS,
    mob_pool: Optional[GenePool] = None,
) -> List[RoundResult]:
    """
    Run ``rounds`` arena rounds in sequence.

    Mobs breed in their own pool, kept across rounds. seed fixes the mob
    arrivals, and the mutation/selection draws too for pools created here.
    """
    if pool is None:
        pool = GenePool.new_eden(rng=random.Random(seed) if seed is not None else None)
    if mob_pool is None:
        mob_pool = GenePool.new_eden(rng=random.Random(seed + 1) if seed is not None else None)
    arena_rng = np.random.default_rng(seed)

    results: List[RoundResult] = []
    for r in range(1, rounds + 1):
        result = run_round(
            pool,
            round_number=r,
            rng=arena_rng,
            dot_path=dot_path,
            max_seconds=max_seconds,
            mob_pool=mob_pool,
        )
        logger.info(
            "Round %d: survived %.2fs, %d kills, pool %d/%d",
            r,
            result.time_alive,
            result.kills,
            len(pool),
            pool.generation_size,
        )
        results.append(result)
    return results
