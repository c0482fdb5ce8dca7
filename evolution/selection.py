"""
last_stander module: evolution/selection.py

Selection helpers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple
import math
import random

from exceptions import DistributionError
from neural.brain import Brain


@dataclass(frozen=True)
class Entry:
    genotype: Brain
    # seconds survived
    fitness: float = 0.0


def check_fitness(fitness: float) -> float:
    if not math.isfinite(fitness) or fitness < 0.0:
        raise DistributionError(f"fitness must be finite and >= 0, got {fitness}")
    return fitness


def weighted_index(weights: Sequence[float], rng=random) -> int:
    """
    Sample an index with probability proportional to its weight.

    Zero weights are never picked. Negative or non-finite weights, or an
    all-zero set, are a DistributionError.
    """
    for w in weights:
        check_fitness(w)
    total = sum(weights)
    if total <= 0.0:
        raise DistributionError("at least one weight must be positive")
    return rng.choices(range(len(weights)), weights=weights, k=1)[0]


def select_survivors(candidates: Sequence[Entry]) -> Tuple[float, List[Entry]]:
    """Return the average fitness and every candidate scoring at least that."""
    average = sum(c.fitness for c in candidates) / len(candidates)
    return average, [c for c in candidates if c.fitness >= average]
