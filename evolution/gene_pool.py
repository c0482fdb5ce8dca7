"""
last_stander module: evolution/gene_pool.py

Population of breeding genotypes.

Adam/Eve is kept as a regular genotype with a high fitness, which biases the
first spawns toward it. Once the pool holds more than two generations' worth
of entries, everything below average is dropped and the survivor count
becomes the new generation size.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Tuple
import logging
import random

import config
from evolution.selection import Entry, check_fitness, select_survivors, weighted_index
from neural.brain import Brain

logger = logging.getLogger(__name__)

Genotype = Brain


class GenePool:
    def __init__(
        self,
        genotypes: Optional[Iterable[Tuple[Genotype, float]]] = None,
        generation_size: int = config.EDEN_GENERATION_SIZE,
        rng: Optional[random.Random] = None,
    ) -> None:
        if generation_size < 1:
            raise ValueError(f"generation_size must be >= 1, got {generation_size}")
        # breeding genotype, spawn rate; oldest first
        self._entries: List[Entry] = []
        for genotype, fitness in genotypes or ():
            self._entries.append(Entry(genotype=genotype.clone(), fitness=check_fitness(fitness)))
        self._generation_size = generation_size
        self._rng = rng if rng is not None else random

    @staticmethod
    def new_eden(rng: Optional[random.Random] = None) -> "GenePool":
        return GenePool(
            genotypes=[(Brain.new_dumb(config.SEED_HIDDEN_NEURONS), config.EDEN_FITNESS)],
            generation_size=config.EDEN_GENERATION_SIZE,
            rng=rng,
        )

    @property
    def generation_size(self) -> int:
        return self._generation_size

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return tuple(self._entries)

    def fitnesses(self) -> List[float]:
        return [entry.fitness for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def best(self) -> Entry:
        return max(self._entries, key=lambda entry: entry.fitness)

    def spawn(self) -> Genotype:
        """
        Fitness-weighted pick, returned as a mutated clone. The pool is unchanged.

        Zero-fitness entries are never picked. A pool whose fitnesses are all
        zero (reachable by preserving only zeros) raises DistributionError.
        """
        index = weighted_index(self.fitnesses(), self._rng)
        logger.debug("Spawn offspring of %d", index)
        genotype = self._entries[index].genotype
        return genotype.clone().mutate(config.SPAWN_MUTATION_STRENGTH, rng=self._rng)

    def preserve(self, genotype: Genotype, fitness: float) -> None:
        check_fitness(fitness)
        logger.debug("Preserving %d: %.3f", len(self._entries), fitness)
        self._entries.append(Entry(genotype=genotype.clone(), fitness=fitness))
        # Until the cutover, the old generation gets more than one chance to breed.
        if len(self._entries) > 2 * self._generation_size:
            self._cut_generation()

    def _cut_generation(self) -> None:
        # The oldest had a go already. This eliminates flukes, hopefully.
        candidates = self._entries[1:]
        average, survivors = select_survivors(candidates)
        # New generation may score worse than the last one.
        logger.info("New generation scores at least %.3f", average)
        if len(survivors) < 2:
            logger.info("Fewer than two above average, keeping the two newest")
            self._entries = list(reversed(candidates))[:2]
        else:
            self._generation_size = len(survivors)
            self._entries = survivors
            logger.info("%d breeds", self._generation_size)
