"""
Tests for gene pool spawning and generational pruning.
"""

import random

import pytest

import config
from evolution.gene_pool import GenePool
from evolution.selection import Entry
from exceptions import DistributionError
from neural.brain import Brain


def tagged(k):
    """A brain recognisable by its hidden layer size."""
    return Brain.new_dumb(k)


def hidden_sizes(pool):
    return [len(entry.genotype.hidden_layer) for entry in pool.entries]


def test_new_eden():
    pool = GenePool.new_eden()
    assert len(pool) == 1
    assert pool.generation_size == 3
    assert pool.fitnesses() == [config.EDEN_FITNESS]
    assert pool.entries[0].genotype == Brain.new_dumb(3)


def test_generation_size_must_be_positive():
    with pytest.raises(ValueError):
        GenePool(generation_size=0)


def test_spawn_does_not_change_pool():
    pool = GenePool(
        genotypes=[(tagged(1), 4.0), (tagged(2), 0.0), (tagged(3), 7.5)],
        generation_size=2,
        rng=random.Random(1),
    )
    before = [(e.genotype.clone(), e.fitness) for e in pool.entries]
    for _ in range(200):
        pool.spawn()
    assert [(e.genotype, e.fitness) for e in pool.entries] == before
    assert pool.generation_size == 2


def test_spawn_returns_only_positive_fitness(monkeypatch):
    monkeypatch.setattr(config, "SPAWN_MUTATION_STRENGTH", 0.0)
    pool = GenePool(genotypes=[(tagged(1), 0.0), (tagged(2), 10.0)], rng=random.Random(6))
    for _ in range(100):
        assert pool.spawn() == tagged(2)


def test_spawn_from_single_entry_pool_keeps_shape():
    pool = GenePool.new_eden(rng=random.Random(8))
    for _ in range(50):
        child = pool.spawn()
        child.validate()
        assert len(child.hidden_layer) == 3


def test_spawned_genotype_is_independent():
    pool = GenePool.new_eden(rng=random.Random(2))
    child = pool.spawn()
    child.hidden_layer[0].weights[0] = 42.0
    assert pool.entries[0].genotype == Brain.new_dumb(3)


def test_spawn_from_empty_pool():
    with pytest.raises(DistributionError):
        GenePool().spawn()


def test_preserve_appends_a_copy():
    pool = GenePool.new_eden()
    genotype = tagged(2)
    pool.preserve(genotype, 3.5)
    genotype.output_layer[0].weights[0] = 99.0
    assert pool.fitnesses() == [10.0, 3.5]
    assert pool.entries[1].genotype == tagged(2)


def test_preserve_rejects_bad_fitness():
    pool = GenePool.new_eden()
    with pytest.raises(DistributionError):
        pool.preserve(tagged(1), -1.0)
    assert len(pool) == 1


def test_no_cutover_until_pool_exceeds_two_generations():
    pool = GenePool(generation_size=2)
    for k, fitness in enumerate([5.0, 1.0, 1.0, 10.0], start=1):
        pool.preserve(tagged(k), fitness)
    assert pool.fitnesses() == [5.0, 1.0, 1.0, 10.0]


def test_cutover_keeps_above_average_excluding_oldest():
    pool = GenePool(generation_size=2)
    for k, fitness in enumerate([5.0, 1.0, 1.0, 10.0, 10.0], start=1):
        pool.preserve(tagged(k), fitness)
    # candidates [1, 1, 10, 10], average 5.5
    assert pool.fitnesses() == [10.0, 10.0]
    assert hidden_sizes(pool) == [4, 5]
    assert pool.generation_size == 2


def test_cutover_updates_generation_size():
    pool = GenePool(generation_size=2)
    for k, fitness in enumerate([50.0, 6.0, 6.0, 6.0, 2.0], start=1):
        pool.preserve(tagged(k), fitness)
    # candidates [6, 6, 6, 2], average 5.0
    assert pool.fitnesses() == [6.0, 6.0, 6.0]
    assert hidden_sizes(pool) == [2, 3, 4]
    assert pool.generation_size == 3


def test_cutover_fallback_takes_two_newest_in_reverse():
    pool = GenePool(generation_size=2)
    for k, fitness in enumerate([5.0, 1.0, 1.0, 1.0, 100.0], start=1):
        pool.preserve(tagged(k), fitness)
    # only one candidate reaches the average of 25.75
    assert pool.fitnesses() == [100.0, 1.0]
    assert hidden_sizes(pool) == [5, 4]
    assert pool.generation_size == 2


def test_eden_breeds_over_several_generations():
    pool = GenePool.new_eden(rng=random.Random(12))
    for i in range(40):
        child = pool.spawn()
        pool.preserve(child, float(i % 7) + 0.5)
        assert 1 <= len(pool) <= 2 * pool.generation_size
        assert pool.generation_size >= 1


def test_best():
    pool = GenePool(genotypes=[(tagged(1), 2.0), (tagged(2), 9.0)])
    best = pool.best()
    assert best.fitness == 9.0
    assert best.genotype == tagged(2)


def test_entries_are_records():
    pool = GenePool.new_eden()
    entry = pool.entries[0]
    assert isinstance(entry, Entry)
    assert entry.fitness == config.EDEN_FITNESS


def test_cutover_fallback_when_rounding_lifts_the_average():
    pool = GenePool(genotypes=[(tagged(k), 0.1) for k in (1, 2, 3)], generation_size=1)
    pool.preserve(tagged(4), 0.1)
    # candidates [0.1, 0.1, 0.1] average to 0.10000000000000002, so none survive
    assert pool.fitnesses() == [0.1, 0.1]
    assert hidden_sizes(pool) == [4, 3]
    assert pool.generation_size == 1


def test_spawn_fails_once_every_fitness_is_zero():
    pool = GenePool.new_eden(rng=random.Random(0))
    for k in range(1, 7):
        pool.preserve(tagged(k), 0.0)
    # cutover kept the six zero-fitness candidates
    assert pool.fitnesses() == [0.0] * 6
    with pytest.raises(DistributionError):
        pool.spawn()
