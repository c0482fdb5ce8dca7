"""
last_stander module: evolution/mutate.py

Mutation operator for brains.

Per weight, independently:
  - with p = strength * connect_rate toggle the connection
    (0.0 -> fresh gaussian weight, nonzero -> 0.0)
  - otherwise with p = strength * weight_rate add gaussian noise
Per neuron, with p = strength * activation_rate pick a new activation
uniformly from the full set (the current one included).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import logging
import math
import random

import config
from exceptions import DistributionError
from neural.brain import Brain
from neural.neuron import ActivationFunction, Neuron

logger = logging.getLogger(__name__)

ACTIVATION_OPTIONS = list(ActivationFunction)


@dataclass(frozen=True)
class MutationRates:
    connect_rate: float = config.MUT_CONNECT_RATE
    weight_rate: float = config.MUT_WEIGHT_RATE
    activation_rate: float = config.MUT_ACTIVATION_RATE
    weight_deviation: float = config.MUT_WEIGHT_DEVIATION


def check_probability(p: float) -> float:
    if not math.isfinite(p) or p < 0.0 or p > 1.0:
        raise DistributionError(f"probability must be within [0, 1], got {p}")
    return p


def bernoulli(p: float, rng=random) -> bool:
    check_probability(p)
    # random() is in [0, 1), so p == 0.0 never fires
    return rng.random() < p


def _mutate_weight(weight: float, p_connect: float, p_weight: float, deviation: float, rng) -> float:
    if bernoulli(p_connect, rng):
        if weight == 0.0:
            return rng.gauss(0.0, 1.0) * deviation
        return 0.0
    if bernoulli(p_weight, rng):
        return weight + rng.gauss(0.0, 1.0) * deviation
    return weight


def mutate_neuron(neuron: Neuron, strength: float, rates: MutationRates, rng=random) -> Neuron:
    """Return a mutated copy of ``neuron``."""
    weights = [
        _mutate_weight(
            w,
            strength * rates.connect_rate,
            strength * rates.weight_rate,
            rates.weight_deviation,
            rng,
        )
        for w in neuron.weights
    ]
    activation = neuron.activation
    if bernoulli(strength * rates.activation_rate, rng):
        activation = rng.choice(ACTIVATION_OPTIONS)
    return Neuron(weights=weights, activation=activation)


def _mutate_layer(layer: List[Neuron], strength: float, rates: MutationRates, rng) -> List[Neuron]:
    return [mutate_neuron(n, strength, rates, rng) for n in layer]


def mutate_brain(
    brain: Brain,
    strength: float,
    rates: Optional[MutationRates] = None,
    rng: Optional[random.Random] = None,
) -> Brain:
    """
    Return a mutated copy of ``brain``; ``brain`` itself is left untouched.

    strength: 0.0 is the identity, 1.0 applies the full rates.
    rng: any random.Random; defaults to the module-level generator.
    """
    if rates is None:
        rates = MutationRates()
    if rng is None:
        rng = random

    # bad parameters fail before any draw is made
    check_probability(strength)
    check_probability(strength * rates.connect_rate)
    check_probability(strength * rates.weight_rate)
    check_probability(strength * rates.activation_rate)
    if not math.isfinite(rates.weight_deviation) or rates.weight_deviation < 0.0:
        raise DistributionError(f"weight deviation must be finite and >= 0, got {rates.weight_deviation}")

    mutated = Brain(
        hidden_layer=_mutate_layer(brain.hidden_layer, strength, rates, rng),
        output_layer=_mutate_layer(brain.output_layer, strength, rates, rng),
    )
    logger.debug("Mutated brain at strength %.3f", strength)
    return mutated
