"""
last_stander module: neural/neuron.py

Neuron primitives: a weighted sum followed by one of a fixed set of activations.

A weight of exactly 0.0 means "disconnected". The mutation operator treats it
differently from small nonzero values, so never normalise weights to ~0.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence
import math

import config
from exceptions import WiringError


class ActivationFunction(Enum):
    LINEAR = 0
    STEP01 = 1
    GAUSSIAN = 2
    RELU = 3
    LOGISTIC = 4

    def apply(self, x: float) -> float:
        if self is ActivationFunction.LINEAR:
            return x
        if self is ActivationFunction.STEP01:
            return 1.0 if x > 0.0 else 0.0
        if self is ActivationFunction.GAUSSIAN:
            return math.exp(-x * x)
        if self is ActivationFunction.RELU:
            return x if x > 0.0 else 0.0
        # stable logistic for large magnitudes
        return 1.0 / (1.0 + math.exp(-max(-60.0, min(60.0, x))))


@dataclass
class Neuron:
    weights: List[float] = field(default_factory=list)
    activation: ActivationFunction = ActivationFunction.LINEAR

    def feed(self, inputs: Sequence[float]) -> float:
        """
        Weighted sum of ``inputs`` through the activation.

        ``inputs`` must already carry the bias slot; see neural.layer.
        """
        if len(inputs) != len(self.weights):
            raise WiringError(
                f"Neuron has {len(self.weights)} weights but got {len(inputs)} inputs"
            )
        total = sum(w * x for w, x in zip(self.weights, inputs))
        return self.activation.apply(total)

    @property
    def connected(self) -> List[int]:
        return [i for i, w in enumerate(self.weights) if w != 0.0]

    def clone(self) -> "Neuron":
        return Neuron(weights=list(self.weights), activation=self.activation)

    @staticmethod
    def unconnected(synapse_count: int) -> "Neuron":
        return Neuron(weights=[0.0] * synapse_count, activation=ActivationFunction.LINEAR)

    @staticmethod
    def dumb(synapse_count: int) -> "Neuron":
        """Does as little as possible while staying connected."""
        n = Neuron.unconnected(synapse_count)
        n.weights[0] = config.SEED_WEIGHT
        return n
