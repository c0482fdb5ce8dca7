"""
last_stander module: neural/layer.py

Fully connected layer evaluation.
"""

from __future__ import annotations
from typing import List, Sequence

from neural.neuron import Neuron


def process_layer(neurons: Sequence[Neuron], inputs: Sequence[float]) -> List[float]:
    # shared bias connection, appended once per layer
    biased = list(inputs)
    biased.append(1.0)
    return [n.feed(biased) for n in neurons]
