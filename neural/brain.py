"""
last_stander module: neural/brain.py

The shooter's evolvable policy:
- two domain inputs (bearing to nearest mob, time survived) plus a bias slot
- one hidden layer of neurons
- a single output neuron driving the weapon's aim
- a Brain is a value: mutation returns a new Brain and never touches the old one
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING
import math

import config
from exceptions import WiringError
from neural.layer import process_layer
from neural.neuron import Neuron

if TYPE_CHECKING:
    import random
    from evolution.mutate import MutationRates


INPUT_LABELS = ("mob_bearing", "time_survived")
OUTPUT_LABELS = ("aim_bearing",)


@dataclass
class Inputs:
    # bearing to the nearest hostile, radians / pi, in [-1, 1]
    relative_bearing_to_nearest_target: float
    # seconds, unnormalized
    time_survived: float


@dataclass
class Outputs:
    advance: bool
    # relative to walking direction
    turn_rate: float
    fire: bool
    # relative to heading, radians / pi
    aim_bearing_relative: float


def wrap_unit_bearing(value: float) -> float:
    """Wrap a bearing expressed in half-turns into [-1, 1)."""
    if not math.isfinite(value):
        return 0.0
    return (value + 1.0) % 2.0 - 1.0


@dataclass
class Brain:
    hidden_layer: List[Neuron] = field(default_factory=list)
    output_layer: List[Neuron] = field(default_factory=list)

    @staticmethod
    def new_dumb(hidden_neurons: int = config.SEED_HIDDEN_NEURONS) -> "Brain":
        """
        Minimal seed network.

        The first hidden neuron and the output neuron each have one tiny
        connection so an input -> hidden -> output path exists from birth.
        Everything else starts disconnected.
        """
        if hidden_neurons < 1:
            raise ValueError("a brain needs at least one hidden neuron")
        hidden_width = config.INPUT_COUNT + 1
        hidden = [Neuron.dumb(hidden_width)]
        hidden.extend(Neuron.unconnected(hidden_width) for _ in range(1, hidden_neurons))
        output = [Neuron.dumb(hidden_neurons + 1) for _ in range(config.OUTPUT_COUNT)]
        return Brain(hidden_layer=hidden, output_layer=output)

    def clone(self) -> "Brain":
        return Brain(
            hidden_layer=[n.clone() for n in self.hidden_layer],
            output_layer=[n.clone() for n in self.output_layer],
        )

    def validate(self) -> None:
        hidden_width = config.INPUT_COUNT + 1
        for i, n in enumerate(self.hidden_layer):
            if len(n.weights) != hidden_width:
                raise WiringError(f"hidden neuron {i} has {len(n.weights)} weights, expected {hidden_width}")
        output_width = len(self.hidden_layer) + 1
        for i, n in enumerate(self.output_layer):
            if len(n.weights) != output_width:
                raise WiringError(f"output neuron {i} has {len(n.weights)} weights, expected {output_width}")

    def process(self, inputs: Inputs) -> Outputs:
        values = [inputs.relative_bearing_to_nearest_target, inputs.time_survived]
        hidden = process_layer(self.hidden_layer, values)
        outputs = process_layer(self.output_layer, hidden)
        # The network only aims; walking and shooting are fixed.
        return Outputs(
            advance=False,
            turn_rate=0.0,
            fire=True,
            aim_bearing_relative=wrap_unit_bearing(outputs[0]),
        )

    def mutate(
        self,
        strength: float,
        rates: Optional["MutationRates"] = None,
        rng: Optional["random.Random"] = None,
    ) -> "Brain":
        from evolution.mutate import mutate_brain

        return mutate_brain(self, strength, rates=rates, rng=rng)

    # ---- diagnostics ----

    def pretty_print(self) -> str:
        lines = [f"Brain: {len(self.hidden_layer)} hidden, {len(self.output_layer)} output"]
        for layer_name, layer in (("hidden", self.hidden_layer), ("output", self.output_layer)):
            for i, n in enumerate(layer):
                weights = ", ".join(f"{w:+.3f}" for w in n.weights)
                lines.append(f"  {layer_name}[{i}] {n.activation.name.lower()}: [{weights}]")
        return "\n".join(lines)

    def to_dot(self) -> str:
        """
        Graphviz DOT rendering of the wiring.

        One node per input (bias included), hidden neuron and output neuron.
        Only connected weights become edges.
        """
        lines = ["digraph brain {", "  rankdir=LR;"]
        inputs = [f"in{i}" for i in range(config.INPUT_COUNT)] + ["in_bias"]
        for name, label in zip(inputs, INPUT_LABELS + ("bias",)):
            lines.append(f'  {name} [shape=box, label="{label}"];')
        hidden = [f"h{i}" for i in range(len(self.hidden_layer))] + ["h_bias"]
        for name, n in zip(hidden, self.hidden_layer):
            lines.append(f'  {name} [label="{name}\\n{n.activation.name.lower()}"];')
        lines.append('  h_bias [shape=box, label="bias"];')
        for i, n in enumerate(self.output_layer):
            label = OUTPUT_LABELS[i] if i < len(OUTPUT_LABELS) else f"out{i}"
            lines.append(f'  out{i} [shape=doublecircle, label="{label}\\n{n.activation.name.lower()}"];')

        for dst, n in zip(hidden, self.hidden_layer):
            for src_idx in n.connected:
                lines.append(f'  {inputs[src_idx]} -> {dst} [label="{n.weights[src_idx]:.3f}"];')
        for i, n in enumerate(self.output_layer):
            for src_idx in n.connected:
                lines.append(f'  {hidden[src_idx]} -> out{i} [label="{n.weights[src_idx]:.3f}"];')
        lines.append("}")
        return "\n".join(lines) + "\n"
