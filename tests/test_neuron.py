"""
Unit tests for neuron evaluation and layer processing.
"""

import math

import pytest

from exceptions import WiringError
from neural.layer import process_layer
from neural.neuron import ActivationFunction, Neuron


@pytest.fixture
def weighted_neuron():
    return Neuron(weights=[0.5, -1.0, 2.0], activation=ActivationFunction.LINEAR)


@pytest.mark.parametrize(
    "activation, expected",
    [
        (ActivationFunction.LINEAR, 2.0),
        (ActivationFunction.STEP01, 1.0),
        (ActivationFunction.GAUSSIAN, math.exp(-4.0)),
        (ActivationFunction.RELU, 2.0),
        (ActivationFunction.LOGISTIC, 1.0 / (1.0 + math.exp(-2.0))),
    ],
)
def test_feed_applies_activation(weighted_neuron, activation, expected):
    weighted_neuron.activation = activation
    assert weighted_neuron.feed([2.0, 1.0, 1.0]) == pytest.approx(expected)


@pytest.mark.parametrize("activation", list(ActivationFunction))
def test_feed_is_deterministic(weighted_neuron, activation):
    weighted_neuron.activation = activation
    inputs = [0.3, -7.0, 1.0]
    assert weighted_neuron.feed(inputs) == weighted_neuron.feed(list(inputs))


def test_step_and_relu_are_zero_at_zero():
    assert ActivationFunction.STEP01.apply(0.0) == 0.0
    assert ActivationFunction.STEP01.apply(-3.0) == 0.0
    assert ActivationFunction.RELU.apply(-3.0) == 0.0


def test_logistic_handles_large_magnitudes():
    assert ActivationFunction.LOGISTIC.apply(1e6) == pytest.approx(1.0)
    assert ActivationFunction.LOGISTIC.apply(-1e6) == pytest.approx(0.0)
    assert ActivationFunction.GAUSSIAN.apply(1e6) == 0.0


def test_feed_rejects_width_mismatch(weighted_neuron):
    with pytest.raises(WiringError):
        weighted_neuron.feed([1.0, 1.0])


def test_unconnected_and_dumb_neurons():
    n = Neuron.unconnected(4)
    assert n.weights == [0.0] * 4
    assert n.connected == []

    d = Neuron.dumb(4)
    assert d.weights == [0.01, 0.0, 0.0, 0.0]
    assert d.connected == [0]


def test_clone_is_independent(weighted_neuron):
    clone = weighted_neuron.clone()
    clone.weights[0] = 9.0
    assert weighted_neuron.weights[0] == 0.5


def test_process_layer_appends_bias_once():
    bias_only = Neuron(weights=[0.0, 0.0, 3.0])
    first_input = Neuron(weights=[1.0, 0.0, 0.0])
    assert process_layer([bias_only, first_input], [5.0, 6.0]) == [3.0, 5.0]


def test_process_layer_leaves_inputs_untouched():
    inputs = [1.0, 2.0]
    process_layer([Neuron.unconnected(3)], inputs)
    assert inputs == [1.0, 2.0]
