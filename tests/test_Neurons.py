import numpy as np
import pytest

import Neurons
from Creature import Creature
from nNet import Network


def test_wiring_tables():
    assert Neurons.INPUT_SIZE == 13 and Neurons.OUTPUT_SIZE == 7
    assert len(set(Neurons.INPUT_NAMES)) == Neurons.INPUT_SIZE
    assert len(set(Neurons.OUTPUT_NAMES)) == Neurons.OUTPUT_SIZE
    assert Neurons.OUTPUT_NAMES[:4] == ["angular_velocity", "linear_velocity", "eat", "reproduce"]
    assert all(n.isInput() and not n.isOutput() for n in Neurons.SENSORY_NEURONS)
    assert all(n.isOutput() and not n.isInput() for n in Neurons.RESPONSE_NEURONS)


def test_inputs_are_normalized(rng, mixed_grid):
    for _ in range(20):
        c = Creature(mixed_grid, rng)
        values = Neurons.sense_all(c)
        assert values.shape == (Neurons.INPUT_SIZE,)
        assert np.all(values >= 0) and np.all(values <= 1)


def test_read_all_ranges(rng):
    net = Network(2, [Neurons.INPUT_SIZE, Neurons.OUTPUT_SIZE], rng)
    out = net.output_layer()
    out.input(np.full(Neurons.OUTPUT_SIZE, -50.0))
    low = Neurons.read_all(net)
    out.input(np.full(Neurons.OUTPUT_SIZE, 50.0))
    high = Neurons.read_all(net)
    assert low["angular_velocity"] == pytest.approx(-1)
    assert high["angular_velocity"] == pytest.approx(1)
    for name in Neurons.OUTPUT_NAMES[1:]:
        assert low[name] == pytest.approx(0, abs=1e-9)
        assert high[name] == pytest.approx(1)


def test_label_names_nodes(rng):
    net = Network(3, Neurons.LAYER_SIZES, rng)
    Neurons.label(net)
    assert net.input_layer().get("energy").index == 3
    assert net.output_layer().get("reproduce").index == 3
