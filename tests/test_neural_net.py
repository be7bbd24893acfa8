"""
Tests for the feed-forward network.

Covers:
- Weight counts for several topologies
- Flat weight vector ordering (layer, neuron, weight)
- Forward pass against hand-computed values
- Input arity handling
"""
import math

import numpy as np
import pytest

from sweepers.config import CFG
from sweepers.errors import ConfigurationError
from sweepers.neural_net import NeuralNet, sigmoid


class TestWeightCount:
    """Tests for weight_count()."""

    def test_default_topology(self, cfg, rng):
        """4 inputs, one hidden layer of 8, 2 outputs."""
        net = NeuralNet.from_config(cfg, rng)
        assert net.weight_count() == 8 * (4 + 1) + 2 * (8 + 1) == 58

    def test_no_hidden_layer(self, rng):
        """Inputs feed the output layer directly."""
        net = NeuralNet(4, 2, 0, 8, rng=rng)
        assert len(net.layers) == 1
        assert net.weight_count() == 10

    def test_two_hidden_layers(self, rng):
        net = NeuralNet(2, 1, 2, 3, rng=rng)
        assert net.weight_count() == 3 * 3 + 3 * 4 + 1 * 4 == 25

    def test_matches_flat_vector(self, cfg, rng):
        net = NeuralNet.from_config(cfg, rng)
        assert len(net.get_weights()) == net.weight_count()


class TestWeights:
    """Tests for get_weights() / put_weights()."""

    @pytest.fixture
    def net(self, rng):
        return NeuralNet(2, 1, 1, 3, rng=rng)

    @pytest.mark.parametrize("topology", [
        (2, 1, 1, 3),
        (1, 1, 0, 0),
        (3, 2, 2, 5),
        (4, 2, 3, 1),
    ])
    def test_put_then_get(self, rng, topology):
        """Weights put in come back out unchanged."""
        net = NeuralNet(*topology, rng=rng)
        weights = rng.uniform(-1, 1, net.weight_count())
        net.put_weights(weights)
        np.testing.assert_array_equal(net.get_weights(), weights)

    def test_put_copies(self, net):
        """Later changes to the caller's array do not reach the network."""
        weights = np.zeros(net.weight_count())
        net.put_weights(weights)
        weights[:] = 5.0
        assert np.all(net.get_weights() == 0.0)

    def test_ordering(self, net):
        """Layer by layer, neuron by neuron, bias weight last."""
        net.put_weights(np.arange(net.weight_count(), dtype=float))
        hidden, output = net.layers
        np.testing.assert_array_equal(hidden.neurons[0].weights, [0, 1, 2])
        np.testing.assert_array_equal(hidden.neurons[1].weights, [3, 4, 5])
        np.testing.assert_array_equal(hidden.neurons[2].weights, [6, 7, 8])
        np.testing.assert_array_equal(output.neurons[0].weights, [9, 10, 11, 12])

    @pytest.mark.parametrize("delta", [-1, 1])
    def test_wrong_length_raises(self, net, delta):
        with pytest.raises(ConfigurationError, match="length"):
            net.put_weights(np.zeros(net.weight_count() + delta))

    def test_initial_weights_in_range(self, cfg, rng):
        """Fresh weights are drawn from (-1, 1)."""
        net = NeuralNet.from_config(cfg, rng)
        assert np.all(np.abs(net.get_weights()) < 1.0)


class TestEvaluate:
    """Tests for the forward pass."""

    def test_hand_computed_single_neuron(self, rng):
        """0.5*1 - 0.25*2 + 0.1*bias(-1) = -0.1"""
        net = NeuralNet(2, 1, 0, 0, bias=-1.0, rng=rng)
        net.put_weights([0.5, -0.25, 0.1])
        out = net.evaluate([1.0, 2.0])
        assert out.shape == (1,)
        assert out[0] == pytest.approx(1.0 / (1.0 + math.exp(0.1)))

    def test_hand_computed_hidden_layer(self, rng):
        net = NeuralNet(1, 1, 1, 2, bias=-1.0, rng=rng)
        # hidden: [w, bias_w] x2, output: [w1, w2, bias_w]
        net.put_weights([1.0, 0.0, -1.0, 0.0, 2.0, 2.0, 1.0])
        h1 = sigmoid(1.0)
        h2 = sigmoid(-1.0)
        expected = sigmoid(2.0 * h1 + 2.0 * h2 - 1.0)
        assert net.evaluate([1.0])[0] == pytest.approx(float(expected))

    def test_activation_response_scales(self, rng):
        """A larger response flattens the curve: sigmoid(x / response)."""
        net = NeuralNet(1, 1, 0, 0, activation_response=2.0, rng=rng)
        net.put_weights([1.0, 0.0])
        assert net.evaluate([3.0])[0] == pytest.approx(1.0 / (1.0 + math.exp(-1.5)))

    def test_output_count(self, cfg, rng):
        net = NeuralNet.from_config(cfg, rng)
        out = net.evaluate([0.1, -0.2, 0.3, 0.4])
        assert out.shape == (cfg.OUTPUT_COUNT,)
        assert np.all((out > 0.0) & (out < 1.0))

    def test_deterministic(self, cfg, rng):
        """Same weights and inputs give the same outputs."""
        net = NeuralNet.from_config(cfg, rng)
        inputs = [0.6, -0.8, 0.0, 1.0]
        np.testing.assert_array_equal(net.evaluate(inputs), net.evaluate(inputs))

    @pytest.mark.parametrize("count", [0, 1, 2, 3, 5, 8])
    def test_wrong_input_count_returns_empty(self, cfg, rng, count):
        net = NeuralNet.from_config(cfg, rng)
        out = net.evaluate([0.5] * count)
        assert len(out) == 0

    def test_does_not_change_weights(self, cfg, rng):
        net = NeuralNet.from_config(cfg, rng)
        before = net.get_weights().copy()
        net.evaluate([1.0, 0.0, 0.0, 1.0])
        np.testing.assert_array_equal(net.get_weights(), before)


class TestSigmoid:
    """Tests for the activation function."""

    def test_midpoint(self):
        assert float(sigmoid(0.0)) == 0.5

    @pytest.mark.parametrize("response", [1.0, 2.0, 4.0])
    def test_open_unit_interval(self, response):
        values = sigmoid(np.linspace(-20, 20, 81), response)
        assert np.all(values > 0.0)
        assert np.all(values < 1.0)
        assert np.all(np.diff(values) > 0.0)

    def test_symmetry(self):
        assert float(sigmoid(3.0) + sigmoid(-3.0)) == pytest.approx(1.0)


def test_from_config_uses_bias_and_response(rng):
    cfg = CFG(BIAS=-0.5, ACTIVATION_RESPONSE=3.0, HIDDEN_LAYER_COUNT=0)
    net = NeuralNet.from_config(cfg, rng)
    assert net.bias == -0.5
    assert net.activation_response == 3.0
    assert net.weight_count() == cfg.OUTPUT_COUNT * (cfg.INPUT_COUNT + 1)
