"""
Feed-forward network used as a sweeper's brain.

Weights are flattened layer by layer, neuron by neuron, weight by weight; the
last weight of every neuron multiplies the bias constant. `weight_count`,
`get_weights` and `put_weights` all walk the layers in that same order, which
is what lets a genome's flat weight vector be poured into a network.
"""
from typing import List, Optional, Sequence

import numpy as np

from .config import CFG
from .errors import ConfigurationError
from .utils import random_clamped


def sigmoid(activation, response: float = 1.0):
    return 1.0 / (1.0 + np.exp(-np.asarray(activation, dtype=float) / response))


class Neuron:
    def __init__(self, input_count: int, rng: np.random.Generator):
        self.input_count = input_count
        # one extra weight for the bias
        self.weights = random_clamped(rng, input_count + 1)

    def __len__(self):
        return len(self.weights)


class NeuronLayer:
    def __init__(self, neuron_count: int, inputs_per_neuron: int, rng: np.random.Generator):
        self.inputs_per_neuron = inputs_per_neuron
        self.neurons: List[Neuron] = [Neuron(inputs_per_neuron, rng) for _ in range(neuron_count)]

    @property
    def neuron_count(self) -> int:
        return len(self.neurons)

    def weight_matrix(self) -> np.ndarray:
        """(neuron_count, inputs_per_neuron + 1) view of every neuron's weights."""
        return np.vstack([n.weights for n in self.neurons])


class NeuralNet:
    def __init__(self, input_count: int, output_count: int, hidden_layer_count: int,
                 neurons_per_hidden_layer: int, bias: float = -1.0, activation_response: float = 1.0,
                 rng: Optional[np.random.Generator] = None):
        self.input_count = input_count
        self.output_count = output_count
        self.hidden_layer_count = hidden_layer_count
        self.neurons_per_hidden_layer = neurons_per_hidden_layer
        self.bias = bias
        self.activation_response = activation_response
        self.rng = rng if rng is not None else np.random.default_rng()
        self.layers: List[NeuronLayer] = []
        self.configure(input_count, output_count, hidden_layer_count, neurons_per_hidden_layer)

    @classmethod
    def from_config(cls, cfg: CFG, rng: np.random.Generator) -> "NeuralNet":
        return cls(
            input_count=cfg.INPUT_COUNT,
            output_count=cfg.OUTPUT_COUNT,
            hidden_layer_count=cfg.HIDDEN_LAYER_COUNT,
            neurons_per_hidden_layer=cfg.NEURONS_PER_HIDDEN_LAYER,
            bias=cfg.BIAS,
            activation_response=cfg.ACTIVATION_RESPONSE,
            rng=rng,
        )

    def configure(self, input_count: int, output_count: int, hidden_layer_count: int,
                  neurons_per_hidden_layer: int) -> None:
        """(Re)build the layer topology with fresh random weights in (-1, 1)."""
        self.input_count = input_count
        self.output_count = output_count
        self.hidden_layer_count = hidden_layer_count
        self.neurons_per_hidden_layer = neurons_per_hidden_layer

        rng = self.rng
        if hidden_layer_count > 0:
            self.layers = [NeuronLayer(neurons_per_hidden_layer, input_count, rng)]
            for _ in range(hidden_layer_count - 1):
                self.layers.append(NeuronLayer(neurons_per_hidden_layer, neurons_per_hidden_layer, rng))
            self.layers.append(NeuronLayer(output_count, neurons_per_hidden_layer, rng))
        else:
            self.layers = [NeuronLayer(output_count, input_count, rng)]

    # ----- weights -----

    def weight_count(self) -> int:
        return sum((layer.inputs_per_neuron + 1) * layer.neuron_count for layer in self.layers)

    def get_weights(self) -> np.ndarray:
        if not self.layers:
            return np.empty(0)
        return np.concatenate([n.weights for layer in self.layers for n in layer.neurons])

    def put_weights(self, weights: Sequence[float]) -> None:
        weights = np.asarray(weights, dtype=float)
        expected = self.weight_count()
        if weights.ndim != 1 or weights.size != expected:
            raise ConfigurationError(
                f"weight vector has length {weights.size}, network needs {expected}")

        offset = 0
        for layer in self.layers:
            for neuron in layer.neurons:
                n = len(neuron)
                neuron.weights = weights[offset:offset + n].copy()
                offset += n

    # ----- forward pass -----

    def evaluate(self, inputs: Sequence[float]) -> np.ndarray:
        """Run the inputs through every layer.

        Returns an empty array when len(inputs) != input_count, so the caller can
        detect malformed input without an exception.
        """
        x = np.asarray(inputs, dtype=float)
        if x.ndim != 1 or x.size != self.input_count:
            return np.empty(0)

        for layer in self.layers:
            w = layer.weight_matrix()
            net_input = w[:, :-1] @ x + w[:, -1] * self.bias
            x = sigmoid(net_input, self.activation_response)
        return x
