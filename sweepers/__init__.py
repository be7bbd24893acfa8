"""
Smart sweepers: tracked vehicles whose neural-network brains are evolved by a
genetic algorithm to find and collect mines.

Provides:
    - CFG (immutable simulation configuration)
    - NeuralNet, GeneticAlgorithm, Genome, Sweeper
    - Controller (tick/epoch driver) and FrameState (renderer snapshot)
"""

from .config import CFG
from .errors import (
    SweeperError,
    ConfigurationError,
    MalformedOutputError,
    DegenerateSelectionError,
)
from .entities import Genome
from .neural_net import NeuralNet, NeuronLayer, Neuron, sigmoid
from .genetics import GeneticAlgorithm
from .sweeper import Sweeper
from .frame import FrameState, SweeperView, Renderer
from .controller import Controller

__all__ = [
    "CFG",
    "SweeperError", "ConfigurationError", "MalformedOutputError", "DegenerateSelectionError",
    "Genome", "NeuralNet", "NeuronLayer", "Neuron", "sigmoid",
    "GeneticAlgorithm", "Sweeper",
    "FrameState", "SweeperView", "Renderer",
    "Controller",
]
