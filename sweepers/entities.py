from dataclasses import dataclass, field

import numpy as np


@dataclass
class Genome:
    weights: np.ndarray = field(default_factory=lambda: np.empty(0))
    fitness: float = 0.0

    def __post_init__(self):
        self.weights = np.asarray(self.weights, dtype=float)

    def __len__(self):
        return len(self.weights)

    def copy(self) -> "Genome":
        return Genome(self.weights.copy(), self.fitness)
