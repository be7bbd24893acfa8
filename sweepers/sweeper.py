import math
from typing import Optional

import numpy as np

from .config import CFG
from .entities import Genome
from .neural_net import NeuralNet
from .utils import clamp, normalize, random_position, wrap_position


class Sweeper:
    """A two-tracked vehicle driven by its own neural network.

    Inputs to the brain, in this order: normalized vector from the closest mine
    to the sweeper (x, y), then the heading (x, y). Outputs are the left and
    right track forces.
    """

    def __init__(self, cfg: CFG, rng: np.random.Generator, brain: Optional[NeuralNet] = None):
        self.cfg = cfg
        self.rng = rng
        self.brain = brain if brain is not None else NeuralNet.from_config(cfg, rng)
        self.genome: Optional[Genome] = None

        self.position = random_position(rng, cfg.WIDTH, cfg.HEIGHT)
        self.rotation = float(rng.random() * math.pi * 2)
        self.look_at = self._heading(self.rotation)
        self.speed = 0.0
        self.left_track = cfg.START_TRACK
        self.right_track = cfg.START_TRACK
        self.fitness = 0
        self.closest_mine = 0

    @staticmethod
    def _heading(rotation: float) -> np.ndarray:
        return np.array([-math.sin(rotation), math.cos(rotation)], dtype=float)

    # ----- brain -----

    def weight_count(self) -> int:
        return self.brain.weight_count()

    def load_genome(self, genome: Genome) -> None:
        """Pair this sweeper with a genome and pour its weights into the brain."""
        self.brain.put_weights(genome.weights)
        self.genome = genome

    # ----- sensing / moving -----

    def get_closest_mine(self, mines) -> np.ndarray:
        """Vector pointing from the nearest mine to the sweeper; caches its index.

        Ties go to the lowest index.
        """
        mines = np.asarray(mines, dtype=float).reshape(-1, 2)
        if len(mines) == 0:
            return np.zeros(2, dtype=float)
        dists = np.hypot(mines[:, 0] - self.position[0], mines[:, 1] - self.position[1])
        self.closest_mine = int(np.argmin(dists))
        return self.position - mines[self.closest_mine]

    sense = get_closest_mine

    def update(self, mines) -> bool:
        """Sense, think, move one tick. False means the network output was malformed."""
        to_mine = normalize(self.get_closest_mine(mines))
        inputs = [to_mine[0], to_mine[1], self.look_at[0], self.look_at[1]]

        output = self.brain.evaluate(inputs)
        if len(output) < self.cfg.OUTPUT_COUNT:
            return False

        self.left_track = float(output[0])
        self.right_track = float(output[1])

        rotating_force = clamp(self.left_track - self.right_track,
                               -self.cfg.MAX_TURN_RATE, self.cfg.MAX_TURN_RATE)
        self.rotation += rotating_force
        self.speed = self.left_track + self.right_track

        self.look_at = self._heading(self.rotation)
        self.position = self.position + self.look_at * self.speed
        wrap_position(self.position, self.cfg.WIDTH, self.cfg.HEIGHT)
        return True

    def check_for_mine(self, mines, size: float) -> Optional[int]:
        """Index of the cached closest mine if it is within reach, else None.

        Uses the index found by the last get_closest_mine, not a fresh scan.
        """
        mines = np.asarray(mines, dtype=float).reshape(-1, 2)
        if len(mines) == 0:
            return None
        offset = self.position - mines[self.closest_mine]
        if float(np.hypot(offset[0], offset[1])) < size + self.cfg.COLLECTION_MARGIN:
            return self.closest_mine
        return None

    def increment_fitness(self) -> None:
        self.fitness += 1

    def reset(self) -> None:
        """New random position and rotation, fitness back to zero. Weights untouched."""
        self.position = random_position(self.rng, self.cfg.WIDTH, self.cfg.HEIGHT)
        self.fitness = 0
        self.rotation = float(self.rng.random() * math.pi * 2)
        self.look_at = self._heading(self.rotation)
