from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError


@dataclass(frozen=True)
class CFG:
    # Arena
    WIDTH: int = 800
    HEIGHT: int = 600
    SEED: Optional[int] = 7

    # Neural network
    INPUT_COUNT: int = 4
    OUTPUT_COUNT: int = 2
    HIDDEN_LAYER_COUNT: int = 1
    NEURONS_PER_HIDDEN_LAYER: int = 8
    BIAS: float = -1.0
    ACTIVATION_RESPONSE: float = 1.0   # sigmoid(x) = 1 / (1 + exp(-x / response))

    # Sweepers
    SWEEPER_COUNT: int = 30
    MAX_TURN_RATE: float = 0.3         # radians per tick
    SWEEPER_SCALE: int = 5
    START_TRACK: float = 0.16

    # Mines
    MINE_COUNT: int = 50
    MINE_SCALE: float = 2.0
    COLLECTION_MARGIN: float = 5.0

    # Timing
    TICKS_PER_GENERATION: int = 2000
    N_GENERATIONS: int = 100           # 0 -> run until stopped

    # Genetic algorithm
    CROSSOVER_RATE: float = 0.7
    MUTATION_RATE: float = 0.1
    MAX_PERTURBATION: float = 0.3
    NUM_ELITE: int = 4
    NUM_COPIES_ELITE: int = 1

    # Rendering / monitor
    FPS: int = 60
    FAST_TICKS_PER_FRAME: int = 500
    START_FAST: bool = False
    LOG_EVENTS: bool = False           # one line per collected mine
    RESULTS_DIR: str = "simulation_results"

    def validate(self) -> "CFG":
        """Raise ConfigurationError on values the simulation cannot run with."""
        positive = {
            "WIDTH": self.WIDTH,
            "HEIGHT": self.HEIGHT,
            "INPUT_COUNT": self.INPUT_COUNT,
            "SWEEPER_COUNT": self.SWEEPER_COUNT,
            "MINE_COUNT": self.MINE_COUNT,
            "TICKS_PER_GENERATION": self.TICKS_PER_GENERATION,
            "FPS": self.FPS,
            "FAST_TICKS_PER_FRAME": self.FAST_TICKS_PER_FRAME,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")

        if self.OUTPUT_COUNT < 2:
            raise ConfigurationError(f"OUTPUT_COUNT must be at least 2 (left/right track), got {self.OUTPUT_COUNT}")
        if self.HIDDEN_LAYER_COUNT < 0:
            raise ConfigurationError(f"HIDDEN_LAYER_COUNT must be >= 0, got {self.HIDDEN_LAYER_COUNT}")
        if self.HIDDEN_LAYER_COUNT > 0 and self.NEURONS_PER_HIDDEN_LAYER <= 0:
            raise ConfigurationError("NEURONS_PER_HIDDEN_LAYER must be positive when hidden layers are used")
        if self.ACTIVATION_RESPONSE <= 0:
            raise ConfigurationError(f"ACTIVATION_RESPONSE must be positive, got {self.ACTIVATION_RESPONSE}")
        if self.N_GENERATIONS < 0:
            raise ConfigurationError(f"N_GENERATIONS must be >= 0, got {self.N_GENERATIONS}")

        for name in ("CROSSOVER_RATE", "MUTATION_RATE"):
            rate = getattr(self, name)
            if not 0.0 <= rate <= 1.0:
                raise ConfigurationError(f"{name} must be within [0, 1], got {rate}")
        if self.MAX_PERTURBATION < 0:
            raise ConfigurationError(f"MAX_PERTURBATION must be >= 0, got {self.MAX_PERTURBATION}")

        # the epoch fills the population two offspring at a time
        if self.SWEEPER_COUNT % 2 != 0:
            raise ConfigurationError(f"SWEEPER_COUNT must be even, got {self.SWEEPER_COUNT}")
        if self.NUM_ELITE < 0 or self.NUM_COPIES_ELITE < 0:
            raise ConfigurationError("NUM_ELITE and NUM_COPIES_ELITE must be >= 0")
        if self.NUM_ELITE > self.SWEEPER_COUNT:
            raise ConfigurationError(
                f"NUM_ELITE ({self.NUM_ELITE}) cannot exceed SWEEPER_COUNT ({self.SWEEPER_COUNT})")
        if self.NUM_ELITE * self.NUM_COPIES_ELITE > self.SWEEPER_COUNT:
            raise ConfigurationError("elite copies would not fit in the population")
        return self
