"""
Pytest fixtures for the sweeper tests.

Provides fixtures for:
- A seeded random generator
- The default configuration and a small, quick one
"""
import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from sweepers.config import CFG


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so every test run draws the same numbers."""
    return np.random.default_rng(1234)


@pytest.fixture
def cfg() -> CFG:
    """Default configuration with a fixed seed."""
    return CFG(SEED=1234)


@pytest.fixture
def small_cfg() -> CFG:
    """A population small enough to run whole generations in a test."""
    return CFG(
        SEED=42,
        SWEEPER_COUNT=6,
        MINE_COUNT=10,
        TICKS_PER_GENERATION=25,
        N_GENERATIONS=3,
        NUM_ELITE=2,
        NUM_COPIES_ELITE=1,
    )
