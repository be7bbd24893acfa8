import numpy as np


def clamp(v: float, lo: float, hi: float) -> float:
    if lo > hi:
        raise ValueError(f"MIN={lo} is greater than MAX={hi}")
    return float(min(max(v, lo), hi))


def random_clamped(rng: np.random.Generator, size=None):
    """Triangular draw in (-1, 1): difference of two uniform [0, 1) draws."""
    return rng.random(size) - rng.random(size)


def random_position(rng: np.random.Generator, width: float, height: float) -> np.ndarray:
    return np.array([rng.random() * width, rng.random() * height], dtype=float)


def wrap_position(pos: np.ndarray, width: float, height: float) -> np.ndarray:
    """Toroidal wrap: past the far edge -> 0, below 0 -> the far edge (in place)."""
    if pos[0] > width:
        pos[0] = 0.0
    if pos[0] < 0:
        pos[0] = width
    if pos[1] > height:
        pos[1] = 0.0
    if pos[1] < 0:
        pos[1] = height
    return pos


def normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.hypot(v[0], v[1]))
    if length == 0.0:
        return np.zeros(2, dtype=float)
    return v / length
