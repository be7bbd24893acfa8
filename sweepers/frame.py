from dataclasses import dataclass, field
from typing import List, Protocol, Tuple


@dataclass(frozen=True)
class SweeperView:
    x: float
    y: float
    rotation: float
    speed: float
    heading: Tuple[float, float]
    fitness: int
    is_elite: bool = False


@dataclass(frozen=True)
class FrameState:
    """Everything a renderer needs to draw one frame; detached from the live simulation."""
    width: int
    height: int
    generation: int
    ticks: int
    best_fitness: float
    average_fitness: float
    fast_mode: bool
    sweeper_scale: float
    mine_scale: float
    sweepers: List[SweeperView] = field(default_factory=list)
    mines: List[Tuple[float, float]] = field(default_factory=list)
    best_history: List[float] = field(default_factory=list)
    average_history: List[float] = field(default_factory=list)


class Renderer(Protocol):
    def render(self, frame: FrameState) -> bool:
        """Draw one frame. False means the user closed the view."""
        ...

    def cleanup(self) -> None:
        ...
