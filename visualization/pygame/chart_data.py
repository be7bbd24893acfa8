from typing import List, Tuple
from dataclasses import dataclass, field

@dataclass
class ChartData:
    """One line of the fitness history chart, scaled between min_value and max_value"""
    color: Tuple[int, int, int]
    label: str
    values: List[float] = field(default_factory=list)
    max_value: float = 1.0
    min_value: float = 0.0
