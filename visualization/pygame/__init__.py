"""
Pygame-based visualization package for the smart sweepers simulation.

Provides:
    - COLORS (shared color palette)
    - ChartData (dataclass for charts)
    - PygameMonitor (renders FrameState snapshots)
"""

from .colors import COLORS
from .chart_data import ChartData
from .monitor import PygameMonitor

__all__ = ["COLORS", "ChartData", "PygameMonitor"]
