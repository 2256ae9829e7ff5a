"""
Wildfire: forest fire spread using a deterministic cellular automaton.

A randomly planted forest is set alight along its left edge and the fire
advances one cell per cycle through neighbouring trees until it burns out.
"""

from .cell import CellState
from .config import InvalidDensityError, SimulationConfig
from .forest import Forest
from .grid import Grid, Position
from .model import WildfireModel
from .simulation import SimulationResult, run_simulation

__version__ = "0.1.0"

__all__ = [
    "CellState",
    "Forest",
    "Grid",
    "Position",
    "InvalidDensityError",
    "SimulationConfig",
    "WildfireModel",
    "SimulationResult",
    "run_simulation",
]
