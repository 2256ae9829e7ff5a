"""Configuration values and validation for the wildfire simulation.

This module contains the default grid dimensions, pacing delays and the
glyphs used by the terminal display, together with the run configuration
container and the density parsing used by the command line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .cell import CellState

logger = logging.getLogger(__name__)

# ============================================================================
# DEFAULT SIMULATION PARAMETERS
# ============================================================================

DEFAULT_WIDTH: int = 90                             # Grid width in cells
DEFAULT_HEIGHT: int = 30                            # Grid height in cells
CYCLE_TIME_MS: int = 250                            # Pause between cycles
IGNITION_DELAY_MS: int = 1500                       # Pause before the fire starts

# ============================================================================
# DENSITY LIMITS
# ============================================================================

MIN_DENSITY: float = 0.0                            # Exclusive
MAX_DENSITY: float = 1.0                            # Inclusive

# ============================================================================
# TERMINAL GLYPHS
# ============================================================================

BORDER_GLYPH: str = "|"

STATE_GLYPHS: dict[CellState, str] = {
    CellState.Clear: " ",
    CellState.Living: "T",
    CellState.Ignited: "#",
    CellState.Burning: "%",
    CellState.Burned: "X",
}


class InvalidDensityError(ValueError):
    """Raised when the forest density is not a decimal in (0, 1]."""


def validate_density(density: float) -> float:
    """
    Check that a density lies in (0, 1].

    Args:
        density: Probability that a cell holds a living tree

    Returns:
        The density as a float

    Raises:
        InvalidDensityError: If the value is outside (0, 1] or not a number
    """
    value = float(density)
    # NaN fails both comparisons
    if not (MIN_DENSITY < value <= MAX_DENSITY):
        raise InvalidDensityError(
            f"Density must be greater than {MIN_DENSITY} and at most {MAX_DENSITY}, got {density}"
        )
    return value


def parse_density(text: str) -> float:
    """Parse user input into a validated density."""
    try:
        value = float(text.strip())
    except ValueError:
        logger.error(f"Density input {text!r} is not a decimal")
        raise InvalidDensityError(f"Input was not a decimal: {text.strip()!r}") from None
    try:
        return validate_density(value)
    except InvalidDensityError:
        logger.error(f"Density {value} is outside ({MIN_DENSITY}, {MAX_DENSITY}]")
        raise


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of a single simulation run."""

    density: float
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    cycle_time_ms: int = CYCLE_TIME_MS
    ignition_delay_ms: int = IGNITION_DELAY_MS
    max_cycles: Optional[int] = None  # None derives the bound from the grid
    seed: Optional[int] = None

    def validate(self) -> "SimulationConfig":
        """Raise ``ValueError`` for unusable settings, return ``self`` otherwise."""
        validate_density(self.density)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if self.cycle_time_ms < 0 or self.ignition_delay_ms < 0:
            raise ValueError("Delays cannot be negative")
        if self.max_cycles is not None and self.max_cycles <= 0:
            raise ValueError(f"max_cycles must be positive, got {self.max_cycles}")
        return self
