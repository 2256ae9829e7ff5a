"""Driver loop pacing a model run and feeding a display."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .cell import CellState
from .config import CYCLE_TIME_MS, IGNITION_DELAY_MS, SimulationConfig
from .display import Display, NullDisplay
from .model import WildfireModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of a finished run."""

    cycles: int
    extinguished: bool
    counts: dict[CellState, int]
    burn_rate: float

    @property
    def report(self) -> str:
        return format_burn_rate(self.burn_rate)


def format_burn_rate(rate: float) -> str:
    """Final report line; NaN (no flammable trees) is shown as ``n/a``."""
    if math.isnan(rate):
        return "% forest burned: n/a"
    return f"% forest burned: {rate}"


def build_model(config: SimulationConfig) -> WildfireModel:
    """Create a model from a validated configuration."""
    config.validate()
    return WildfireModel(
        width=config.width,
        height=config.height,
        density=config.density,
        seed=config.seed,
        max_cycles=config.max_cycles,
    )


def run_simulation(
    model: WildfireModel,
    display: Optional[Display] = None,
    *,
    cycle_time_ms: int = CYCLE_TIME_MS,
    ignition_delay_ms: int = IGNITION_DELAY_MS,
    sleep: Callable[[float], None] = time.sleep,
) -> SimulationResult:
    """
    Run a model from its initial forest until the fire goes out.

    The display receives the forest after initialization, after the fire is
    started and after every cycle. The termination check happens after each
    cycle has been shown.

    Args:
        model: Freshly built model, fire not yet started
        display: Sink for forest snapshots; nothing is drawn when None
        cycle_time_ms: Pause before each cycle
        ignition_delay_ms: Pause between the initial frame and the ignition
        sleep: Pause function taking seconds, ``time.sleep`` by default

    Returns:
        Cycle count, extinction flag, final state counts and burn rate
    """
    if display is None:
        display = NullDisplay()

    logger.info(f"Starting simulation on a {model.grid.width}x{model.grid.height} grid")
    display.show(model.forest)
    sleep(ignition_delay_ms / 1000)

    model.start_fire()
    display.show(model.forest)

    while model.running:
        sleep(cycle_time_ms / 1000)
        model.step()
        display.show(model.forest)

    result = SimulationResult(
        cycles=model.cycle,
        extinguished=model.extinguished,
        counts=model.counts(),
        burn_rate=model.burn_rate(),
    )
    logger.info(f"Simulation finished after {result.cycles} cycles, burn rate {result.burn_rate}")
    return result
