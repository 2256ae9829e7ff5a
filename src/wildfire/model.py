"""Wildfire model implementation."""

from __future__ import annotations

import logging
from typing import Optional

from mesa import Model
from mesa.datacollection import DataCollector

from .cell import CellState
from .config import DEFAULT_HEIGHT, DEFAULT_WIDTH
from .engine import burn_rate, fire_active, spread_fire, start_fire
from .forest import Forest
from .grid import Grid
from .initializer import initialize_forest

logger = logging.getLogger(__name__)


def default_max_cycles(grid: Grid) -> int:
    """
    Cycle bound that a run on ``grid`` can never reach before burning out.

    Each tree burns for exactly one cycle, so a fire lasts at most one
    cycle per cell plus the ignition fuse. The fire front can wind through
    the forest, so ``width + height`` is not enough.
    """
    return grid.size + 2


class WildfireModel(Model):
    """Deterministic forest fire spreading from the leftmost column."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        density: float = 0.5,
        *,
        seed: Optional[int] = None,
        max_cycles: Optional[int] = None,
        forest: Optional[Forest] = None,
    ):
        """
        Initialize the wildfire model.

        Args:
            width: Width of the grid (number of cells)
            height: Height of the grid (number of cells)
            density: Probability that a cell holds a living tree, in (0, 1]
            seed: Seed of the model's random generator for reproducible forests
            max_cycles: Upper bound on cycles; derived from the grid when None
            forest: Prebuilt forest to use instead of random seeding;
                ``width``, ``height`` and ``density`` are ignored then
        """
        super().__init__(seed=seed)

        if forest is None:
            forest = initialize_forest(Grid(width, height), density, self.random)
        self.forest = forest
        self.grid = forest.grid

        self.max_cycles = max_cycles if max_cycles is not None else default_max_cycles(self.grid)
        if self.max_cycles <= 0:
            raise ValueError(f"max_cycles must be positive, got {self.max_cycles}")

        self.cycle = 0
        self.fire_started = False
        self.running = True

        self.datacollector = DataCollector(
            model_reporters={
                state.name: (lambda model, state=state: model.forest.count(state))
                for state in CellState
            }
        )

    def start_fire(self) -> int:
        """
        Ignite the leftmost column. Runs once, before the first step.

        Returns:
            Number of trees set alight
        """
        if self.fire_started:
            raise RuntimeError("Fire has already been started")
        self.fire_started = True

        seeded = start_fire(self.forest)
        if seeded:
            logger.info(f"Fire started in {seeded} cells of the leftmost column")
        else:
            logger.info("No living trees in the leftmost column, fire cannot start")
        self.datacollector.collect(self)
        return seeded

    def step(self):
        """
        Execute one cycle of the simulation.

        All cells decay first (Ignited -> Burning, Burning -> Burned), then
        every burning cell ignites its living neighbours. ``running`` turns
        False once nothing is ignited or burning or the cycle bound is hit.
        """
        newly_ignited = spread_fire(self.forest)
        self.cycle += 1
        self.datacollector.collect(self)

        active = self.fire_active()
        logger.debug(f"Cycle {self.cycle}: {newly_ignited} trees ignited, fire active: {active}")

        if not active:
            logger.info(f"Fire extinguished after {self.cycle} cycles")
            self.running = False
        elif self.cycle >= self.max_cycles:
            logger.warning(f"Stopped at the cycle bound ({self.max_cycles}) with the fire still active")
            self.running = False

    def fire_active(self) -> bool:
        return fire_active(self.forest)

    @property
    def extinguished(self) -> bool:
        return not self.fire_active()

    def counts(self) -> dict[CellState, int]:
        return self.forest.counts()

    def burn_rate(self) -> float:
        """Fraction of flammable trees that burned; NaN for a treeless forest."""
        return burn_rate(self.forest)
