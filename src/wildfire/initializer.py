"""Random seeding of living trees."""

from __future__ import annotations

import logging
import random

from .cell import CellState
from .config import validate_density
from .forest import Forest
from .grid import Grid

logger = logging.getLogger(__name__)


def initialize_forest(grid: Grid, density: float, rng: random.Random) -> Forest:
    """
    Populate a forest with living trees.

    Every cell independently holds a tree with probability ``density``.
    Cells are sampled in row-major order so a seeded ``rng`` always yields
    the same forest.

    Args:
        grid: Dimensions of the forest
        density: Tree probability in (0, 1]
        rng: Random source, usually the model's seeded ``random``

    Returns:
        A forest of Living and Clear cells

    Raises:
        InvalidDensityError: If ``density`` is outside (0, 1]
    """
    density = validate_density(density)

    forest = Forest(grid)
    for entity_id in range(grid.size):
        if rng.random() < density:
            forest.states[entity_id] = CellState.Living

    logger.info(
        f"Initialized {grid.width}x{grid.height} forest with density {density}: "
        f"{forest.count(CellState.Living)} living trees"
    )
    return forest
