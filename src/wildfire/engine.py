"""Cycle-level fire transitions operating directly on a :class:`Forest`."""

from __future__ import annotations

import math

import numpy as np

from .cell import CellState
from .forest import Forest

# Unconditional start-of-cycle transition, indexed by state value
_DECAY = np.array([int(state.decayed()) for state in CellState], dtype=np.int8)

# Ignited or Burning, indexed by state value
_ACTIVE = np.array([state.is_active for state in CellState], dtype=bool)


def start_fire(forest: Forest) -> int:
    """
    Ignite every living tree in the leftmost column.

    Returns:
        Number of trees set alight
    """
    return sum(forest.ignite(entity_id) for entity_id in forest.column_ids(0))


def decay(forest: Forest) -> None:
    """Advance Ignited cells to Burning and Burning cells to Burned."""
    forest.states[:] = _DECAY[forest.states]


def propagate(forest: Forest) -> int:
    """
    Ignite the living neighbours of every burning cell.

    Must run after :func:`decay` has finished for the whole grid; cells
    ignited here are only read as burning in the next cycle.

    Returns:
        Number of newly ignited trees
    """
    grid = forest.grid
    ignited = 0
    for entity_id in forest.ids_in_state(CellState.Burning):
        for neighbor in grid.neighbors(forest.position(entity_id)):
            ignited += forest.ignite(grid.entity_id(neighbor))
    return ignited


def spread_fire(forest: Forest) -> int:
    """Run one full cycle: decay, then propagation."""
    decay(forest)
    return propagate(forest)


def fire_active(forest: Forest) -> bool:
    """True while any cell is Ignited or Burning."""
    return bool(_ACTIVE[forest.states].any())


def burn_rate(forest: Forest) -> float:
    """
    Fraction of flammable trees that ended up burned.

    Computed as ``burned / (burned + living)``; Clear, Ignited and Burning
    cells are left out.

    Returns:
        A value in [0, 1], or NaN when the forest has no living or burned trees
    """
    burned = forest.count(CellState.Burned)
    living = forest.count(CellState.Living)
    if burned + living == 0:
        return math.nan
    return burned / (burned + living)
