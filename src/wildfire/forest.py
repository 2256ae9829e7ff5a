"""Forest aggregate: parallel position and state arrays indexed by entity id."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .cell import CellState
from .config import STATE_GLYPHS
from .grid import Grid, Position

_GLYPH_STATES = {glyph: state for state, glyph in STATE_GLYPHS.items()}


class Forest:
    """All cells of the grid, stored as two arrays of length ``grid.size``.

    ``positions[i]`` is the (column, row) pair whose entity id is ``i`` and
    never changes. ``states[i]`` holds the ``CellState`` value of that cell
    and is mutated in place by the simulation.

    Attributes:
        grid: Dimensions and adjacency of the forest.
        positions: Read-only ``(size, 2)`` integer array.
        states: ``(size,)`` int8 array of ``CellState`` values.
    """

    def __init__(self, grid: Grid):
        """
        Create a forest of Clear cells.

        Args:
            grid: Grid the forest covers
        """
        self.grid = grid
        ids = np.arange(grid.size)
        self.positions = np.column_stack((ids % grid.width, ids // grid.width))
        self.positions.flags.writeable = False
        self.states = np.full(grid.size, int(CellState.Clear), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Forest":
        """
        Build a forest from rows of display glyphs (``" "``, ``T``, ``#``, ``%``, ``X``).

        Handy for setting up a known state; rows must all have the same length.
        """
        rows = list(rows)
        if not rows or len({len(row) for row in rows}) != 1:
            raise ValueError("Rows must be non-empty and of equal length")

        forest = cls(Grid(len(rows[0]), len(rows)))
        for row_index, row in enumerate(rows):
            for column_index, glyph in enumerate(row):
                if glyph not in _GLYPH_STATES:
                    raise ValueError(f"Unknown cell glyph {glyph!r}")
                forest.set_state(Position(column_index, row_index), _GLYPH_STATES[glyph])
        return forest

    def __len__(self) -> int:
        return self.grid.size

    def position(self, entity_id: int) -> Position:
        column, row = self.positions[entity_id]
        return Position(int(column), int(row))

    def state(self, entity_id: int) -> CellState:
        return CellState(int(self.states[entity_id]))

    def state_at(self, position: Position) -> CellState:
        return self.state(self.grid.entity_id(position))

    def set_state(self, position: Position, state: CellState) -> None:
        self.states[self.grid.entity_id(position)] = state

    def ignite(self, entity_id: int) -> bool:
        """
        Ignite a living tree.

        Returns:
            True if the cell changed, False for any non-Living cell
        """
        current = self.state(entity_id)
        new_state = current.ignited()
        if new_state is current:
            return False
        self.states[entity_id] = new_state
        return True

    def column_ids(self, column: int) -> np.ndarray:
        """Entity ids of every cell in a column, top to bottom."""
        return np.flatnonzero(self.positions[:, 0] == column)

    def ids_in_state(self, *states: CellState) -> np.ndarray:
        return np.flatnonzero(np.isin(self.states, [int(state) for state in states]))

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.states == state))

    def counts(self) -> dict[CellState, int]:
        """Number of cells in each state."""
        totals = np.bincount(self.states.astype(np.intp), minlength=len(CellState))
        return {state: int(totals[state]) for state in CellState}

    def as_rows(self) -> np.ndarray:
        """States as a ``(height, width)`` view, row 0 first."""
        return self.states.reshape(self.grid.height, self.grid.width)

    def snapshot(self) -> np.ndarray:
        """Copy of the current states, detached from further mutation."""
        return self.states.copy()
