"""Tree cell states and their lifecycle."""

from __future__ import annotations

from enum import IntEnum


class CellState(IntEnum):
    """Possible states of a forest cell.

    A tree moves forward along Living -> Ignited -> Burning -> Burned and
    never back. Clear cells hold no tree and never change.
    """
    Clear = 0
    Living = 1
    Ignited = 2
    Burning = 3
    Burned = 4

    def ignited(self) -> "CellState":
        """
        State after a burning neighbour reaches this cell.

        Only living trees catch fire; every other state is returned as is,
        so igniting the same cell several times in one cycle is harmless.
        """
        if self is CellState.Living:
            return CellState.Ignited
        return self

    def decayed(self) -> "CellState":
        """State after the unconditional start-of-cycle transition."""
        if self is CellState.Ignited:
            return CellState.Burning
        if self is CellState.Burning:
            return CellState.Burned
        return self

    @property
    def is_active(self) -> bool:
        """True while the cell is part of a live fire."""
        return self in (CellState.Ignited, CellState.Burning)
