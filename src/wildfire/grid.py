"""Fixed-size grid addressing for the forest.

Cells are identified by a linear entity id derived from their position,
starting at 0 in the upper left corner and increasing across each row before
moving down to the next one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional


class Position(NamedTuple):
    """A (column, row) coordinate on the grid."""

    column: int
    row: int


@dataclass(frozen=True)
class Grid:
    """Rectangular grid of ``width`` x ``height`` cells without wraparound."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    def contains(self, position: Position) -> bool:
        column, row = position
        return 0 <= column < self.width and 0 <= row < self.height

    def entity_id(self, position: Position) -> int:
        """
        Linear index of a position.

        Args:
            position: Cell coordinate, must lie on the grid

        Returns:
            ``column + row * width``
        """
        if not self.contains(position):
            raise ValueError(f"Position {tuple(position)} is outside the {self.width}x{self.height} grid")
        return position.column + position.row * self.width

    def position(self, entity_id: int) -> Position:
        """Inverse of :meth:`entity_id`."""
        if not 0 <= entity_id < self.size:
            raise ValueError(f"Entity id {entity_id} is outside the grid (size {self.size})")
        row, column = divmod(int(entity_id), self.width)
        return Position(column, row)

    def positions(self) -> Iterator[Position]:
        """All positions in row-major order, i.e. in entity id order."""
        for row in range(self.height):
            for column in range(self.width):
                yield Position(column, row)

    def up(self, position: Position) -> Optional[Position]:
        if position.row == 0:
            return None
        return Position(position.column, position.row - 1)

    def down(self, position: Position) -> Optional[Position]:
        if position.row == self.height - 1:
            return None
        return Position(position.column, position.row + 1)

    def left(self, position: Position) -> Optional[Position]:
        if position.column == 0:
            return None
        return Position(position.column - 1, position.row)

    def right(self, position: Position) -> Optional[Position]:
        if position.column == self.width - 1:
            return None
        return Position(position.column + 1, position.row)

    def neighbors(self, position: Position) -> list[Position]:
        """Existing von Neumann neighbours (up, down, left, right)."""
        candidates = (
            self.up(position),
            self.down(position),
            self.left(position),
            self.right(position),
        )
        return [neighbor for neighbor in candidates if neighbor is not None]
