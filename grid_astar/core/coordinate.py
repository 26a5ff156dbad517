"""Grid coordinate value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable 2D grid position. ``y`` grows downward (row index)."""

    x: int
    y: int

    def key(self) -> tuple[int, int]:
        """Return a hashable identity key for use in mappings."""

        return (self.x, self.y)

    def dist(self, other: Coordinate) -> int:
        """Return the Manhattan distance to ``other``."""

        return abs(self.x - other.x) + abs(self.y - other.y)

    def offset(self, dx: int, dy: int) -> Coordinate:
        return Coordinate(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"(Col {self.x}, Row {self.y})"


__all__ = ["Coordinate"]
