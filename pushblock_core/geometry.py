from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

__all__ = [
    "Position",
    "Direction",
    "DIRECTIONS",
]


class Direction(Enum):
    """Cardinal directions as (dx, dy); y grows downward."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# canonical expansion order
DIRECTIONS: Tuple[Direction, ...] = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


@dataclass(frozen=True, slots=True)
class Position:
    """Grid cell, origin at the top-left corner."""

    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        return Position(self.x + direction.dx, self.y + direction.dy)

    def neighbors(self) -> Iterator["Position"]:
        """4-neighborhood in canonical direction order (may leave the grid)."""
        for d in DIRECTIONS:
            yield self.step(d)
