from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntFlag
from typing import FrozenSet, Optional, Tuple

from .geometry import Direction, Position

__all__ = [
    "CellKind",
    "Board",
    "Push",
    "State",
]


class CellKind(IntFlag):
    """Bit values of one cell in the digit level format."""

    EMPTY = 0
    WALL = 1
    BLOCK = 2
    GOAL = 4
    PLAYER = 8


@dataclass(frozen=True, slots=True)
class Board:
    """Fixed part of a puzzle: grid extent, walls and goals."""

    rows: int
    columns: int
    walls: FrozenSet[Position]
    goals: FrozenSet[Position]

    @property
    def area(self) -> int:
        return self.rows * self.columns

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.columns and 0 <= pos.y < self.rows

    def is_wall(self, pos: Position) -> bool:
        return pos in self.walls

    def is_goal(self, pos: Position) -> bool:
        return pos in self.goals

    def is_wall_like(self, pos: Position) -> bool:
        """Outside the grid counts as wall."""
        return not self.in_bounds(pos) or pos in self.walls


@dataclass(frozen=True, slots=True)
class Push:
    """Transition record: the block's position before the push and the push direction."""

    block: Position
    direction: Direction


@dataclass(frozen=True, slots=True)
class State:
    """
    Immutable snapshot of a puzzle.

    Walls and goals live on the shared Board; blocks are kept in their stored
    order, which fixes successor order. `parent` is an index into the search
    arena and, like `last_push`, takes no part in equality.
    """

    board: Board
    blocks: Tuple[Position, ...]
    player: Position
    total_cost: int = 0
    parent: Optional[int] = field(default=None, compare=False)
    last_push: Optional[Push] = field(default=None, compare=False)

    # ---- queries
    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def columns(self) -> int:
        return self.board.columns

    @property
    def block_set(self) -> FrozenSet[Position]:
        return frozenset(self.blocks)

    def has_wall_at(self, pos: Position) -> bool:
        return self.board.is_wall(pos)

    def has_goal_at(self, pos: Position) -> bool:
        return self.board.is_goal(pos)

    def has_block_at(self, pos: Position) -> bool:
        return pos in self.blocks

    def is_blocked(self, pos: Position) -> bool:
        """Outside the grid, a wall or a block."""
        return self.board.is_wall_like(pos) or pos in self.blocks

    def cell_kind(self, pos: Position) -> CellKind:
        kind = CellKind.EMPTY
        if self.has_wall_at(pos):
            kind |= CellKind.WALL
        if self.has_block_at(pos):
            kind |= CellKind.BLOCK
        if self.has_goal_at(pos):
            kind |= CellKind.GOAL
        if pos == self.player:
            kind |= CellKind.PLAYER
        return kind

    # ---- state properties
    def is_cleared(self) -> bool:
        """Every goal cell holds a block."""
        return self.board.goals <= self.block_set
