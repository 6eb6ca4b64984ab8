from typing import Dict, List, Optional, Set

from .geometry import Position
from .state import Board, CellKind, State

GLYPH_WALL = "x"
GLYPH_BLOCK_ON_GOAL = "*"
GLYPH_BLOCK = "+"
GLYPH_GOAL = "-"
GLYPH_PLAYER = "@"
GLYPH_EMPTY = " "

GLYPHS: Dict[str, CellKind] = {
    GLYPH_WALL: CellKind.WALL,
    GLYPH_BLOCK_ON_GOAL: CellKind.BLOCK | CellKind.GOAL,
    GLYPH_BLOCK: CellKind.BLOCK,
    GLYPH_GOAL: CellKind.GOAL,
    GLYPH_PLAYER: CellKind.PLAYER,
    GLYPH_EMPTY: CellKind.EMPTY,
}

FORMATS = ("auto", "digits", "glyphs")


class LevelFormatError(ValueError):
    """The level text does not describe a well-formed puzzle."""


def _strip_blank_edges(text: str) -> List[str]:
    # a row of spaces is a row of empty glyph cells, only truly empty lines are framing
    lines = text.splitlines()
    while lines and lines[0] == "":
        lines.pop(0)
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def _is_digit_grid(lines: List[str]) -> bool:
    return all(line.rstrip() and all(ch in "0123456789" for ch in line.rstrip()) for line in lines)


def _digit_cells(lines: List[str]) -> List[List[CellKind]]:
    """Each character is a decimal bitmask: 1 wall, 2 block, 4 goal, 8 player."""
    lines = [line.rstrip() for line in lines]
    width = len(lines[0])
    grid = []
    for r, line in enumerate(lines):
        if len(line) != width:
            raise LevelFormatError(f"row {r} has {len(line)} cells, expected {width}")
        row = []
        for c, ch in enumerate(line):
            if ch not in "0123456789":
                raise LevelFormatError(f"non-digit cell {ch!r} at ({c}, {r})")
            row.append(CellKind(int(ch)))
        grid.append(row)
    return grid


def _glyph_cells(lines: List[str]) -> List[List[CellKind]]:
    """Renderer glyphs; short rows are padded with empty cells."""
    width = max(len(line) for line in lines)
    grid = []
    for r, line in enumerate(lines):
        row = []
        for c, ch in enumerate(line.ljust(width, GLYPH_EMPTY)):
            kind = GLYPHS.get(ch)
            if kind is None:
                raise LevelFormatError(f"unknown glyph {ch!r} at ({c}, {r})")
            row.append(kind)
        grid.append(row)
    return grid


def parse_level_str(level_str: str, fmt: str = "auto") -> State:
    """Parses a level into the initial State (total cost 0, no parent).

    Formats:
      "digits": rows of equal length, one decimal digit per cell holding a
                bitmask (1 wall, 2 block, 4 goal, 8 player; 6 = block on goal)
      "glyphs": renderer output ('x' wall, '*' block on goal, '+' block,
                '-' goal, '@' player, ' ' empty)
      "auto":   digits if every line is made of digits only, glyphs otherwise
    """
    if fmt not in FORMATS:
        raise ValueError(f"unknown level format: {fmt}")
    lines = _strip_blank_edges(level_str)
    if not lines:
        raise LevelFormatError("Empty level")
    if fmt == "auto":
        fmt = "digits" if _is_digit_grid(lines) else "glyphs"
    grid = _digit_cells(lines) if fmt == "digits" else _glyph_cells(lines)

    walls: Set[Position] = set()
    goals: Set[Position] = set()
    blocks: List[Position] = []
    player: Optional[Position] = None

    for y, row in enumerate(grid):
        for x, kind in enumerate(row):
            pos = Position(x, y)
            if kind & CellKind.WALL and kind & CellKind.BLOCK:
                raise LevelFormatError(f"wall and block overlap at ({x}, {y})")
            if kind & CellKind.WALL:
                walls.add(pos)
            if kind & CellKind.BLOCK:
                blocks.append(pos)
            if kind & CellKind.GOAL:
                goals.add(pos)
            if kind & CellKind.PLAYER:
                if player is not None:
                    raise LevelFormatError(f"second player at ({x}, {y})")
                player = pos

    if player is None:
        raise LevelFormatError("No player cell found in level")

    board = Board(rows=len(grid), columns=len(grid[0]), walls=frozenset(walls), goals=frozenset(goals))
    return State(board=board, blocks=tuple(blocks), player=player)


def parse_level_file(path: str, fmt: str = "auto") -> State:
    with open(path, "r", encoding="utf-8") as f:
        return parse_level_str(f.read(), fmt)
