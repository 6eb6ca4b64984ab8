from typing import Iterable

from .geometry import Position
from .state import State
from .parser import (
    GLYPH_WALL, GLYPH_BLOCK_ON_GOAL, GLYPH_BLOCK, GLYPH_GOAL, GLYPH_PLAYER, GLYPH_EMPTY,
)


def render_text(state: State) -> str:
    """Text grid of the state, one line per row.

    Precedence: wall, block on goal, block, goal, player, empty.
    """
    out_lines = []
    for y in range(state.rows):
        row_chars = []
        for x in range(state.columns):
            pos = Position(x, y)
            if state.has_wall_at(pos):
                row_chars.append(GLYPH_WALL)
            elif state.has_block_at(pos):
                row_chars.append(GLYPH_BLOCK_ON_GOAL if state.has_goal_at(pos) else GLYPH_BLOCK)
            elif state.has_goal_at(pos):
                row_chars.append(GLYPH_GOAL)
            elif pos == state.player:
                row_chars.append(GLYPH_PLAYER)
            else:
                row_chars.append(GLYPH_EMPTY)
        out_lines.append(''.join(row_chars))
    return "\n".join(out_lines)


def render_trace(states: Iterable[State]) -> str:
    """States in order, each followed by a blank line."""
    return "".join(render_text(s) + "\n\n" for s in states)
