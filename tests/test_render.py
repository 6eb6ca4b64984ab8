"""Tests for the render module."""

from pathlib import Path

import pytest
from pushblock_core.parser import parse_level_str
from pushblock_core.render import render_text, render_trace
from pushblock_core.equivalence import equals
from pushblock_core.levels.resolve import split_on_blank_lines
from pushblock_core.moves import successors
from pushblock_core.geometry import Position
from pushblock_core.state import State

LVL = """
11111
18001
10201
10401
11111
"""

CLASSIC = Path(__file__).resolve().parent.parent / "levels" / "examples" / "classic.txt"


def test_render_basic_level():
    s = parse_level_str(LVL)
    assert render_text(s) == "\n".join([
        "xxxxx",
        "x@  x",
        "x + x",
        "x - x",
        "xxxxx",
    ])


def test_render_block_on_goal():
    s = parse_level_str("11111\n18061\n11111")
    assert render_text(s).splitlines()[1] == "x@ *x"


def test_goal_hides_player():
    s = parse_level_str(LVL)
    on_goal = State(board=s.board, blocks=s.blocks, player=Position(2, 3))
    assert render_text(on_goal).splitlines()[3] == "x - x"


def test_render_trace_separates_states():
    s = parse_level_str(LVL)
    states = [s] + list(successors(s))
    text = render_trace(states)
    assert text.endswith("\n\n")
    blocks = split_on_blank_lines(text)
    assert len(blocks) == len(states)
    assert blocks[0] == render_text(s)


@pytest.mark.parametrize("index", range(4))
def test_render_then_parse_round_trip(index):
    text = split_on_blank_lines(CLASSIC.read_text(encoding="utf-8"))[index]
    s = parse_level_str(text)
    back = parse_level_str(render_text(s))
    assert equals(s, back)
    assert back.board == s.board
    assert back.player == s.player
    assert back == s


@pytest.mark.parametrize("level", [
    "00000\n18201\n10041\n11111",           # top row all empty
    "11111\n18241\n00000",                  # bottom row all empty
    "11111\n18201\n00000\n10041\n11111",    # interior row all empty
])
def test_round_trip_keeps_empty_rows(level):
    s = parse_level_str(level)
    back = parse_level_str(render_text(s))
    assert back.rows == s.rows
    assert back.blocks == s.blocks
    assert equals(s, back)
    assert back == s

    blocks = split_on_blank_lines(render_trace([s, s]))
    assert len(blocks) == 2
    assert parse_level_str(blocks[1]) == s
