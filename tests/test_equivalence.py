import pytest
from pushblock_core.parser import parse_level_str
from pushblock_core.equivalence import equals, state_key
from pushblock_core.moves import successors

# same blocks, players on opposite sides of the wall column
LEFT_AREA = """
11111111
10010201
18010041
11111111
"""
RIGHT_AREA = """
11111111
10010201
10018041
11111111
"""
RIGHT_AREA_OTHER_CELL = """
11111111
10018201
10010041
11111111
"""

LVL = """
11111
18001
10201
10401
11111
"""


def test_disjoint_regions_are_distinct():
    a = parse_level_str(LEFT_AREA)
    b = parse_level_str(RIGHT_AREA)
    assert equals(a, b) is False
    assert equals(b, a) is False
    assert state_key(a) != state_key(b)


def test_same_region_is_equivalent():
    b = parse_level_str(RIGHT_AREA)
    c = parse_level_str(RIGHT_AREA_OTHER_CELL)
    assert b.player != c.player
    assert equals(b, c) and equals(c, b)
    assert state_key(b) == state_key(c)
    assert state_key(b, "exact") != state_key(c, "exact")


def test_reflexive_and_symmetric():
    s = parse_level_str(LVL)
    states = [s] + list(successors(s))
    for a in states:
        assert equals(a, a)
        for b in states:
            assert equals(a, b) == equals(b, a)
            assert (state_key(a) == state_key(b)) == equals(a, b)


def test_different_blocks_never_equal():
    s = parse_level_str(LVL)
    succs = list(successors(s))
    assert not equals(s, succs[0])


def test_unknown_mode():
    with pytest.raises(ValueError):
        state_key(parse_level_str(LVL), "fuzzy")
