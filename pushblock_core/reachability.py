"""Breadth-first reachability over free cells.

A cell is passable when it is inside the grid and holds neither a wall nor a
block. The scratch cost map is a numpy array local to each call; unreached
cells keep the value UNREACHED.
"""
from __future__ import annotations
from collections import deque
from typing import Optional

import numpy as np

from .geometry import Position, DIRECTIONS
from .state import State

UNREACHED = -1


def _bound(state: State, limit: Optional[int]) -> int:
    # a shortest walk never needs more steps than there are cells
    return state.board.area if limit is None else limit


def distance_map(state: State, source: Position, limit: Optional[int] = None) -> np.ndarray:
    """Step counts from `source` to every reachable cell (rows x columns, int32).

    Cells further than `limit` steps (default: grid area) stay UNREACHED.
    The source is expanded only if it is a free in-bounds cell.
    """
    board = state.board
    cost = np.full((board.rows, board.columns), UNREACHED, dtype=np.int32)
    if state.is_blocked(source):
        return cost
    bound = _bound(state, limit)
    blocks = state.block_set

    cost[source.y, source.x] = 0
    q = deque([source])
    while q:
        cur = q.popleft()
        d = int(cost[cur.y, cur.x])
        if d >= bound:
            continue
        for direction in DIRECTIONS:
            nb = cur.step(direction)
            if not board.in_bounds(nb) or cost[nb.y, nb.x] != UNREACHED:
                continue
            if nb in board.walls or nb in blocks:
                continue
            cost[nb.y, nb.x] = d + 1
            q.append(nb)
    return cost


def distance(state: State, source: Position, target: Position, limit: Optional[int] = None) -> Optional[int]:
    """Orthogonal steps from `source` to `target`, or None if unreachable.

    Walls and blocks are impassable. Returns 0 when source == target. A walk
    longer than `limit` (default: grid area) is reported as unreachable.
    """
    if source == target:
        return 0
    board = state.board
    if state.is_blocked(source) or state.is_blocked(target):
        return None
    bound = _bound(state, limit)
    blocks = state.block_set

    cost = np.full((board.rows, board.columns), UNREACHED, dtype=np.int32)
    cost[source.y, source.x] = 0
    q = deque([source])
    while q:
        cur = q.popleft()
        d = int(cost[cur.y, cur.x])
        if d >= bound:
            return None
        for direction in DIRECTIONS:
            nb = cur.step(direction)
            if not board.in_bounds(nb) or cost[nb.y, nb.x] != UNREACHED:
                continue
            if nb in board.walls or nb in blocks:
                continue
            if nb == target:
                return d + 1
            cost[nb.y, nb.x] = d + 1
            q.append(nb)
    return None


def reachable(state: State, source: Position, target: Position) -> bool:
    return distance(state, source, target) is not None


def region_anchor(state: State, source: Position) -> Position:
    """First cell (row-major) of the free-space component containing `source`.

    Two free cells lie in the same component iff their anchors are equal.
    A blocked source is its own anchor.
    """
    region = distance_map(state, source) != UNREACHED
    cells = np.flatnonzero(region)
    if cells.size == 0:
        return source
    y, x = divmod(int(cells[0]), state.board.columns)
    return Position(x, y)
