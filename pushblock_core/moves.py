import logging
from typing import Iterator, Optional

from .geometry import Direction, Position, DIRECTIONS
from .state import State, Push
from .reachability import distance, distance_map, UNREACHED

logger = logging.getLogger(__name__)


def is_stuck(state: State, pos: Position) -> bool:
    """Block at `pos` (not on goal) touches a wall on both axes, i.e. sits in a corner.

    Cells outside the grid count as walls, so a grid corner is stuck too.

    Only this two-wall case is detected; 2x2 block clusters and enclosed
    multi-block areas are not.
    """
    if state.has_goal_at(pos):
        return False
    board = state.board
    vertical = board.is_wall_like(pos.step(Direction.UP)) or board.is_wall_like(pos.step(Direction.DOWN))
    horizontal = board.is_wall_like(pos.step(Direction.LEFT)) or board.is_wall_like(pos.step(Direction.RIGHT))
    return vertical and horizontal


def try_push(
    state: State,
    block: Position,
    direction: Direction,
    parent: Optional[int] = None,
    walk: Optional[int] = None,
) -> Optional[State]:
    """Push the block at `block` one cell in `direction`.

    The player must walk to the cell behind the block, then ends up on the
    block's old cell. Cost of the transition = walk + 1. Returns None when the
    push is illegal or leaves the block stuck.

    `walk` lets a caller supply a precomputed walking distance to the
    standing cell; it is measured with the reachability oracle otherwise.
    """
    if not state.has_block_at(block):
        logger.debug("no block at (%d, %d), push %s rejected", block.x, block.y, direction.name)
        return None

    dest = block.step(direction)
    stand = block.step(direction.opposite)
    if state.is_blocked(dest) or state.is_blocked(stand):
        return None

    if walk is None:
        walk = distance(state, state.player, stand)
    if walk is None:
        return None

    blocks = tuple(dest if b == block else b for b in state.blocks)
    child = State(
        board=state.board,
        blocks=blocks,
        player=block,               # the player is on the old position of the block
        total_cost=state.total_cost + walk + 1,
        parent=parent,
        last_push=Push(block, direction),
    )
    if is_stuck(child, dest):
        return None
    return child


def successors(state: State, parent: Optional[int] = None) -> Iterator[State]:
    """Lazily yields every legal, non-stuck push from `state`.

    Order: blocks in stored order, then UP, DOWN, LEFT, RIGHT. Walking
    distances come from a single flood fill around the player.
    """
    walk_cost = distance_map(state, state.player)
    for block in state.blocks:
        for direction in DIRECTIONS:
            stand = block.step(direction.opposite)
            if not state.board.in_bounds(stand):
                continue
            walk = int(walk_cost[stand.y, stand.x])
            if walk == UNREACHED:
                continue
            child = try_push(state, block, direction, parent=parent, walk=walk)
            if child is not None:
                yield child
