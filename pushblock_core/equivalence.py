from __future__ import annotations
from typing import Hashable

from .state import State
from .reachability import distance, region_anchor

EQUIVALENCE_MODES = ("component", "exact")


def equals(a: State, b: State) -> bool:
    """Same block set and players in the same free-space component.

    Block counts never change during a solve, so set equality is enough.
    The component check runs on `a`'s layout, which equals `b`'s once the
    block sets match.
    """
    if a.block_set != b.block_set:
        return False
    return distance(a, a.player, b.player) is not None


def state_key(state: State, mode: str = "component") -> Hashable:
    """Hashable dedup key.

    "component": keys match iff `equals` holds (player replaced by the anchor
    of its component). "exact": keys match iff blocks and player cell match.
    """
    if mode == "component":
        return (state.block_set, region_anchor(state, state.player))
    if mode == "exact":
        return (state.block_set, state.player)
    raise ValueError(f"unknown equivalence mode: {mode}")
