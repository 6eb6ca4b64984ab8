from __future__ import annotations
from typing import Dict, Hashable, Optional

from pushblock_core.state import State
from pushblock_core.equivalence import state_key


class Transposition:
    """Best known total cost per equivalence key.

    In "component" mode two states share a key iff they are equivalent
    (same blocks, players in one free-space component); in "exact" mode the
    player cell must match too.
    """

    def __init__(self, mode: str = "component") -> None:
        self.mode = mode
        self.best_g: Dict[Hashable, int] = {}

    def key(self, s: State) -> Hashable:
        return state_key(s, self.mode)

    def get(self, key: Hashable) -> Optional[int]:
        return self.best_g.get(key)

    def seen(self, key: Hashable) -> bool:
        return key in self.best_g

    def record(self, key: Hashable, g: int) -> None:
        self.best_g[key] = g

    def seen_better(self, key: Hashable, g: int) -> bool:
        """True if `key` is known at cost <= g; otherwise stores g and returns False."""
        old = self.best_g.get(key)
        if old is None or g < old:
            self.best_g[key] = g
            return False
        return True

    def __len__(self) -> int:
        return len(self.best_g)
