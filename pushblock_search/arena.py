from __future__ import annotations
from typing import Dict, List, Optional

from pushblock_core.state import State


class StateArena:
    """Append-only store of every state a search inserts.

    A state's `parent` is its parent's index here, so the whole search tree
    can be walked or dumped without object references.
    """

    def __init__(self) -> None:
        self._states: List[State] = []

    def add(self, state: State) -> int:
        self._states.append(state)
        return len(self._states) - 1

    def __getitem__(self, index: int) -> State:
        return self._states[index]

    def __len__(self) -> int:
        return len(self._states)

    def trace(self, terminal: State) -> List[State]:
        """[initial, ..., terminal] by following parent indices."""
        path = [terminal]
        cur: Optional[int] = terminal.parent
        while cur is not None:
            state = self._states[cur]
            path.append(state)
            cur = state.parent
        path.reverse()
        return path

    def to_records(self) -> List[Dict[str, object]]:
        """One JSON-friendly dict per stored state, in insertion order."""
        records = []
        for i, s in enumerate(self._states):
            rec: Dict[str, object] = {
                "index": i,
                "parent": s.parent,
                "total_cost": s.total_cost,
                "player": [s.player.x, s.player.y],
                "blocks": [[b.x, b.y] for b in s.blocks],
            }
            if s.last_push is not None:
                rec["push"] = {
                    "block": [s.last_push.block.x, s.last_push.block.y],
                    "direction": s.last_push.direction.name,
                }
            records.append(rec)
        return records
