from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set, Hashable
import logging
import time

from pushblock_core.state import State
from pushblock_core.moves import successors
from pushblock_core.equivalence import EQUIVALENCE_MODES
from .priority_queue import PriorityQueue
from .transposition import Transposition
from .arena import StateArena

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 10000


class SearchStatus(Enum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"   # frontier ran empty: no solution
    ABORTED = "aborted"       # node or time limit hit


@dataclass
class SearchResult:
    status: SearchStatus
    total_cost: Optional[int] = None
    trace: List[State] = field(default_factory=list)
    expanded: int = 0
    generated: int = 0
    runtime: float = 0.0
    arena: Optional[StateArena] = field(default=None, repr=False)

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def pushes(self) -> int:
        return len(self.trace) - 1 if self.trace else -1

    def as_dict(self) -> Dict[str, object]:
        return {
            "status": self.status.value,
            "success": self.solved,
            "total_cost": self.total_cost if self.total_cost is not None else -1,
            "pushes": self.pushes,
            "expanded": self.expanded,
            "generated": self.generated,
            "runtime": self.runtime,
        }


def uniform_cost_search(
    start: State,
    equivalence: str = "component",
    node_limit: Optional[int] = None,
    time_limit_s: Optional[float] = None,
) -> SearchResult:
    """Cheapest-first search over push transitions.

    Cost of a push = steps walked to the pushing position + 1. The frontier
    pops the lowest total cost first; ties go to the earliest discovered
    state.

    equivalence="component": a successor is dropped if an equivalent state
    (same blocks, player in the same free-space component) was ever inserted
    into the frontier or expanded.
    equivalence="exact": states match only on identical player cells and a
    cheaper path to a frontier state replaces the old entry; this is plain
    Dijkstra and returns the minimum total cost.

    The search may stop between two pops when `node_limit` expansions or
    `time_limit_s` seconds are used up; the result is then ABORTED.
    """
    if equivalence not in EQUIVALENCE_MODES:
        raise ValueError(f"unknown equivalence mode: {equivalence}")
    exact = equivalence == "exact"

    t0 = time.time()
    arena = StateArena()
    trans = Transposition(equivalence)
    openq = PriorityQueue()
    closed: Set[Hashable] = set()

    start_idx = arena.add(start)
    trans.record(trans.key(start), start.total_cost)
    openq.push(start.total_cost, start_idx)

    expanded = 0
    generated = 0
    found: Optional[State] = None
    status = SearchStatus.EXHAUSTED

    while len(openq) > 0:
        if time_limit_s is not None and (time.time() - t0) > time_limit_s:
            status = SearchStatus.ABORTED
            break
        if node_limit is not None and expanded >= node_limit:
            status = SearchStatus.ABORTED
            break

        g, idx = openq.pop()
        s = arena[idx]
        if exact:
            key = trans.key(s)
            # stale entry superseded by a cheaper path
            if key in closed or g > trans.get(key):
                continue
            closed.add(key)

        expanded += 1
        if expanded % PROGRESS_EVERY == 0:
            logger.debug("expanded=%d frontier=%d cost=%d", expanded, len(openq), g)

        if s.is_cleared():
            found = s
            status = SearchStatus.SOLVED
            break

        for ns in successors(s, parent=idx):
            generated += 1
            key = trans.key(ns)
            if exact:
                if key in closed or trans.seen_better(key, ns.total_cost):
                    continue
            else:
                if trans.seen(key):
                    continue
                trans.record(key, ns.total_cost)
            openq.push(ns.total_cost, arena.add(ns))

    runtime = time.time() - t0
    if found is None:
        if status is SearchStatus.EXHAUSTED:
            logger.info("failed to solve (expanded=%d)", expanded)
        else:
            logger.info("search aborted (expanded=%d, %.2fs)", expanded, runtime)
        return SearchResult(status=status, expanded=expanded, generated=generated,
                            runtime=runtime, arena=arena)

    logger.info("solved: cost=%d expanded=%d %.2fs", found.total_cost, expanded, runtime)
    return SearchResult(
        status=status,
        total_cost=found.total_cost,
        trace=arena.trace(found),
        expanded=expanded,
        generated=generated,
        runtime=runtime,
        arena=arena,
    )
