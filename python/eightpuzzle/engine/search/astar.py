"""Best-first A* search over 8-puzzle boards."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable

from eightpuzzle.engine.heuristic import manhattan
from eightpuzzle.models.board import Board

logger = logging.getLogger(__name__)


@dataclass
class SearchNode:
    """Frontier entry carrying the full path from the start board."""

    state: Board
    g: int
    f: int
    path: tuple[Board, ...]


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    discarded: int = 0
    peak_frontier: int = 0


@dataclass
class SearchResult:
    path: tuple[Board, ...] | None
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def moves(self) -> int | None:
        return None if self.path is None else len(self.path) - 1


def a_star(
    start: Board,
    heuristic: Callable[[Board], int] = manhattan,
) -> SearchResult:
    """Find a shortest path from *start* to the goal.

    The frontier is ordered by ``(f, g, seq)``: lowest f first, then the
    shallower node, then the earliest pushed. Visited boards are filtered
    when popped, never when pushed, so a board may sit in the frontier
    several times but is expanded at most once.

    Does not check solvability; for an unreachable goal the whole parity
    class is exhausted and the result has ``path=None``.
    """
    stats = SearchStats()
    seq = itertools.count()

    h0 = heuristic(start)
    frontier: list[tuple[int, int, int, SearchNode]] = []
    heapq.heappush(
        frontier, (h0, 0, next(seq), SearchNode(start, 0, h0, (start,)))
    )
    visited: set[str] = set()

    while frontier:
        stats.peak_frontier = max(stats.peak_frontier, len(frontier))
        _, _, _, node = heapq.heappop(frontier)

        if node.state.key in visited:
            stats.discarded += 1
            continue

        if node.state.is_solved():
            logger.debug(
                "goal reached in %d moves (expanded=%d generated=%d)",
                node.g, stats.expanded, stats.generated,
            )
            return SearchResult(path=node.path, stats=stats)

        visited.add(node.state.key)
        stats.expanded += 1

        g = node.g + 1
        for nxt in node.state.neighbors():
            f = g + heuristic(nxt)
            heapq.heappush(
                frontier,
                (f, g, next(seq), SearchNode(nxt, g, f, node.path + (nxt,))),
            )
            stats.generated += 1

    logger.warning(
        "frontier exhausted after %d expansions from %s", stats.expanded, start.key
    )
    return SearchResult(path=None, stats=stats)
