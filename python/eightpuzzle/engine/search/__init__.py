from eightpuzzle.engine.search.astar import (
    SearchNode,
    SearchResult,
    SearchStats,
    a_star,
)

__all__ = ["SearchNode", "SearchResult", "SearchStats", "a_star"]
