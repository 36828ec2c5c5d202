"""Shared fixtures: JSON board fixtures and a breadth-first distance oracle."""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

GOAL_FLAT = (1, 2, 3, 4, 5, 6, 7, 8, 0)

# Cells adjacent to each flat index on the 3×3 grid.
_ADJ = {
    0: (1, 3),
    1: (0, 2, 4),
    2: (1, 5),
    3: (0, 4, 6),
    4: (1, 3, 5, 7),
    5: (2, 4, 8),
    6: (3, 7),
    7: (4, 6, 8),
    8: (5, 7),
}


def load_fixture(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def fixture_id(board_data: dict) -> str:
    return board_data["id"]


def _bfs_from_goal() -> dict[tuple[int, ...], int]:
    """Move count to the goal for every reachable board, by plain BFS."""
    dist = {GOAL_FLAT: 0}
    queue = deque([GOAL_FLAT])
    while queue:
        s = queue.popleft()
        z = s.index(0)
        for j in _ADJ[z]:
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            t = tuple(lst)
            if t not in dist:
                dist[t] = dist[s] + 1
                queue.append(t)
    return dist


@pytest.fixture(scope="session")
def oracle() -> dict[tuple[int, ...], int]:
    return _bfs_from_goal()
