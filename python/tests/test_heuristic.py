from __future__ import annotations

import random

from eightpuzzle.engine.heuristic import heuristic, manhattan
from eightpuzzle.models import GOAL, Board


def test_zero_at_goal() -> None:
    assert manhattan(GOAL) == 0


def test_one_slide_away() -> None:
    assert manhattan(Board.parse("123456708")) == 1


def test_known_value() -> None:
    # 8:3 6:2 7:4 2:2 5:0 4:2 3:4 1:4
    assert manhattan(Board.parse("867254301")) == 21


def test_alias() -> None:
    assert heuristic is manhattan


def test_properties_over_state_space(oracle: dict) -> None:
    """Admissible, consistent, and zero only at the goal."""
    rng = random.Random(1234)
    for flat in rng.sample(sorted(oracle), 3000):
        board = Board.from_flat(flat)
        h = manhattan(board)
        assert h <= oracle[flat]
        assert (h == 0) == board.is_solved()
        for nxt in board.neighbors():
            assert abs(h - manhattan(nxt)) == 1
