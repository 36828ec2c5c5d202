from __future__ import annotations

import logging

from eightpuzzle.engine.heuristic import manhattan
from eightpuzzle.engine.puzzlesolver import Solver
from eightpuzzle.engine.search import SearchResult, a_star
from eightpuzzle.models import GOAL, Board


def test_goal_start_expands_nothing() -> None:
    result = a_star(GOAL)
    assert result.path == (GOAL,)
    assert result.moves == 0
    assert result.stats.expanded == 0
    assert result.stats.generated == 0


def test_one_move() -> None:
    start = Board.parse("123456708")
    result = a_star(start)
    assert result.found
    assert result.path == (start, GOAL)
    assert result.stats.expanded == 1
    # blank at bottom-middle has three neighbors
    assert result.stats.generated == 3


def test_two_moves_exact_path() -> None:
    start = Board.parse("123456078")
    result = a_star(start)
    assert [b.key for b in result.path] == ["123456078", "123456708", "123456780"]


def test_hardest_board_path_is_pinned() -> None:
    path = Solver.solve(Board.parse("867254301"))
    moves = " ".join(m.value for m in Solver.moves(path))
    assert moves == (
        "right down left up left down down right up right up left left down "
        "down right right up up left left down right down right up up left "
        "down left up"
    )


def test_smaller_g_breaks_f_ties() -> None:
    """Two 6-move optima: blank right-first or down-first around the 2x2 corner.

    The lowered estimates (still admissible) make the down route reach the
    f=6 layer one step deeper. Expanding shallower nodes first still lets
    the right route win the race to the goal.
    """
    overrides = {"123468705": 4, "123485760": 3}

    def lowered(board: Board) -> int:
        return overrides.get(board.key, manhattan(board))

    result = a_star(Board.parse("123408765"), heuristic=lowered)
    assert [b.key for b in result.path] == [
        "123408765",
        "123480765",
        "123485760",
        "123485706",
        "123405786",
        "123450786",
        "123456780",
    ]


def test_corner_rotation_is_six_moves(oracle: dict) -> None:
    start = Board.parse("123408765")
    assert manhattan(start) == oracle[tuple(start.to_flat())] == 6
    assert a_star(start).moves == 6


def test_duplicates_are_discarded_on_pop() -> None:
    result = a_star(Board.parse("867254301"))
    assert result.moves == 31
    assert result.stats.discarded > 0
    assert result.stats.generated >= result.stats.expanded
    assert result.stats.peak_frontier > 0


def test_repeatable() -> None:
    start = Board.parse("413726580")
    assert a_star(start).path == a_star(start).path


def test_zero_heuristic_still_optimal(oracle: dict) -> None:
    start = Board.parse("413726580")
    result = a_star(start, heuristic=lambda board: 0)
    assert result.moves == oracle[tuple(start.to_flat())]


def test_found_logs_statistics(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="eightpuzzle.engine.search.astar"):
        a_star(Board.parse("123456708"))
    assert "goal reached in 1 moves" in caplog.text


def test_search_result_defaults() -> None:
    result = SearchResult(path=None)
    assert not result.found
    assert result.moves is None
    assert result.stats.expanded == 0
