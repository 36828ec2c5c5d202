"""8-puzzle solver."""

from __future__ import annotations

import logging
from typing import Sequence

from eightpuzzle.engine.search import a_star
from eightpuzzle.engine.solvability import is_solvable
from eightpuzzle.errors import InvalidBoardError
from eightpuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board) -> list[Board] | None:
        """Return the boards of a shortest solution, *board* and goal included.

        Returns ``None`` if *board* is unsolvable. A solved board gives a
        one-element path.
        """
        if not Solver.is_solvable(board):
            logger.debug("rejecting %s: odd inversion parity", board.key)
            return None

        if board.is_solved():
            return [board]

        result = a_star(board)
        if result.path is None:
            return None
        logger.debug(
            "solved %s in %d moves (expanded=%d generated=%d discarded=%d)",
            board.key,
            result.moves,
            result.stats.expanded,
            result.stats.generated,
            result.stats.discarded,
        )
        return list(result.path)

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return is_solvable(board)

    @staticmethod
    def moves(path: Sequence[Board]) -> list[Direction]:
        """Translate a board path into the tile moves that replay it."""
        out: list[Direction] = []
        for i, (prev, nxt) in enumerate(zip(path, path[1:])):
            direction = prev.direction_to(nxt)
            if direction is None:
                raise InvalidBoardError(
                    f"Steps {i} and {i + 1} are not one slide apart: "
                    f"{prev.key} -> {nxt.key}"
                )
            out.append(direction)
        return out

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the first move of an optimal solution, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None

        path = Solver.solve(board)
        if not path:
            return None
        return Solver.moves(path[:2])[0]
