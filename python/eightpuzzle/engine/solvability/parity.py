"""Parity test deciding whether a board can reach the goal."""

from __future__ import annotations

from eightpuzzle.models.board import Board


def count_inversions(board: Board) -> int:
    """Count out-of-order pairs among the non-blank tiles, row-major."""
    flat = [v for row in board.tiles for v in row if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the goal state.

    On an odd-width board a slide never changes inversion parity, and the
    goal has none, so exactly the even-parity boards are reachable.
    """
    return count_inversions(board) % 2 == 0
