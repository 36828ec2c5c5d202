"""Manhattan-distance heuristic."""

from __future__ import annotations

from eightpuzzle.models.board import GOAL, SIZE, Board, Position

# Goal cell of every tile, indexed by tile value.
_GOAL_POS: tuple[Position, ...] = tuple(
    GOAL.locate(v) for v in range(SIZE * SIZE)
)


def manhattan(board: Board) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored).

    Admissible and consistent: one slide moves one tile one step, so the
    value changes by exactly 1 per move and is 0 only at the goal.
    """
    dist = 0
    for r, row in enumerate(board.tiles):
        for c, tile in enumerate(row):
            if tile == 0:
                continue
            gr, gc = _GOAL_POS[tile]
            dist += abs(r - gr) + abs(c - gc)
    return dist


heuristic = manhattan
