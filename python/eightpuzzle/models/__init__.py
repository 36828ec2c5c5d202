from eightpuzzle.models.board import (
    GOAL,
    SIZE,
    Board,
    Direction,
    Position,
    encode,
    locate,
    neighbors_of,
)

__all__ = [
    "GOAL",
    "SIZE",
    "Board",
    "Direction",
    "Position",
    "encode",
    "locate",
    "neighbors_of",
]
