"""Board model for the 8-puzzle."""

from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from enum import StrEnum
from functools import cached_property
from typing import Iterable, NamedTuple, Sequence

from eightpuzzle.errors import InvalidBoardError

SIZE = 3


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Position(NamedTuple):
    row: int
    col: int


# Offset from the blank to the tile that slides into it.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_TILE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

# Blank moves in expansion order: up, left, right, down.
_BLANK_STEPS: tuple[tuple[int, int], ...] = ((-1, 0), (0, -1), (0, 1), (1, 0))

_SEPARATORS = re.compile(r"[^0-9]+")


@dataclass(frozen=True)
class Board:
    """Immutable 3×3 puzzle board.

    Tiles are stored row-major as a tuple of row tuples; 0 is the blank.
    Every transformation returns a new board, so boards are safe to use
    as dict/set keys and to share between search paths.
    """

    tiles: tuple[tuple[int, ...], ...]
    blank_pos: Position

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        values = [_as_tile(v) for v in flat]
        _validate(values)
        tiles = tuple(
            tuple(values[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)
        )
        blank = values.index(0)
        return cls(tiles=tiles, blank_pos=Position(*divmod(blank, SIZE)))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> Board:
        """Create a board from a 3×3 grid of ints."""
        rows = [list(row) for row in rows]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise InvalidBoardError(
                f"Expected a {SIZE}×{SIZE} grid, got row lengths "
                f"{[len(row) for row in rows]}."
            )
        return cls.from_flat([v for row in rows for v in row])

    @classmethod
    def parse(cls, text: str) -> Board:
        """Parse a board from text.

        ``"867254301"`` reads one tile per character; anything containing
        separators (``"8 6 7 2 5 4 3 0 1"``, ``"8,6,7/2,5,4/3,0,1"``) is
        split on them instead.
        """
        text = text.strip()
        if _SEPARATORS.search(text):
            parts = [p for p in _SEPARATORS.split(text) if p]
        else:
            parts = list(text)
        return cls.from_flat([int(p) for p in parts])

    # -- queries --------------------------------------------------------------

    @cached_property
    def key(self) -> str:
        """Nine-digit row-major encoding, e.g. ``"123456780"``."""
        return "".join(str(v) for row in self.tiles for v in row)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def to_rows(self) -> list[list[int]]:
        return [list(row) for row in self.tiles]

    def to_flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def locate(self, value: int) -> Position:
        """Return the cell holding *value*."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == value:
                    return Position(r, c)
        raise InvalidBoardError(f"Tile {value} is not on the board.")

    def is_solved(self) -> bool:
        return self == GOAL

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.tiles[row][col] == GOAL.tiles[row][col]

    # -- transformations ------------------------------------------------------

    def neighbors(self) -> list[Board]:
        """Boards one slide away, blank moving up, left, right, down."""
        br, bc = self.blank_pos
        out: list[Board] = []
        for dr, dc in _BLANK_STEPS:
            nr, nc = br + dr, bc + dc
            if 0 <= nr < SIZE and 0 <= nc < SIZE:
                out.append(self._swap(Position(nr, nc)))
        return out

    def slide(self, direction: Direction) -> Board | None:
        """Slide a tile in *direction* into the blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns ``None`` if no tile can move that way.
        """
        br, bc = self.blank_pos
        dr, dc = _TILE_OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < SIZE and 0 <= tc < SIZE):
            return None
        return self._swap(Position(tr, tc))

    def direction_to(self, other: Board) -> Direction | None:
        """Return the slide that turns this board into *other*, if any."""
        for direction in Direction:
            if self.slide(direction) == other:
                return direction
        return None

    def _swap(self, target: Position) -> Board:
        br, bc = self.blank_pos
        tr, tc = target
        rows = [list(row) for row in self.tiles]
        rows[br][bc], rows[tr][tc] = rows[tr][tc], rows[br][bc]
        return Board(tiles=tuple(tuple(row) for row in rows), blank_pos=target)

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.tiles)


def _as_tile(value: object) -> int:
    # bool is an int subclass but never a tile
    if isinstance(value, bool):
        raise InvalidBoardError(f"Tile {value!r} is not an integer.")
    try:
        return operator.index(value)
    except TypeError as exc:
        raise InvalidBoardError(f"Tile {value!r} is not an integer.") from exc


def _validate(values: list[int]) -> None:
    if len(values) != SIZE * SIZE:
        raise InvalidBoardError(
            f"Expected {SIZE * SIZE} tiles for a {SIZE}×{SIZE} board, "
            f"got {len(values)}."
        )
    if sorted(values) != list(range(SIZE * SIZE)):
        raise InvalidBoardError(
            f"Tiles must be a permutation of 0..{SIZE * SIZE - 1}, got {values}."
        )


GOAL = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 0])


# -- functional aliases -------------------------------------------------------


def encode(board: Board) -> str:
    return board.key


def locate(board: Board, value: int) -> Position:
    return board.locate(value)


def neighbors_of(board: Board) -> list[Board]:
    return board.neighbors()
