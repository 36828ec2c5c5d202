"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class InvalidBoardError(ValueError):
    """A grid or path breaks the board invariants.

    This is a caller contract violation (not a permutation of 0..8, or two
    path steps that are not one slide apart). It is never raised for an
    unsolvable board; that outcome is reported as ``None``.
    """
