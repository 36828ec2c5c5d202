"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import random

from eightpuzzle.models.board import GOAL, Board

DEFAULT_SCRAMBLE_STEPS = 100


class BoardGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def scramble(
        board: Board, steps: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *steps* random slides, never undoing the last one."""
        rng = rng or random.Random()
        prev: Board | None = None

        for _ in range(steps):
            neighbors = board.neighbors()
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            prev, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        steps: int = DEFAULT_SCRAMBLE_STEPS, seed: int | None = None
    ) -> Board:
        """Return a random *solvable* board that is not already solved."""
        if steps < 1:
            raise ValueError(f"steps must be positive, got {steps}")
        rng = random.Random(seed)
        while True:
            board = BoardGenerator.scramble(GOAL, steps, rng)
            # An even number of steps can wander back to the goal
            if not board.is_solved():
                return board
