from eightpuzzle.frontend.render import render_board, render_moves, render_solution

__all__ = ["render_board", "render_moves", "render_solution"]
