"""8-puzzle solver command line.

Usage::

    eightpuzzle solve 867254301          # every step, rendered
    eightpuzzle solve "1 2 3 4 5 6 7 0 8" --moves
    eightpuzzle random --seed 7 --solve
    eightpuzzle check 213456780
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from eightpuzzle.engine.generator import DEFAULT_SCRAMBLE_STEPS, BoardGenerator
from eightpuzzle.engine.puzzlesolver import Solver
from eightpuzzle.engine.solvability import count_inversions
from eightpuzzle.errors import InvalidBoardError
from eightpuzzle.frontend import render_board, render_moves, render_solution
from eightpuzzle.models.board import Board

console = Console()

app = typer.Typer(add_completion=False, help="Optimal 8-puzzle solver.")


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _parse(text: str) -> Board:
    try:
        return Board.parse(text)
    except InvalidBoardError as exc:
        console.print(f"[red]Invalid board:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _solve_and_print(board: Board, moves_only: bool) -> None:
    path = Solver.solve(board)
    if path is None:
        console.print("[red]Board is unsolvable.[/red]")
        raise typer.Exit(code=1)

    moves = Solver.moves(path)
    if moves_only:
        console.print(render_moves(moves))
    elif not moves:
        console.print(render_board(board))
        console.print("[green]Already solved![/green]")
    else:
        console.print(render_solution(path, moves))


# -- commands -----------------------------------------------------------------


@app.command()
def solve(
    board: str = typer.Argument(..., help='Tiles row-major, e.g. "867254301".'),
    moves: bool = typer.Option(
        False, "-m", "--moves", help="Print only the move list."
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Log search statistics."
    ),
) -> None:
    """Solve BOARD optimally and show every step."""
    _configure_logging(verbose)
    _solve_and_print(_parse(board), moves)


@app.command("random")
def random_board(
    steps: int = typer.Option(
        DEFAULT_SCRAMBLE_STEPS, "-n", "--steps", min=1,
        help="Random slides applied to the goal board.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    solve_it: bool = typer.Option(False, "--solve", help="Solve it as well."),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Log search statistics."
    ),
) -> None:
    """Print a random solvable board."""
    _configure_logging(verbose)
    board = BoardGenerator.generate(steps=steps, seed=seed)
    console.print(board.key)
    if solve_it:
        _solve_and_print(board, moves_only=False)
    else:
        console.print(render_board(board))


@app.command()
def check(
    board: str = typer.Argument(..., help='Tiles row-major, e.g. "213456780".'),
) -> None:
    """Report the inversion count and whether BOARD is solvable."""
    parsed = _parse(board)
    inversions = count_inversions(parsed)
    if Solver.is_solvable(parsed):
        console.print(f"{inversions} inversions: [green]solvable[/green]")
    else:
        console.print(f"{inversions} inversions: [red]unsolvable[/red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
