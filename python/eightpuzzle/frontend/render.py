"""Rich renderables for boards and solution paths."""

from __future__ import annotations

from typing import Sequence

import rich.box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from eightpuzzle.models.board import Board, Direction


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(len(board.tiles)):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def render_moves(moves: Sequence[Direction]) -> Text:
    text = Text()
    text.append(f"{len(moves)} moves: ", style="bold cyan")
    text.append(" ".join(m.value for m in moves))
    return text


def render_solution(path: Sequence[Board], moves: Sequence[Direction]) -> Group:
    """One panel per step, titled with the move that produced it."""
    panels: list[Panel] = []
    for i, board in enumerate(path):
        if i == 0:
            title = "[bold cyan]Start[/bold cyan]"
        else:
            title = f"[cyan]{i}/{len(moves)}[/cyan] [dim]({moves[i - 1].value})[/dim]"
        style = "bold green" if board.is_solved() else "cyan"
        panels.append(
            Panel.fit(render_board(board), title=title, border_style=style)
        )
    return Group(*panels, render_moves(moves))
