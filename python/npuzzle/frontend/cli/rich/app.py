"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.config import SolverConfig
from npuzzle.engine.gamesolver import Solution, Solver
from npuzzle.errors import SolverError
from npuzzle.frontend.cli.outcome import failure_message
from npuzzle.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_step(moves: int, board: Board) -> Group:
    return Group(Text(f"Moves: {moves}", style="cyan"), _render_board(board))


# -- screens ------------------------------------------------------------------


def _show_solution(solution: Solution) -> None:
    size = solution.initial.size
    console.rule(f"[bold cyan]Solution ({size}×{size})[/bold cyan]")
    for step in solution.steps:
        console.print(_render_step(step.moves, step.board))

    if solution.length == 0:
        summary = "[green]Already solved![/green]"
    else:
        path = " ".join(d.value for d in solution.directions)
        summary = (
            f"[bold green]Solved in {solution.length} moves.[/bold green]\n"
            f"[dim]Blank path: {path}[/dim]\n"
            f"[dim]{solution.expanded} nodes expanded, "
            f"{solution.generated} generated[/dim]"
        )
    console.print(Panel(summary, box=rich.box.ROUNDED, expand=False))


def _show_failure(board: Board, error: SolverError) -> None:
    console.print(_render_board(board))
    console.print(
        Panel(
            f"[yellow]{failure_message(error)}[/yellow]",
            box=rich.box.ROUNDED,
            expand=False,
        )
    )


# -- public entry point -------------------------------------------------------


def run(board: Board, config: SolverConfig) -> None:
    """Solve *board* and render every intermediate step."""
    try:
        with console.status("Searching…"):
            solution = Solver.solve(board, config)
    except SolverError as exc:
        _show_failure(board, exc)
    else:
        _show_solution(solution)
