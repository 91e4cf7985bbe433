"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib ``print`` and ANSI codes to show each step of a solution.
"""

from __future__ import annotations

import sys

from npuzzle.config import SolverConfig
from npuzzle.engine.gamesolver import Solution, Solver
from npuzzle.errors import SolverError
from npuzzle.frontend.cli.outcome import failure_message
from npuzzle.models.board import Board


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_solution(solution: Solution) -> None:
    size = solution.initial.size
    print(f"  {_C}=== Solution ({size}×{size}) ==={_R}")
    for step in solution.steps:
        print()
        print(f"  Moves: {step.moves}")
        print(_render_board(step.board))
    print()
    if solution.length == 0:
        print(f"  {_G}Already solved!{_R}")
    else:
        path = " ".join(d.value for d in solution.directions)
        print(f"  {_G}Solved in {solution.length} moves.{_R}")
        print(f"  {_DIM}Blank path: {path}{_R}")


def _show_failure(board: Board, error: SolverError) -> None:
    print(_render_board(board))
    print()
    print(f"  {_Y}{failure_message(error)}{_R}")


# -- public entry point -------------------------------------------------------


def run(board: Board, config: SolverConfig) -> None:
    """Solve *board* and print every intermediate step."""
    try:
        solution = Solver.solve(board, config)
    except SolverError as exc:
        _show_failure(board, exc)
    else:
        _show_solution(solution)
    sys.stdout.flush()
