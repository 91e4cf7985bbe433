"""Sliding puzzle solver.

Usage::

    npuzzle                                  # solve the built-in demo board
    npuzzle -b "1 2 3;4 5 6;0 7 8"           # solve a board given inline
    npuzzle --file board.json -f vanilla     # plain-text output
    npuzzle --scramble 20 -s 4 --seed 7      # solve a generated 4×4 board
    npuzzle --max-depth 40 -v                # tighter bound, debug logging
"""

import importlib
import logging
import random
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from npuzzle.config import (
    DEFAULT_MAX_DEPTH,
    DEMO_BOARD,
    MAX_SIZE,
    MIN_SIZE,
    SolverConfig,
)
from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.errors import InvariantViolation
from npuzzle.frontend.cli.board_input import BoardFormatError, load_board, parse_board
from npuzzle.frontend.cli.outcome import failure_message
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _read_board(
    board_text: Optional[str],
    file: Optional[Path],
    scramble: Optional[int],
    size: int,
    seed: Optional[int],
) -> Board:
    given = [opt for opt in (board_text, file, scramble) if opt is not None]
    if len(given) > 1:
        raise typer.BadParameter("Use only one of --board, --file, --scramble.")

    try:
        if board_text is not None:
            return parse_board(board_text)
        if file is not None:
            return load_board(file)
    except BoardFormatError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if scramble is not None:
        try:
            board = GameGenerator.generate(size, scramble, random.Random(seed))
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        logger.info(f"Generated {size}x{size} board with {scramble} random moves")
        return board

    return Board.from_rows(DEMO_BOARD)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    board_text: Optional[str] = typer.Option(
        None, "-b", "--board",
        help='Board rows separated by ";" and tiles by spaces or commas.',
    ),
    file: Optional[Path] = typer.Option(
        None, "--file",
        exists=True, dir_okay=False, readable=True,
        help="Read the board from a text grid or a .json array of rows.",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble",
        min=1,
        help="Solve a board scrambled by this many random moves.",
    ),
    size: int = typer.Option(
        4, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size for --scramble ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --scramble.",
    ),
    max_depth: int = typer.Option(
        DEFAULT_MAX_DEPTH, "--max-depth",
        min=0,
        help="Abort the search once a node deeper than this is popped.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Output style.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Show search debug logging.",
    ),
) -> None:
    """Solve a sliding puzzle with depth-bounded A* search."""
    _configure_logging(verbose)

    try:
        board = _read_board(board_text, file, scramble, size, seed)
    except InvariantViolation as exc:
        typer.echo(failure_message(exc))
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(board, SolverConfig(max_depth=max_depth))


if __name__ == "__main__":
    app()
