"""Parses boards typed on the command line or stored in files.

Text grids put one row per line (or separate rows with ``;``) and split
cells on commas and/or whitespace::

    1 2 3
    4 5 6
    7 0 8

Files ending in ``.json`` hold a JSON array of rows instead.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

from npuzzle.models.board import Board

_ROW_SPLIT = re.compile(r"[;\n]")
_CELL_SPLIT = re.compile(r"[,\s]+")


class BoardFormatError(ValueError):
    """The input could not be read as a grid of integers."""


def parse_rows(text: str) -> list[list[int]]:
    """Split *text* into rows of ints without checking the board invariant."""
    rows: list[list[int]] = []
    for line in _ROW_SPLIT.split(text):
        cells = [cell for cell in _CELL_SPLIT.split(line.strip()) if cell]
        if not cells:
            continue
        try:
            rows.append([int(cell) for cell in cells])
        except ValueError as exc:
            raise BoardFormatError(f"Non-integer tile in row {line.strip()!r}.") from exc
    if not rows:
        raise BoardFormatError("No tiles found.")
    return rows


def parse_board(text: str) -> Board:
    """Parse a text grid into a validated ``Board``."""
    return Board.from_rows(parse_rows(text))


def load_board(path: Path) -> Board:
    """Read a board from a text grid or a ``.json`` array of rows."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise BoardFormatError(f"{path.name}: not a UTF-8 text file.") from exc
    if path.suffix.lower() != ".json":
        return parse_board(text)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise BoardFormatError(f"{path.name}: invalid JSON ({exc.msg}).") from exc
    if isinstance(data, dict):
        data = data.get("tiles")
    if not (
        isinstance(data, list)
        and data
        and all(isinstance(row, list) for row in data)
        and all(isinstance(v, int) for row in data for v in row)
    ):
        raise BoardFormatError(f"{path.name}: expected a JSON array of integer rows.")
    return Board.from_rows(data)
