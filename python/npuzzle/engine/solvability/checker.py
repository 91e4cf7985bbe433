"""Parity test deciding whether a board can reach the goal."""

from __future__ import annotations

from npuzzle.models.board import Board


def count_inversions(board: Board) -> int:
    """Number of non-blank tile pairs that appear out of goal order."""
    flat = [v for v in board.flat() if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the goal state.

    Odd widths need an even inversion count.  Even widths need the blank's
    row (counted from the bottom, starting at 1) and the inversion count
    to have opposite parity.
    """
    n = board.size
    inversions = count_inversions(board)
    if n % 2 == 1:
        return inversions % 2 == 0
    blank_row, _ = board.locate_blank()
    blank_row_from_bottom = n - blank_row
    return blank_row_from_bottom % 2 != inversions % 2
