"""Manhattan distance heuristic."""

from __future__ import annotations

from npuzzle.models.board import Board


def estimate(board: Board) -> int:
    """Sum of each non-blank tile's grid distance to its goal cell.

    Never overestimates the number of remaining moves and changes by
    exactly one per move, so it is safe to use as the A* estimate.
    """
    n = board.size
    distance = 0
    for r, row in enumerate(board.tiles):
        for c, val in enumerate(row):
            if val == 0:
                continue
            goal_row, goal_col = divmod(val - 1, n)
            distance += abs(goal_row - r) + abs(goal_col - c)
    return distance
