"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from npuzzle.config import DEFAULT_SCRAMBLE_STEPS
from npuzzle.models.board import Board, Direction

_MAX_ATTEMPTS = 100

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GameGenerator:
    """Creates solvable puzzles by walking the blank away from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def scramble(
        board: Board, steps: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *steps* random legal blank moves.

        The walk never immediately undoes its previous move unless that is
        the only legal move.
        """
        rng = rng or random.Random()
        prev: Direction | None = None

        for _ in range(steps):
            moves = board.legal_moves()
            if prev is not None and len(moves) > 1:
                moves.remove(_OPPOSITE[prev])
            prev = rng.choice(moves)
            board = board.apply_move(prev)
        return board

    @staticmethod
    def generate(
        size: int,
        steps: int = DEFAULT_SCRAMBLE_STEPS,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable* board of the given size."""
        if size < 2 or steps < 1:
            raise ValueError("Need size >= 2 and steps >= 1 to scramble a board.")
        rng = rng or random.Random()
        for _ in range(_MAX_ATTEMPTS):
            board = GameGenerator.scramble(GameGenerator.solved(size), steps, rng)
            # Ensure the board is not already solved
            if not board.is_goal():
                return board
        # A 2×2 walk has no choices after its first move and returns to the
        # goal every 12 steps.
        raise ValueError(
            f"{steps} random moves keep returning a {size}×{size} board to the goal."
        )
