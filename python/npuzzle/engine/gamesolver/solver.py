"""Sliding puzzle solver."""

from __future__ import annotations

import logging

from npuzzle.config import SolverConfig
from npuzzle.engine.gamesolver.path import Step
from npuzzle.engine.gamesolver.search import Solution, search
from npuzzle.engine.solvability import is_solvable
from npuzzle.errors import UnsolvableBoard
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board, config: SolverConfig | None = None) -> Solution:
        """Return the path from *board* to the goal.

        Raises ``UnsolvableBoard`` without searching when the parity check
        fails; search failures (``DepthExceeded``, ``NoSolutionFound``)
        propagate unchanged.
        """
        config = config or SolverConfig()

        if board.is_goal():
            return Solution(steps=[Step(moves=0, board=board)])

        if not Solver.is_solvable(board):
            logger.info("Board failed the parity check; skipping search")
            raise UnsolvableBoard()

        solution = search(board, max_depth=config.max_depth)
        logger.info(
            f"Solved {board.size}x{board.size} board in {solution.length} moves "
            f"({solution.expanded} nodes expanded)"
        )
        return solution

    @staticmethod
    def hint(board: Board, config: SolverConfig | None = None) -> Direction | None:
        """Return the first blank move of a solution, or ``None`` if solved."""
        if board.is_goal():
            return None
        return Solver.solve(board, config).directions[0]

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return is_solvable(board)
