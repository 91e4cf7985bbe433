"""Error taxonomy for the solver.

Every failure the engine can report is a ``SolverError``; the CLI catches
them at the top level and prints a distinct message for each.
"""

from __future__ import annotations


class SolverError(Exception):
    """Base class for all solver outcomes that are not a solution."""


class UnsolvableBoard(SolverError):
    """The board's permutation parity makes the goal unreachable."""

    def __init__(self, message: str = "Board has no solution.") -> None:
        super().__init__(message)


class DepthExceeded(SolverError):
    """A popped node was deeper than the configured move limit."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Search exceeded the move-depth limit of {max_depth}.")


class NoSolutionFound(SolverError):
    """The frontier emptied without reaching the goal."""

    def __init__(
        self, message: str = "Search exhausted every reachable board."
    ) -> None:
        super().__init__(message)


class InvariantViolation(SolverError, ValueError):
    """A board breaks the tile invariant (missing blank, duplicates, ...)."""
