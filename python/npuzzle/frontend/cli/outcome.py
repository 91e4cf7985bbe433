"""Shared wording for solve outcomes, used by every CLI frontend."""

from __future__ import annotations

from npuzzle.errors import (
    DepthExceeded,
    InvariantViolation,
    NoSolutionFound,
    SolverError,
    UnsolvableBoard,
)


def failure_title(error: SolverError) -> str:
    """Short heading that tells the failure kinds apart."""
    if isinstance(error, UnsolvableBoard):
        return "No solution"
    if isinstance(error, DepthExceeded):
        return "Depth limit exceeded"
    if isinstance(error, NoSolutionFound):
        return "Search exhausted"
    if isinstance(error, InvariantViolation):
        return "Invalid board"
    return "Solver error"


def failure_message(error: SolverError) -> str:
    return f"{failure_title(error)}: {error}"
