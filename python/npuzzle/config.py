"""Solver configuration and shared defaults."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 100

# Board sizes accepted by the CLI generator.
MIN_SIZE = 2
MAX_SIZE = 8

DEFAULT_SCRAMBLE_STEPS = 20

# Goal board with 13, 14, 15 rotated. Used when no board is given.
DEMO_BOARD: tuple[tuple[int, ...], ...] = (
    (1, 2, 3, 4),
    (5, 6, 7, 8),
    (9, 10, 11, 12),
    (14, 15, 13, 0),
)


@dataclass(frozen=True)
class SolverConfig:
    """Tunables for a single solve call."""

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}.")
