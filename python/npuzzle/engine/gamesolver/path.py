"""Turns a goal node back into the ordered list of boards that reached it."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from npuzzle.models.board import Board

if TYPE_CHECKING:
    from npuzzle.engine.gamesolver.search import SearchNode


@dataclass(frozen=True)
class Step:
    """A board snapshot tagged with how many moves it took to reach it."""

    moves: int
    board: Board


def reconstruct(arena: Sequence[SearchNode], terminal: int) -> list[Step]:
    """Walk parent indices from *terminal* back to the root.

    Each node lands at the slot matching its move count, so index 0 holds
    the initial board and the last index holds the terminal one.
    """
    node = arena[terminal]
    steps: list[Step | None] = [None] * (node.moves + 1)
    while True:
        steps[node.moves] = Step(moves=node.moves, board=node.board)
        if node.parent is None:
            break
        node = arena[node.parent]
    return steps  # type: ignore[return-value]
