"""Depth-bounded A* search over sliding puzzle boards.

Nodes live in a per-call arena (a plain list) and point at their parent by
index.  The frontier is a heap of ``(score, sequence, index)`` tuples, so
nodes with equal scores come out in insertion order.  Boards are marked
visited when they are *enqueued*, and a visited board is never re-opened,
even if a cheaper route to it turns up later.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field

from npuzzle.config import DEFAULT_MAX_DEPTH
from npuzzle.engine.gamesolver.path import Step, reconstruct
from npuzzle.engine.heuristic import estimate
from npuzzle.errors import DepthExceeded, NoSolutionFound
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchNode:
    """One discovered board and the move count that reached it."""

    board: Board
    moves: int
    parent: int | None
    score: int


@dataclass
class Solution:
    """Ordered boards from the initial state to the goal."""

    steps: list[Step]
    expanded: int = 0
    generated: int = 0
    directions: list[Direction] = field(init=False)

    def __post_init__(self) -> None:
        self.directions = [
            _direction_between(a.board, b.board)
            for a, b in zip(self.steps, self.steps[1:])
        ]

    @property
    def length(self) -> int:
        """Number of moves from the initial board to the goal."""
        return len(self.steps) - 1

    @property
    def initial(self) -> Board:
        return self.steps[0].board

    @property
    def goal(self) -> Board:
        return self.steps[-1].board


def _direction_between(before: Board, after: Board) -> Direction:
    br, bc = before.locate_blank()
    ar, ac = after.locate_blank()
    for direction in Direction:
        if direction.delta == (ar - br, ac - bc):
            return direction
    raise ValueError("Consecutive boards are not one blank move apart.")


class AStarSearch:
    """State of one search: the node arena, the frontier and the visited keys.

    Build one per board and call :meth:`run` once; everything it holds is
    dropped along with the object.
    """

    def __init__(self, board: Board, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}.")
        self.board = board
        self.max_depth = max_depth
        self.arena: list[SearchNode] = []
        self.frontier: list[tuple[int, int, int]] = []
        self.visited: set[tuple[int, ...]] = set()
        self.expanded = 0
        self._sequence = itertools.count()

    def _enqueue(self, node: SearchNode) -> None:
        self.arena.append(node)
        heapq.heappush(
            self.frontier, (node.score, next(self._sequence), len(self.arena) - 1)
        )
        self.visited.add(node.board.canonical_key())

    def _expand(self, index: int) -> None:
        node = self.arena[index]
        self.expanded += 1
        for direction in node.board.legal_moves():
            successor = node.board.apply_move(direction)
            if successor.canonical_key() in self.visited:
                continue
            moves = node.moves + 1
            self._enqueue(
                SearchNode(
                    board=successor,
                    moves=moves,
                    parent=index,
                    score=moves + estimate(successor),
                )
            )

    def run(self) -> Solution:
        """Pop nodes until one is the goal; see :func:`search` for failures."""
        board = self.board
        self._enqueue(
            SearchNode(board=board, moves=0, parent=None, score=estimate(board))
        )
        logger.debug(
            f"Starting A* search: {board.size}x{board.size} board, "
            f"h={self.arena[0].score}, max_depth={self.max_depth}"
        )

        while self.frontier:
            _, _, index = heapq.heappop(self.frontier)
            node = self.arena[index]

            if node.moves > self.max_depth:
                logger.debug(
                    f"Depth limit hit at {node.moves} moves after "
                    f"{self.expanded} expansions"
                )
                raise DepthExceeded(self.max_depth)

            if node.board.is_goal():
                logger.debug(
                    f"Goal reached in {node.moves} moves: "
                    f"expanded={self.expanded}, generated={len(self.arena)}"
                )
                return Solution(
                    steps=reconstruct(self.arena, index),
                    expanded=self.expanded,
                    generated=len(self.arena),
                )

            self._expand(index)

        logger.debug(f"Frontier exhausted after {self.expanded} expansions")
        raise NoSolutionFound()


def search(board: Board, max_depth: int = DEFAULT_MAX_DEPTH) -> Solution:
    """Run A* from *board* and return the path to the goal.

    Raises ``DepthExceeded`` as soon as a popped node is deeper than
    *max_depth* (the whole search stops, not just that branch), and
    ``NoSolutionFound`` if every reachable board has been enqueued without
    hitting the goal.  No solvability check is made here.
    """
    return AStarSearch(board, max_depth).run()
