"""A* search engine and path reconstruction tests."""

from __future__ import annotations

import pytest

from npuzzle.engine.gamesolver import (
    AStarSearch,
    SearchNode,
    Solution,
    Step,
    reconstruct,
    search,
)
from npuzzle.engine.heuristic import estimate
from npuzzle.errors import DepthExceeded, NoSolutionFound
from npuzzle.models.board import Board, Direction


# -- helpers ------------------------------------------------------------------


def _assert_valid_path(initial: Board, solution: Solution) -> None:
    steps = solution.steps
    assert steps[0].board == initial
    assert steps[-1].board.is_goal()
    assert [s.moves for s in steps] == list(range(len(steps)))
    for before, after in zip(steps, steps[1:]):
        neighbours = [before.board.apply_move(d) for d in before.board.legal_moves()]
        assert after.board in neighbours
    assert len(solution.directions) == solution.length


# -- outcomes -----------------------------------------------------------------


def test_solved_board_returns_single_step() -> None:
    board = Board.solved(4)
    solution = search(board)
    assert solution.length == 0
    assert solution.steps == [Step(moves=0, board=board)]
    assert solution.directions == []


@pytest.mark.parametrize("direction", [Direction.UP, Direction.LEFT])
def test_one_move_scramble_solves_in_one(direction: Direction) -> None:
    board = Board.solved(4).apply_move(direction)
    solution = search(board)
    assert solution.length == 1
    _assert_valid_path(board, solution)


def test_two_move_scramble() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 5, 6], [0, 7, 8]])
    solution = search(board)
    assert solution.directions == [Direction.RIGHT, Direction.RIGHT]
    _assert_valid_path(board, solution)


def test_max_depth_zero_aborts() -> None:
    board = Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
    with pytest.raises(DepthExceeded) as excinfo:
        search(board, max_depth=0)
    assert excinfo.value.max_depth == 0


def test_max_depth_zero_accepts_solved_board() -> None:
    assert search(Board.solved(3), max_depth=0).length == 0


def test_depth_guard_runs_before_goal_test() -> None:
    # The goal sits at depth 2; it is popped but rejected by the guard.
    board = Board.from_rows([[1, 2, 3], [4, 5, 6], [0, 7, 8]])
    with pytest.raises(DepthExceeded):
        search(board, max_depth=1)
    assert search(board, max_depth=2).length == 2


def test_negative_max_depth_rejected() -> None:
    with pytest.raises(ValueError):
        search(Board.solved(3), max_depth=-1)


def test_unsolvable_board_exhausts_frontier() -> None:
    # search() itself skips the parity check; a 2×2 board has only twelve
    # reachable states, so the frontier drains quickly.
    board = Board.from_rows([[2, 1], [3, 0]])
    with pytest.raises(NoSolutionFound):
        search(board)


def test_results_are_deterministic() -> None:
    board = Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
    first = search(board)
    second = search(board)
    assert first.steps == second.steps
    assert first.expanded == second.expanded


def test_statistics() -> None:
    board = Board.from_rows([[0, 1, 3], [4, 2, 5], [7, 8, 6]])
    solution = search(board)
    assert solution.length >= 4
    assert solution.expanded >= solution.length
    assert solution.generated > solution.expanded
    _assert_valid_path(board, solution)


def test_search_does_not_mutate_input() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
    snapshot = board.tiles
    search(board)
    assert board.tiles == snapshot


# -- path reconstruction ------------------------------------------------------


def test_reconstruct_follows_parent_indices() -> None:
    root = Board.from_rows([[1, 2, 3], [4, 5, 6], [0, 7, 8]])
    middle = root.apply_move(Direction.RIGHT)
    goal = middle.apply_move(Direction.RIGHT)
    detour = root.apply_move(Direction.UP)
    arena = [
        SearchNode(board=root, moves=0, parent=None, score=2),
        SearchNode(board=detour, moves=1, parent=0, score=4),
        SearchNode(board=middle, moves=1, parent=0, score=2),
        SearchNode(board=goal, moves=2, parent=2, score=2),
    ]

    steps = reconstruct(arena, 3)

    assert steps == [
        Step(moves=0, board=root),
        Step(moves=1, board=middle),
        Step(moves=2, board=goal),
    ]


def test_reconstruct_root_only() -> None:
    board = Board.solved(2)
    arena = [SearchNode(board=board, moves=0, parent=None, score=0)]
    assert reconstruct(arena, 0) == [Step(moves=0, board=board)]


# -- frontier policy ----------------------------------------------------------

# Farthest 2×2 board from the goal: six moves away both ways round, and every
# board on either route scores exactly 6, so only the tie-break decides.
_ANTIPODE = [[0, 3], [2, 1]]
_CORNER = [[0, 1, 3], [4, 2, 5], [7, 8, 6]]


@pytest.mark.parametrize(
    ("rows", "length"),
    [
        (_ANTIPODE, 6),
        ([[0, 1], [3, 2]], 2),
        ([[1, 2, 3], [4, 5, 6], [0, 7, 8]], 2),
        ([[1, 2, 3], [4, 0, 6], [7, 5, 8]], 2),
        (_CORNER, 4),
    ],
    ids=["2x2-antipode", "2x2-two", "3x3-right-right", "3x3-down-right", "3x3-corner"],
)
def test_known_optimal_lengths(rows: list[list[int]], length: int) -> None:
    assert search(Board.from_rows(rows)).length == length


@pytest.mark.parametrize(
    "rows",
    [_ANTIPODE, _CORNER, [[1, 2, 3], [4, 5, 6], [0, 7, 8]]],
    ids=["2x2-antipode", "3x3-corner", "3x3-right-right"],
)
def test_scores_are_moves_plus_estimate(rows: list[list[int]]) -> None:
    engine = AStarSearch(Board.from_rows(rows))
    engine.run()

    root, *rest = engine.arena
    assert root.parent is None
    assert root.score == estimate(root.board)
    for node in rest:
        parent = engine.arena[node.parent]
        assert node.moves == parent.moves + 1
        assert node.score == node.moves + estimate(node.board)
        assert node.board in [
            parent.board.apply_move(d) for d in parent.board.legal_moves()
        ]


def test_equal_scores_pop_in_insertion_order() -> None:
    engine = AStarSearch(Board.from_rows(_ANTIPODE))
    solution = engine.run()

    # The down branch is enqueued first, so it wins every tie.
    assert solution.directions == [
        Direction.DOWN,
        Direction.RIGHT,
        Direction.UP,
        Direction.LEFT,
        Direction.DOWN,
        Direction.RIGHT,
    ]
    assert {node.score for node in engine.arena} == {6}
    assert solution.expanded == 11
    assert solution.generated == 12


def test_corner_board_expansion_counts() -> None:
    solution = search(Board.from_rows(_CORNER))
    assert solution.directions == [
        Direction.RIGHT,
        Direction.DOWN,
        Direction.RIGHT,
        Direction.DOWN,
    ]
    assert solution.expanded == 4
    assert solution.generated == 10


def test_rediscovered_board_is_not_enqueued_again() -> None:
    engine = AStarSearch(Board.from_rows(_ANTIPODE))
    engine.run()

    keys = [node.board.canonical_key() for node in engine.arena]
    assert len(keys) == len(set(keys)) == len(engine.visited)

    # The route that starts right expands the goal's other neighbour after
    # the goal was already enqueued from the route that starts down.
    goal_nodes = [node for node in engine.arena if node.board.is_goal()]
    assert len(goal_nodes) == 1
    goal_parent = engine.arena[goal_nodes[0].parent]
    assert goal_parent.board == Board.from_rows([[1, 2], [0, 3]])
    assert Board.from_rows([[1, 0], [3, 2]]).canonical_key() in keys


def test_search_state_is_per_instance() -> None:
    board = Board.from_rows(_CORNER)
    first = AStarSearch(board)
    first.run()
    second = AStarSearch(board)
    assert second.arena == []
    assert second.visited == set()
    assert second.run().expanded == first.expanded
