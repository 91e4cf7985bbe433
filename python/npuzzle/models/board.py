"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from npuzzle.errors import InvariantViolation


class Direction(StrEnum):
    """Direction the *blank* travels when a move is applied."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

# Expansion order used everywhere moves are enumerated.
DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


@dataclass(frozen=True)
class Board:
    """Represents an immutable sliding puzzle configuration.

    Tiles are stored as a tuple of row tuples. 0 represents the blank space.
    Use :meth:`from_rows` or :meth:`from_flat` to build a validated board.
    """

    size: int
    tiles: tuple[tuple[int, ...], ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> Board:
        """Create a board from a square grid of ints.

        Example::

            Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
        """
        tiles = tuple(tuple(row) for row in rows)
        for row in tiles:
            for v in row:
                if not isinstance(v, int) or isinstance(v, bool):
                    raise InvariantViolation(f"Tiles must be integers, got {v!r}.")
        size = len(tiles)
        for r, row in enumerate(tiles):
            if len(row) != size:
                raise InvariantViolation(
                    f"Board must be square: row {r} has {len(row)} tiles, "
                    f"expected {size}."
                )
        board = cls(size=size, tiles=tiles)
        board.validate()
        return board

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvariantViolation(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls.from_rows(
            flat[r * size : (r + 1) * size] for r in range(size)
        )

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        nn = size * size
        return cls.from_flat(size, [*range(1, nn), 0])

    def validate(self) -> None:
        """Raise ``InvariantViolation`` unless tiles are a permutation of 0..n²−1."""
        if self.size < 1:
            raise InvariantViolation("Board must have at least one row.")
        values = sorted(self.flat())
        if values != list(range(self.size * self.size)):
            missing = set(range(self.size * self.size)) - set(values)
            if 0 in missing:
                raise InvariantViolation("Board has no blank tile (0).")
            raise InvariantViolation(
                f"Board tiles must be 0..{self.size * self.size - 1} "
                f"each exactly once, got {self.flat()}."
            )

    # -- queries --------------------------------------------------------------

    def flat(self) -> list[int]:
        """Row-major list of tile values."""
        return [v for row in self.tiles for v in row]

    def locate_blank(self) -> tuple[int, int]:
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == 0:
                    return r, c
        raise InvariantViolation("Board has no blank tile (0).")

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col

    def canonical_key(self) -> tuple[int, ...]:
        """Hashable key that is equal for two boards iff their tiles are."""
        return tuple(self.flat())

    # -- moves ----------------------------------------------------------------

    def legal_moves(self) -> list[Direction]:
        """Directions the blank can travel without leaving the grid."""
        br, bc = self.locate_blank()
        moves: list[Direction] = []
        for direction in DIRECTIONS:
            dr, dc = direction.delta
            nr, nc = br + dr, bc + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                moves.append(direction)
        return moves

    def apply_move(self, direction: Direction) -> Board:
        """Return a new board with the blank moved one cell in *direction*."""
        br, bc = self.locate_blank()
        dr, dc = direction.delta
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            raise ValueError(
                f"Cannot move blank {direction.value} from ({br}, {bc})."
            )
        rows = [list(row) for row in self.tiles]
        rows[br][bc], rows[tr][tc] = rows[tr][tc], rows[br][bc]
        return Board(size=self.size, tiles=tuple(tuple(row) for row in rows))

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(
            " ".join(f"{v:>{width}}" for v in row) for row in self.tiles
        )
