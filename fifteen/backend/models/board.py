"""Board model for the 15-puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

GRID_SIZE = 4
TOTAL_TILES = GRID_SIZE * GRID_SIZE
EMPTY = 0

Cell = tuple[int, int]


class Direction(StrEnum):
    """Direction the *empty cell* walks."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def offset(self) -> Cell:
        return _OFFSETS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def in_grid(row: int, col: int) -> bool:
    return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE


@dataclass
class Board:
    """Represents the 4×4 puzzle board.

    Tiles are stored as a 2D list of ints. 0 represents the empty cell,
    whose position is cached in ``empty_pos`` and only ever changed
    together with the matching cell.
    """

    tiles: list[list[int]]
    empty_pos: Cell

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls) -> Board:
        """Return the goal-state board (1..15 in order, empty bottom-right)."""
        board = cls(tiles=[], empty_pos=(0, 0))
        board.initialize()
        return board

    @classmethod
    def from_flat(cls, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15])
        """
        if sorted(flat) != list(range(TOTAL_TILES)):
            raise ValueError(
                f"Expected a permutation of 0..{TOTAL_TILES - 1}, got {flat!r}."
            )
        tiles: list[list[int]] = []
        empty_pos: Cell = (0, 0)
        for r in range(GRID_SIZE):
            row = list(flat[r * GRID_SIZE : (r + 1) * GRID_SIZE])
            for c, v in enumerate(row):
                if v == EMPTY:
                    empty_pos = (r, c)
            tiles.append(row)
        return cls(tiles=tiles, empty_pos=empty_pos)

    # -- mutation -------------------------------------------------------------

    def initialize(self) -> None:
        """Reset to the solved arrangement."""
        self.tiles = [
            [r * GRID_SIZE + c + 1 for c in range(GRID_SIZE)]
            for r in range(GRID_SIZE)
        ]
        self.tiles[GRID_SIZE - 1][GRID_SIZE - 1] = EMPTY
        self.empty_pos = (GRID_SIZE - 1, GRID_SIZE - 1)

    def swap(self, empty_pos: Cell, other_pos: Cell) -> None:
        """Slide the tile at *other_pos* into *empty_pos*.

        The caller guarantees *empty_pos* holds the empty cell; adjacency is
        checked by the move engine, not here.
        """
        er, ec = empty_pos
        orow, ocol = other_pos
        assert self.tiles[er][ec] == EMPTY, f"{empty_pos} is not the empty cell"
        self.tiles[er][ec] = self.tiles[orow][ocol]
        self.tiles[orow][ocol] = EMPTY
        self.empty_pos = (orow, ocol)

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def neighbor(self, direction: Direction) -> Cell | None:
        """Cell the empty cell would move to, or ``None`` past the edge."""
        dr, dc = direction.offset
        er, ec = self.empty_pos
        nr, nc = er + dr, ec + dc
        if not in_grid(nr, nc):
            return None
        return (nr, nc)

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if r == GRID_SIZE - 1 and c == GRID_SIZE - 1:
                    return self.tiles[r][c] == EMPTY
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_permutation(self) -> bool:
        """Each identifier appears once and ``empty_pos`` points at 0."""
        if len(self.tiles) != GRID_SIZE or any(
            len(row) != GRID_SIZE for row in self.tiles
        ):
            return False
        if sorted(self.flat()) != list(range(TOTAL_TILES)):
            return False
        er, ec = self.empty_pos
        return self.tiles[er][ec] == EMPTY

    def copy(self) -> Board:
        return Board(
            tiles=[row[:] for row in self.tiles],
            empty_pos=self.empty_pos,
        )
