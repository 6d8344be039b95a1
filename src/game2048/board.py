"""The Board is the grid of tiles. It is a value object: every change returns a new Board."""

from dataclasses import dataclass
from typing import Iterable, Self

from src.core.exceptions import MalformedBoardError

# 2048 is always played on a 4x4 grid.
GRID_SIZE = 4
# Number of tiles placed on the empty board before the first move
INITIAL_TILES = 2

EMPTY = 0

Row = tuple[int, ...]
Cell = tuple[int, int]


def is_tile_value(value: int) -> bool:
    """Tiles are powers of two, starting at 2. (0 = empty square)"""
    return value >= 2 and (value & (value - 1)) == 0


@dataclass(frozen=True)
class Board:
    rows: tuple[Row, ...]

    def __post_init__(self) -> None:
        """
        Every board gets checked when it is built:
        * a tuple of GRID_SIZE rows, each a tuple of GRID_SIZE cells
        * cells are integers, either 0 or a power of two
        """
        if not isinstance(self.rows, tuple) or not all(
            isinstance(row, tuple) for row in self.rows
        ):
            raise MalformedBoardError(
                f"Board rows must be a tuple of tuples (use Board.from_rows for lists): {self.rows!r}"
            )
        if len(self.rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in self.rows):
            raise MalformedBoardError(
                f"Board must be {GRID_SIZE}x{GRID_SIZE}, got rows of length {[len(row) for row in self.rows]}"
            )

        for row in self.rows:
            for value in row:
                # bool is a subclass of int, but True is not a tile
                if not isinstance(value, int) or isinstance(value, bool):
                    raise MalformedBoardError(f"Cell value must be an integer: {value!r}")
                if value != EMPTY and not is_tile_value(value):
                    raise MalformedBoardError(
                        f"Cell value must be 0 or a power of two (>= 2): {value}"
                    )

    @classmethod
    def empty(cls) -> Self:
        return cls(tuple((EMPTY,) * GRID_SIZE for _ in range(GRID_SIZE)))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> Self:
        """Construct a board from nested lists (ex. coming from a stored session)."""
        try:
            grid = tuple(tuple(row) for row in rows)
        except TypeError as error:
            raise MalformedBoardError(
                f"Board must be a sequence of rows, got {rows!r}"
            ) from error
        return cls(grid)

    def to_rows(self) -> list[list[int]]:
        return [list(row) for row in self.rows]

    def cell(self, row: int, col: int) -> int:
        return self.rows[row][col]

    def empty_cells(self) -> list[Cell]:
        """(row, col) of every empty square, scanned row by row."""
        return [
            (r, c)
            for r, row in enumerate(self.rows)
            for c, value in enumerate(row)
            if value == EMPTY
        ]

    def is_full(self) -> bool:
        return all(value != EMPTY for row in self.rows for value in row)

    def place_tile(self, cell: Cell, value: int) -> Self:
        """New board with the tile placed. Only allowed on an empty square."""
        r, c = cell
        if self.rows[r][c] != EMPTY:
            raise MalformedBoardError(f"Cannot place a tile on occupied cell {cell}")
        if not is_tile_value(value):
            raise MalformedBoardError(f"Not a valid tile value: {value}")

        new_row = self.rows[r][:c] + (value,) + self.rows[r][c + 1 :]
        return type(self)(self.rows[:r] + (new_row,) + self.rows[r + 1 :])

    # --- geometric transforms (used by the orientation adapter) ---
    def transpose(self) -> Self:
        """Rows become columns"""
        return type(self)(tuple(zip(*self.rows)))

    def reverse_rows(self) -> Self:
        """Mirror left <-> right"""
        return type(self)(tuple(row[::-1] for row in self.rows))

    # --- statistics ---
    def total(self) -> int:
        """Sum of all tiles. Merging never changes it, only spawning does."""
        return sum(sum(row) for row in self.rows)

    def max_tile(self) -> int:
        return max(max(row) for row in self.rows)
