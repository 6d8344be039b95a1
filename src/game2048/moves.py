"""
Move engine: resolve a push in one direction on the whole board.

Pure functions only. Deciding whether a tile spawns afterwards is the Game's job.
"""

from dataclasses import dataclass

from src.core.shared_types import Direction
from src.game2048.board import Board
from src.game2048.orientation import orient, restore
from src.game2048.reducer import reduce_row


@dataclass(frozen=True)
class MoveResult:
    """Board after sliding/merging (before any spawn) and the points the merges were worth."""

    board: Board
    score_delta: int

    def changed_from(self, board: Board) -> bool:
        return self.board != board


def slide(board: Board, direction: Direction) -> MoveResult:
    """
    1. orient the board so the move becomes "everything to the left"
    2. reduce every row on its own (rows never interact)
    3. orient back
    """
    oriented = orient(board, direction)

    reduced_rows = []
    score_delta = 0
    for row in oriented.rows:
        new_row, row_delta = reduce_row(row)
        reduced_rows.append(new_row)
        score_delta += row_delta

    return MoveResult(restore(Board(tuple(reduced_rows)), direction), score_delta)


def is_noop(board: Board, direction: Direction) -> bool:
    """A move that changes nothing: no tile can slide or merge in this direction."""
    return not slide(board, direction).changed_from(board)


def legal_directions(board: Board) -> list[Direction]:
    """The directions that would actually change the board (in declaration order of Direction)."""
    return [direction for direction in Direction if not is_noop(board, direction)]
