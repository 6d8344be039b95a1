"""
Orientation adapter: turn every direction into "reduce each row towards index 0".

Each direction has a forward transform (`orient`) and its exact inverse (`restore`).
"""

from typing import assert_never

from src.core.shared_types import Direction
from src.game2048.board import Board


def orient(board: Board, direction: Direction) -> Board:
    """Rearrange the board so the tiles of `direction` slide towards the start of each row."""
    match direction:
        case Direction.LEFT:
            return board
        case Direction.RIGHT:
            return board.reverse_rows()
        case Direction.UP:
            return board.transpose()
        case Direction.DOWN:
            return board.transpose().reverse_rows()
        case _:
            assert_never(direction)


def restore(board: Board, direction: Direction) -> Board:
    """Undo `orient`, i.e. restore(orient(b, d), d) == b"""
    match direction:
        case Direction.LEFT:
            return board
        case Direction.RIGHT:
            return board.reverse_rows()
        case Direction.UP:
            return board.transpose()
        case Direction.DOWN:
            # inverse order: first undo the reversal, then the transpose
            return board.reverse_rows().transpose()
        case _:
            assert_never(direction)
