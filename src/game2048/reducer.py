"""
Slide and merge rules for a single row.

Every move is reduced to the same problem: push the tiles of a row towards index 0 (the orientation adapter
makes sure "index 0" is the side the player pushed towards).
"""

from typing import Sequence

from src.game2048.board import EMPTY, GRID_SIZE, Row


def reduce_row(row: Sequence[int]) -> tuple[Row, int]:
    """
    Collapse one row towards index 0 and return (new row, score delta).
    ---

    1. drop the empty squares, keeping the order of the tiles ("gravity")
    2. walk left to right: two equal neighbours become one tile of double the value, and we skip past both
    3. pad with empty squares on the right

    A tile merges at most once per move, so the first pair wins:
    [2, 2, 2, 0] -> [4, 2, 0, 0] (not [4, 4, 0, 0]) and the score delta is 4.
    """
    tiles = [value for value in row if value != EMPTY]

    merged: list[int] = []
    score_delta = 0
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            merged.append(tiles[i] * 2)
            score_delta += tiles[i] * 2
            i += 2
        else:
            merged.append(tiles[i])
            i += 1

    padding = (EMPTY,) * (GRID_SIZE - len(merged))
    return tuple(merged) + padding, score_delta
