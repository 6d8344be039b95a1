"""Random tile placement. The only part of the engine that is not a pure function."""

from typing import Optional, Self

from numpy.random import Generator, default_rng

from src.game2048.board import Board

# New tiles: 90% chance of a 2, 10% chance of a 4.
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

_TILE_VALUES = list(TILE_SPAWN_PROBS.keys())
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())


class Spawner:
    """Places new tiles using an injected random generator (seed it to replay a game exactly)."""

    def __init__(self, rng: Optional[Generator] = None) -> None:
        self.rng = rng if rng is not None else default_rng()

    @classmethod
    def from_seed(cls, seed: Optional[int]) -> Self:
        return cls(default_rng(seed))

    def spawn(self, board: Board) -> Board:
        """
        Put one tile (2 or 4) on a uniformly chosen empty cell.

        NOTE: a full board is returned as is. The Game never asks for a spawn on a full board, since a move that
        changes a full board always merges (and so frees) at least one cell.
        """
        empty_cells = board.empty_cells()
        if not empty_cells:
            return board

        cell = empty_cells[int(self.rng.integers(len(empty_cells)))]
        value = int(self.rng.choice(_TILE_VALUES, p=_TILE_PROBS))
        return board.place_tile(cell, value)

    def seed(self, board: Board, count: int) -> Board:
        """Spawn `count` tiles after each other (starting position of a game)."""
        for _ in range(count):
            board = self.spawn(board)
        return board
