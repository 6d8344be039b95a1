"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable
from unittest.mock import Mock

import pytest

from src.db.memory_repository import InMemorySessionRepository
from src.game2048.board import Board
from src.game2048.spawner import Spawner

# Full board, no two neighbours equal: no move is possible
TERMINAL_ROWS = [
    [2, 4, 2, 4],
    [4, 2, 4, 2],
    [2, 4, 2, 4],
    [4, 2, 4, 2],
]


@pytest.fixture
def repository() -> InMemorySessionRepository:
    """Fresh in-memory repository for every test."""
    return InMemorySessionRepository()


@pytest.fixture
def terminal_board() -> Board:
    return Board.from_rows(TERMINAL_ROWS)


@pytest.fixture
def fixed_spawner() -> Callable[[int, int], Spawner]:
    """
    Call the inner function with the index (into the list of empty cells) and the tile value the spawner should pick.
    The mocked generator is available as `spawner.rng` to inspect the calls.
    """

    def _create_spawner(cell_index: int = 0, value: int = 2) -> Spawner:
        rng = Mock()
        rng.integers.return_value = cell_index
        rng.choice.return_value = value
        return Spawner(rng)

    return _create_spawner
