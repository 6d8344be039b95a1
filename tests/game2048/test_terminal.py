"""Unit tests for /src/game2048/terminal.py"""

import pytest

from src.game2048.board import Board
from src.game2048.terminal import has_adjacent_pair, is_terminal


def test_full_board_without_pairs_is_terminal(terminal_board: Board) -> None:
    assert terminal_board.is_full()
    assert not has_adjacent_pair(terminal_board)
    assert is_terminal(terminal_board)


@pytest.mark.parametrize(
    "rows",
    [
        # one horizontal pair
        [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 4]],
        # one vertical pair
        [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [2, 2048, 4, 2]],
        # pair in the top-left corner
        [[8, 8, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]],
    ],
)
def test_full_board_with_pair_is_not_terminal(rows: list[list[int]]) -> None:
    board = Board.from_rows(rows)
    assert board.is_full()
    assert has_adjacent_pair(board)
    assert not is_terminal(board)


@pytest.mark.parametrize("cell", [(0, 0), (1, 2), (3, 3)])
def test_board_with_empty_cell_is_not_terminal(cell: tuple[int, int]) -> None:
    rows = [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]]
    rows[cell[0]][cell[1]] = 0
    assert not is_terminal(Board.from_rows(rows))


def test_empty_board_is_not_terminal() -> None:
    assert not is_terminal(Board.empty())
