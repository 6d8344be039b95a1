"""Check for the end of the game: no direction can change the board anymore."""

from src.game2048.board import Board


def has_adjacent_pair(board: Board) -> bool:
    """Two horizontally or vertically neighbouring cells with the same value"""
    for r, row in enumerate(board.rows):
        for c, value in enumerate(row):
            if c + 1 < len(row) and value == row[c + 1]:
                return True
            if r + 1 < len(board.rows) and value == board.rows[r + 1][c]:
                return True
    return False


def is_terminal(board: Board) -> bool:
    """
    Game over when the board is full AND nothing can merge.

    Has to be evaluated after the spawn, as the spawned tile can fill the last empty cell.
    """
    return board.is_full() and not has_adjacent_pair(board)
