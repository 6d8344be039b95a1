"""
The Game is the entrypoint into the domain layer for the service layer.

It orchestrates one turn of 2048: slide the board, spawn a tile if anything moved, update the score and check for
the end of the game. A Game is an immutable value: every turn returns a new Game and the caller keeps hold of it.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameStateError, MalformedBoardError, SpawnError
from src.core.models import SessionModel
from src.core.shared_types import Direction, Status
from src.game2048.board import INITIAL_TILES, Board
from src.game2048.moves import slide
from src.game2048.spawner import Spawner
from src.game2048.terminal import is_terminal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    score: int
    status: Status

    def __post_init__(self) -> None:
        if not isinstance(self.board, Board):
            raise MalformedBoardError(f"Expected a Board, got {type(self.board).__name__}")
        # bool is a subclass of int, but not a score
        if not isinstance(self.score, int) or isinstance(self.score, bool):
            raise GameStateError(f"Score must be an integer: {self.score!r}")
        if self.score < 0:
            raise GameStateError(f"Score cannot be negative: {self.score}")
        if not isinstance(self.status, Status):
            raise GameStateError(f"Invalid status: {self.status!r}")

    @classmethod
    def new_game(cls, spawner: Optional[Spawner] = None) -> Self:
        """Empty board with the starting tiles placed, no points yet."""
        spawner = spawner or Spawner()
        board = spawner.seed(Board.empty(), INITIAL_TILES)
        return cls(board=board, score=0, status=Status.ACTIVE)

    @classmethod
    def from_model(cls, model: SessionModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in Status._value2member_map_:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )
        board = Board.from_rows(model.board)
        return cls(board=board, score=model.score, status=Status(model.status))

    def to_model(self) -> SessionModel:
        """Encode back into a format the Service layer uses"""
        return SessionModel(
            board=self.board.to_rows(),
            score=self.score,
            status=self.status.value,
        )

    @property
    def terminal(self) -> bool:
        return self.status == Status.TERMINAL

    def make_move(
        self, direction: Direction | str, spawner: Optional[Spawner] = None
    ) -> Self:
        """
        Play one turn and return the resulting Game.
        -----

        1. Invalid direction? --> InvalidDirectionError, nothing happens
        2. Game over? --> ignore the input
        3. Slide the board. Nothing moved? --> ignore the input (no free tile, no points)
        4. Spawn a tile on the new board, add the points
        5. Check if the game has ended

        The new board, score and status are set in one go (a new Game), never one by one.
        """
        direction = Direction.parse(direction)

        if self.terminal:
            logger.debug("Ignoring move %s: game is over", direction)
            return self

        result = slide(self.board, direction)
        if not result.changed_from(self.board):
            logger.debug("Ignoring move %s: nothing can slide or merge", direction)
            return self

        # a move that changes a full board always merges, so there must be room for the new tile
        if result.board.is_full():
            raise SpawnError(
                f"No empty cell left after moving {direction}. Board: {result.board.to_rows()}"
            )

        spawner = spawner or Spawner()
        new_board = spawner.spawn(result.board)
        new_status = Status.TERMINAL if is_terminal(new_board) else Status.ACTIVE
        if new_status == Status.TERMINAL:
            logger.info("Game over with score %d", self.score + result.score_delta)

        return type(self)(
            board=new_board,
            score=self.score + result.score_delta,
            status=new_status,
        )


def new_session(spawner: Optional[Spawner] = None) -> Game:
    """Fresh game: two tiles on the board, score 0, still active."""
    return Game.new_game(spawner)


def apply_move(
    game: Game, direction: Direction | str, spawner: Optional[Spawner] = None
) -> Game:
    """Transition function: current game + direction --> next game (board, score and terminal flag)."""
    return game.make_move(direction, spawner)
