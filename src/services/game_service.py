"""Orchestration of communication from the boundary (request models) to game logic and session storage (and back)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateSessionRequest,
    DeleteSessionRequest,
    GetSessionRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    SessionResponse,
)
from src.core.exceptions import RepositoryError
from src.db.repository import SessionRepository
from src.game2048.game import Game
from src.game2048.moves import legal_directions
from src.game2048.spawner import Spawner

logger = logging.getLogger(__name__)


class GameService:
    """
    Orchestration of layers for 2048 sessions.

    Seeded sessions keep their own random stream (so the whole game can be replayed). The service holds on to that
    spawner until the session is deleted or the game ends, whichever comes first.
    """

    def __init__(
        self, repository: SessionRepository, spawner: Optional[Spawner] = None
    ) -> None:
        self.repo = repository
        self.spawner = spawner or Spawner()
        self._session_spawners: dict[UUID, Spawner] = {}

    # -- Boundary logic ---
    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Start a new game."""

        spawner = (
            Spawner.from_seed(request.seed)
            if request.seed is not None
            else self.spawner
        )

        # Create a new Game, and store it as SessionModel
        new_game = Game.new_game(spawner)
        session_id = self.repo.create_session(new_game.to_model())
        if request.seed is not None:
            self._session_spawners[session_id] = spawner
        logger.info("Created session %s", session_id)

        return self._create_session_response(session_id, new_game)

    def get_session(self, request: GetSessionRequest) -> SessionResponse:
        """Retrieve current state (board, score, terminal flag) for rendering."""
        game = self._fetch_game(request.session_id)
        return self._create_session_response(request.session_id, game)

    def make_move(self, request: MoveRequest) -> SessionResponse:
        """Play one turn in the requested direction."""

        # Retrieve the stored session as a Game
        game = self._fetch_game(request.session_id)

        # Attempt the move (ignored moves give back the very same game)
        after_move = game.make_move(
            request.direction, self._spawner_for(request.session_id)
        )
        if after_move is game:
            return self._create_session_response(request.session_id, game)

        # store in repository
        if not self.repo.update_session(request.session_id, after_move.to_model()):
            raise RepositoryError(
                f"Session with session_id={request.session_id} disappeared during the move."
            )
        logger.debug(
            "Session %s: moved %s, score %d",
            request.session_id,
            request.direction,
            after_move.score,
        )

        # a finished game never spawns again
        if after_move.terminal:
            self._session_spawners.pop(request.session_id, None)

        return self._create_session_response(request.session_id, after_move)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Directions that would change the board. Empty once the game is over."""
        game = self._fetch_game(request.session_id)
        moves = [] if game.terminal else legal_directions(game.board)
        return LegalMovesResponse(session_id=request.session_id, legal_moves=moves)

    def delete_session(self, request: DeleteSessionRequest) -> None:
        """Handle a request to throw a session away. Unknown ids are ignored."""
        deleted = self.repo.delete_session(request.session_id)
        self._session_spawners.pop(request.session_id, None)
        if deleted:
            logger.info("Deleted session %s", request.session_id)

    # -- Internal helpers --
    def _spawner_for(self, session_id: UUID) -> Spawner:
        return self._session_spawners.get(session_id, self.spawner)

    def _create_session_response(self, session_id: UUID, game: Game) -> SessionResponse:
        """Convert a Game to a SessionResponse (for session with given ID.)"""
        return SessionResponse(
            session_id=session_id,
            board=game.board.to_rows(),
            score=game.score,
            terminal=game.terminal,
            max_tile=game.board.max_tile(),
        )

    def _fetch_game(self, session_id: UUID) -> Game:
        """Attempt to find the session in the repository (raise error if it fails), and rebuild the Game."""
        session = self.repo.get_session(session_id)
        if session is None:
            raise RepositoryError(f"Session with {session_id=} not found.")
        return Game.from_model(session)
