"""
Where the service keeps running sessions between two requests.

The service holds no game state of its own: it fetches a SessionModel, rebuilds the Game, plays the turn and writes
the result back. Any storage satisfying this contract can be plugged in.
"""

from typing import Protocol
from uuid import UUID

from src.core.models import SessionModel


class SessionRepository(Protocol):
    """
    Contract for session storage.
    ---

    * records are independent copies: changing a SessionModel after handing it over (or after receiving it) never
      changes what is stored
    * a missing session is not an error here. `get_session` gives None, `update_session`/`delete_session` give False,
      and the service decides what that means for the caller
    """

    def create_session(self, session: SessionModel) -> UUID: ...

    def get_session(self, session_id: UUID) -> SessionModel | None: ...

    def update_session(self, session_id: UUID, session: SessionModel) -> bool:
        """Replace the record. False if there was no record to replace."""
        ...

    def delete_session(self, session_id: UUID) -> bool:
        """False if there was nothing to delete."""
        ...

    def __contains__(self, session_id: object) -> bool: ...
