"""SessionRepository keeping the sessions in a dictionary for the lifetime of the process"""

from copy import deepcopy
from uuid import UUID, uuid4

from src.core.models import SessionModel


class InMemorySessionRepository:
    """
    Sessions stored in memory only (nothing survives a restart).
    NOTE: not thread-safe. Callers that share one repository between threads need their own lock.
    """

    def __init__(self) -> None:
        self._sessions: dict[UUID, SessionModel] = {}

    def create_session(self, session: SessionModel) -> UUID:
        new_id = uuid4()
        self._sessions[new_id] = deepcopy(session)
        return new_id

    def get_session(self, session_id: UUID) -> SessionModel | None:
        session = self._sessions.get(session_id)
        return deepcopy(session) if session else None

    def update_session(self, session_id: UUID, session: SessionModel) -> bool:
        if session_id not in self._sessions:
            return False
        self._sessions[session_id] = deepcopy(session)
        return True

    def delete_session(self, session_id: UUID) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
