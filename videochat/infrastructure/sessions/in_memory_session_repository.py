"""Process-local session registry (sessions end with the process)."""

import logging
from threading import Lock
from typing import Dict, List

from ...domain.exceptions import NotFoundError
from ...domain.models.session_state import ChatSession
from ...domain.repositories.session_repository import SessionRepository

logger = logging.getLogger(__name__)


class InMemorySessionRepository(SessionRepository):
    """Thread-safe dict of session_id -> ChatSession"""

    def __init__(self) -> None:
        self._sessions: Dict[str, ChatSession] = {}
        self._lock = Lock()

    def add(self, session: ChatSession) -> ChatSession:
        with self._lock:
            self._sessions[session.session_id] = session
        logger.info("Session %s created. Active sessions: %d", session.session_id, len(self._sessions))
        return session

    def get(self, session_id: str) -> ChatSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise NotFoundError("Session not found", details={"session_id": session_id})
        return session

    def remove(self, session_id: str) -> ChatSession:
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            raise NotFoundError("Session not found", details={"session_id": session_id})
        return session

    def list_ids(self) -> List[str]:
        with self._lock:
            return list(self._sessions.keys())
