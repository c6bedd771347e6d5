from abc import ABC, abstractmethod
from typing import List

from ..models.session_state import ChatSession


class SessionRepository(ABC):
    """Repository interface - defines contract for chat session lookup"""
    
    @abstractmethod
    def add(self, session: ChatSession) -> ChatSession:
        """Register a new session"""
        pass
    
    @abstractmethod
    def get(self, session_id: str) -> ChatSession:
        """Find session by ID (raises NotFoundError)"""
        pass
    
    @abstractmethod
    def remove(self, session_id: str) -> ChatSession:
        """Remove session by ID (raises NotFoundError)"""
        pass
    
    @abstractmethod
    def list_ids(self) -> List[str]:
        """IDs of all live sessions"""
        pass
