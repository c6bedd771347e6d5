from .media_store import MediaStore
from .session_repository import SessionRepository

__all__ = ["MediaStore", "SessionRepository"]
