from .in_memory_session_repository import InMemorySessionRepository

__all__ = ["InMemorySessionRepository"]
