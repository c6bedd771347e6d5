from .session_lifecycle import SessionLifecycleUseCase

__all__ = ["SessionLifecycleUseCase"]
