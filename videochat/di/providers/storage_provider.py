from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.media_store import MediaStore
from ...domain.repositories.session_repository import SessionRepository
from ...infrastructure.sessions import InMemorySessionRepository
from ...infrastructure.storage import LocalMediaStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StorageProvider:
    """Storage provider - wires storage interfaces to local implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the uploads directory store and the session registry.
        Both are singletons shared by every request.
        """
        settings = get_settings()
        
        container.register_singleton(
            MediaStore,
            LocalMediaStore(root=settings.upload_dir, max_bytes=settings.upload_max_bytes)
        )
        
        container.register_singleton(SessionRepository, InMemorySessionRepository())
