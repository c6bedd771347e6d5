# Local application imports
from .base_container import BaseContainer
from .providers import (
    GatewayProvider,
    NotificationProvider,
    SessionProvider,
    StorageProvider,
    VideoProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Storage (StorageProvider)
    2. Provider gateway and analyzer (GatewayProvider) - depends on storage
    3. Use cases (VideoProvider, SessionProvider) - depend on both
    4. Event channel (NotificationProvider)
    """
    
    def __init__(self) -> None:
        super().__init__()
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: storage → gateway → use cases
        """
        StorageProvider.register(self)
        GatewayProvider.register(self)
        VideoProvider.register(self)
        SessionProvider.register(self)
        NotificationProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)
    
    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container; the next get_container() rebuilds it."""
    global _container
    _container = None
