from .storage_provider import StorageProvider
from .gateway_provider import GatewayProvider
from .video_provider import VideoProvider
from .session_provider import SessionProvider
from .notification_provider import NotificationProvider


__all__ = [
    "StorageProvider",
    "GatewayProvider",
    "VideoProvider",
    "SessionProvider",
    "NotificationProvider",
]
