from typing import TYPE_CHECKING
from ...infrastructure.notifications import WebSocketManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class NotificationProvider:
    """Registers the shared WebSocket broadcast manager"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(WebSocketManager, WebSocketManager())
