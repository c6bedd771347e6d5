"""Real-time event channel shared by all connected clients"""

from .websocket_manager import BROADCAST_ROOM, RELAYED_EVENTS, WebSocketManager

__all__ = [
    "BROADCAST_ROOM",
    "RELAYED_EVENTS",
    "WebSocketManager",
]
