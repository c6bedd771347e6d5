"""WebSocket Manager for the shared chat/analysis broadcast channel"""

import json
import logging
from threading import Lock
from typing import Any, Dict, Optional, Set

from fastapi import WebSocket

logger = logging.getLogger(__name__)

# Every client joins the same room: any broadcast reaches every other client.
# Per-session scoping would need a room key per session.
BROADCAST_ROOM = "global"

# Incoming event name -> event name rebroadcast to all clients
RELAYED_EVENTS: Dict[str, str] = {
    "chat message": "chat message",
    "video analysis": "analysis result",
}


class WebSocketManager:
    """
    Manages WebSocket connections and relays events to connected clients.
    
    Thread-safe connection management, grouped by room.
    """
    
    def __init__(self):
        """Initialize WebSocket manager"""
        # Map room -> Set of WebSocket connections
        self._connections: Dict[str, Set[WebSocket]] = {}
        self._lock = Lock()  # Thread safety for connection management
        logger.info("WebSocketManager initialized")
    
    async def add_connection(self, websocket: WebSocket, room: str = BROADCAST_ROOM) -> None:
        """
        Add a WebSocket connection to a room.
        
        Args:
            websocket: WebSocket connection instance
            room: Room to join
        """
        with self._lock:
            if room not in self._connections:
                self._connections[room] = set()
            self._connections[room].add(websocket)
        
        logger.info(f"A user connected. Total connections: {self.get_total_connections()}")
    
    async def remove_connection(self, websocket: WebSocket, room: str = BROADCAST_ROOM) -> None:
        """
        Remove a WebSocket connection from a room.
        
        Args:
            websocket: WebSocket connection instance
            room: Room the connection joined
        """
        with self._lock:
            if room in self._connections:
                self._connections[room].discard(websocket)
                
                # Clean up empty sets
                if not self._connections[room]:
                    del self._connections[room]
        
        logger.info(f"User disconnected. Total connections: {self.get_total_connections()}")
    
    async def send_to_room(self, room: str, message: dict) -> int:
        """
        Send a message to all WebSocket connections in a room.
        
        Args:
            room: Room to send message to
            message: Message dictionary (will be JSON serialized)
            
        Returns:
            Number of connections the message was successfully sent to
        """
        with self._lock:
            connections = self._connections.get(room, set()).copy()
        
        if not connections:
            logger.debug(f"No connections found in room {room}")
            return 0
        
        try:
            message_json = json.dumps(message)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize message to JSON: {e}")
            return 0
        
        sent_count = 0
        disconnected_connections = []
        
        for websocket in connections:
            try:
                await websocket.send_text(message_json)
                sent_count += 1
            except Exception as e:
                logger.warning(f"Failed to send message to connection in room {room}: {e}")
                disconnected_connections.append(websocket)
        
        # Clean up disconnected connections
        if disconnected_connections:
            with self._lock:
                if room in self._connections:
                    for ws in disconnected_connections:
                        self._connections[room].discard(ws)
                    if not self._connections[room]:
                        del self._connections[room]
        
        logger.debug(f"Sent event to {sent_count}/{len(connections)} connections in room {room}")
        return sent_count
    
    async def broadcast(self, event: str, data: Any, room: str = BROADCAST_ROOM) -> int:
        """
        Broadcast an event with its payload, verbatim, to every client in the room.
        
        Returns:
            Number of connections the event was delivered to
        """
        return await self.send_to_room(room, {"event": event, "data": data})
    
    async def relay(self, message: Dict[str, Any], room: str = BROADCAST_ROOM) -> Optional[int]:
        """
        Relay a client event to the room.
        
        Returns:
            Delivery count, or None when the event is not relayed
        """
        outgoing = RELAYED_EVENTS.get(message.get("event"))
        if outgoing is None:
            return None
        return await self.broadcast(outgoing, message.get("data"), room=room)
    
    def get_total_connections(self) -> int:
        """
        Get total number of active WebSocket connections.
        """
        with self._lock:
            return sum(len(connections) for connections in self._connections.values())
