"""Shared WebSocket channel relaying chat and analysis events between clients"""

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ...core.config import get_settings
from ...di.container import get_container
from ...infrastructure.notifications import WebSocketManager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["events"])


def get_websocket_manager() -> WebSocketManager:
    """Get the shared WebSocket manager instance"""
    return get_container().get(WebSocketManager)


def is_origin_allowed(origin: str | None) -> bool:
    """
    Only the configured client may connect. Non-browser clients that send no
    Origin header are let through.
    """
    if not origin:
        return True
    return origin.rstrip("/") == get_settings().client_url.rstrip("/")


@router.websocket("/ws")
async def websocket_events(websocket: WebSocket):
    """
    WebSocket endpoint for the shared event channel.
    
    Clients send JSON envelopes {"event": ..., "data": ...}:
        "chat message"   → rebroadcast to everyone as "chat message"
        "video analysis" → rebroadcast to everyone as "analysis result"
    
    "ping" text frames are answered with "pong".
    """
    origin = websocket.headers.get("origin")
    if not is_origin_allowed(origin):
        logger.warning(f"Rejected WebSocket connection from origin {origin}")
        await websocket.close(code=1008, reason="Origin not allowed")
        return
    
    manager = get_websocket_manager()
    await websocket.accept()
    
    try:
        await manager.add_connection(websocket)
        
        while True:
            try:
                message = await websocket.receive_text()
                
                if message == "ping":
                    await websocket.send_text("pong")
                    continue
                if message == "pong":
                    continue
                
                try:
                    payload = json.loads(message)
                except ValueError:
                    logger.debug(f"Ignoring non-JSON message: {message[:100]}")
                    continue
                
                if not isinstance(payload, dict) or await manager.relay(payload) is None:
                    logger.debug(f"Ignoring unknown event: {message[:100]}")
                    
            except WebSocketDisconnect:
                break
                
    except Exception as e:
        logger.error(f"Error in WebSocket connection: {e}", exc_info=True)
    finally:
        await manager.remove_connection(websocket)
