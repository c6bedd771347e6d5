"""
Integration tests for the /ws event channel.
"""
import json

import pytest
from starlette.websockets import WebSocketDisconnect

pytestmark = pytest.mark.integration


def _ready(ws):
    ws.send_text("ping")
    assert ws.receive_text() == "pong"


class TestEventChannel:
    """Tests for WebSocket relays"""

    def test_ping_pong(self, client):
        with client.websocket_connect("/ws") as ws:
            _ready(ws)

    def test_video_analysis_broadcast_to_all(self, client):
        with client.websocket_connect("/ws") as sender, client.websocket_connect("/ws") as other:
            _ready(sender)
            _ready(other)

            sender.send_text(json.dumps({"event": "video analysis", "data": {"text": "A cat runs."}}))

            expected = {"event": "analysis result", "data": {"text": "A cat runs."}}
            assert json.loads(other.receive_text()) == expected
            assert json.loads(sender.receive_text()) == expected

    def test_chat_message_relayed(self, client):
        with client.websocket_connect("/ws", headers={"origin": "http://localhost:5173"}) as ws:
            _ready(ws)
            ws.send_text(json.dumps({"event": "chat message", "data": "hello"}))
            assert json.loads(ws.receive_text()) == {"event": "chat message", "data": "hello"}

    def test_unknown_messages_ignored(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.send_text("not json")
            ws.send_text(json.dumps({"event": "other"}))
            _ready(ws)

    def test_foreign_origin_refused(self, client):
        with pytest.raises(WebSocketDisconnect):
            with client.websocket_connect("/ws", headers={"origin": "http://evil.example"}) as ws:
                ws.receive_text()
