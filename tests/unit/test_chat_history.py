"""
Unit tests for videochat.domain.services.chat_history
"""
from videochat.domain.models.chat import ChatMessage, HistoryEntry
from videochat.domain.services.chat_history import reduce_chat_history


def _log(*pairs):
    return [ChatMessage(text=text, sender=sender) for sender, text in pairs]


class TestReduceChatHistory:
    """Tests for reduce_chat_history"""

    def test_empty(self):
        assert reduce_chat_history([]) == []

    def test_system_entries_dropped(self):
        messages = _log(("system", "Video uploaded successfully!"), ("user", "hi"), ("ai", "hello"))
        assert reduce_chat_history(messages) == [
            HistoryEntry(role="user", content="hi"),
            HistoryEntry(role="model", content="hello"),
        ]

    def test_keeps_last_five_in_order(self):
        messages = _log(*[("user" if i % 2 == 0 else "ai", f"m{i}") for i in range(7)])
        result = reduce_chat_history(messages)
        assert [e.content for e in result] == ["m2", "m3", "m4", "m5", "m6"]
        assert [e.role for e in result] == ["user", "model", "user", "model", "user"]

    def test_length_is_min_of_five_and_non_system(self):
        messages = _log(("system", "s1"), ("user", "a"), ("system", "s2"), ("ai", "b"))
        assert len(reduce_chat_history(messages)) == 2

        many = _log(*[("system", "s")] * 3 + [("user", "q")] * 9)
        assert len(reduce_chat_history(many)) == 5

    def test_unknown_sender_maps_to_model(self):
        result = reduce_chat_history([{"text": "x", "sender": "assistant"}])
        assert result == [HistoryEntry(role="model", content="x")]

    def test_accepts_request_dicts(self):
        items = [
            {"text": "Q", "sender": "user", "timestamp": None},
            {"text": None, "sender": "ai"},
        ]
        assert reduce_chat_history(items) == [
            HistoryEntry(role="user", content="Q"),
            HistoryEntry(role="model", content=""),
        ]

    def test_input_not_mutated(self):
        messages = _log(("system", "s"), ("user", "a"))
        before = list(messages)
        reduce_chat_history(messages)
        assert messages == before
