"""Derive the bounded provider context from a full chat log."""

from typing import Any, Iterable, List, Mapping, Union

from ..constants import CHAT_HISTORY_LIMIT
from ..models.chat import ChatMessage, HistoryEntry, Sender

MessageLike = Union[ChatMessage, Mapping[str, Any]]


def _field(message: MessageLike, name: str) -> Any:
    if isinstance(message, Mapping):
        return message.get(name)
    return getattr(message, name, None)


def _sender_value(message: MessageLike) -> str:
    sender = _field(message, "sender")
    if isinstance(sender, Sender):
        return sender.value
    return str(sender) if sender is not None else ""


def reduce_chat_history(messages: Iterable[MessageLike]) -> List[HistoryEntry]:
    """
    Reduce a chat log to the context sent with each chat turn.

    System entries are dropped, only the last CHAT_HISTORY_LIMIT remaining
    entries are kept (original order), and each is relabeled "user" or
    "model". Accepts ChatMessage objects or plain dicts from request bodies.
    """
    relevant = [m for m in messages if _sender_value(m) != Sender.SYSTEM.value]
    recent = relevant[-CHAT_HISTORY_LIMIT:]
    return [
        HistoryEntry(
            role="user" if _sender_value(m) == Sender.USER.value else "model",
            content=str(_field(m, "text") or ""),
        )
        for m in recent
    ]
