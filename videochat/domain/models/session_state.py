from enum import Enum
from typing import Protocol, runtime_checkable


class LifecycleState(str, Enum):
    """States of the upload → analyze → chat lifecycle. Chatting loops on itself."""
    EMPTY = "empty"
    UPLOADED = "uploaded"
    ANALYZED = "analyzed"
    CHATTING = "chatting"


@runtime_checkable
class ChatSession(Protocol):
    """What a session registry needs from a session: its id and a teardown."""
    session_id: str

    def close(self) -> None:
        ...
