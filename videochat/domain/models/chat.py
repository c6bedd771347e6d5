# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from ...utils.datetime_utils import utc_now


class Sender(str, Enum):
    USER = "user"
    AI = "ai"
    SYSTEM = "system"


@dataclass(frozen=True)
class ChatMessage:
    """One entry of the append-only chat log."""
    text: str
    sender: str
    produced_at: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class HistoryEntry:
    """Role-labeled context entry supplied to the provider."""
    role: str  # "user" | "model"
    content: str


@dataclass(frozen=True)
class AnalysisResult:
    """Initial analysis of a video. Immutable once produced."""
    text: str
    source_uri: Optional[str] = None
    produced_at: datetime = field(default_factory=utc_now)
    kind: str = "initial-analysis"


@dataclass(frozen=True)
class ChatTurnResult:
    """Provider reply to one chat question."""
    text: str
    produced_at: datetime = field(default_factory=utc_now)
    kind: str = "chat-response"
