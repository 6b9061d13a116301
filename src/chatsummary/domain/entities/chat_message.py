"""Chat message entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ChatMessage:
    """Chat message entity.

    Attributes:
        sender: Identifier of the author.
        message: Message content.
        timestamp: When the message was sent.
    """

    sender: str
    message: str
    timestamp: datetime
