"""Domain entities."""

from chatsummary.domain.entities.chat_message import ChatMessage

__all__ = ["ChatMessage"]
