"""Chat summary service protocol."""

from typing import Protocol

from chatsummary.domain.entities import ChatMessage


class ChatSummaryService(Protocol):
    """Chat summarization service protocol.

    Turns an ordered sequence of chat messages into a text summary.
    """

    def summarize(self, messages: list[ChatMessage]) -> str:
        """Summarize chat messages.

        Args:
            messages: Messages in chronological order. May be empty.

        Returns:
            Summary text.
        """
        ...
