"""Domain services."""

from chatsummary.domain.services.chat_completion_client import ChatCompletionClient
from chatsummary.domain.services.chat_summary_service import ChatSummaryService

__all__ = ["ChatCompletionClient", "ChatSummaryService"]
