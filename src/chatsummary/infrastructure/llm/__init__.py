"""LLM integration."""

from chatsummary.infrastructure.llm.chat_summary_service import LLMChatSummaryService
from chatsummary.infrastructure.llm.client import LiteLLMClient

__all__ = ["LLMChatSummaryService", "LiteLLMClient"]
