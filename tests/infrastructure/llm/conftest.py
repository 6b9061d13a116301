"""Common fixtures for LLM infrastructure tests."""

from datetime import datetime, timezone

import pytest

from chatsummary.config import LLMConfig
from chatsummary.domain.entities import ChatMessage
from chatsummary.infrastructure.llm import LiteLLMClient


@pytest.fixture
def llm_config() -> LLMConfig:
    """Create LLM config."""
    return LLMConfig(model="gpt-4o", temperature=0.7, max_tokens=1000)


@pytest.fixture
def llm_client(llm_config: LLMConfig) -> LiteLLMClient:
    """Create LiteLLMClient instance."""
    return LiteLLMClient(llm_config)


@pytest.fixture
def timestamp() -> datetime:
    """Create test timestamp."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def chat_messages(timestamp: datetime) -> list[ChatMessage]:
    """Create a short conversation."""
    return [
        ChatMessage(sender="alice", message="hi", timestamp=timestamp),
        ChatMessage(sender="bob", message="hello", timestamp=timestamp),
    ]
