"""LLM-backed chat summary service."""

import logging

from chatsummary.domain.entities import ChatMessage
from chatsummary.domain.exceptions import SummaryNotImplementedError
from chatsummary.domain.services import ChatCompletionClient, ChatSummaryService

logger = logging.getLogger(__name__)


class LLMChatSummaryService(ChatSummaryService):
    """ChatSummaryService implementation holding a chat-completion client.

    The prompt construction and response handling for summaries do not
    exist yet, so summarize() never calls the client and always raises
    SummaryNotImplementedError instead of returning an empty summary.
    """

    def __init__(self, client: ChatCompletionClient) -> None:
        """Initialize the service.

        Args:
            client: Chat-completion client to summarize with.
        """
        self._client = client

    @property
    def client(self) -> ChatCompletionClient:
        """The injected chat-completion client."""
        return self._client

    def summarize(self, messages: list[ChatMessage]) -> str:
        """Summarize chat messages.

        Args:
            messages: Messages in chronological order. May be empty.

        Raises:
            SummaryNotImplementedError: Always.
        """
        logger.debug(
            "Summary requested for %d messages (model=%s)",
            len(messages),
            self._client.model,
        )
        raise SummaryNotImplementedError(len(messages))
