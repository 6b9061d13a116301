"""Chat-completion client protocol."""

from typing import Any, Protocol


class ChatCompletionClient(Protocol):
    """Text generation from OpenAI-format chat messages."""

    @property
    def model(self) -> str:
        """Model identifier requests are sent to."""
        ...

    def complete(self, messages: list[dict[str, str]], **overrides: Any) -> str:
        """Return the reply to ``messages``.

        ``overrides`` replace configured generation parameters for one call.
        """
        ...
