"""Errors raised by the infrastructure adapters."""


class LLMError(Exception):
    """A chat-completion request failed."""


class LLMRateLimitError(LLMError):
    """The provider throttled the request."""


class LLMAuthenticationError(LLMError):
    """The provider rejected the credentials."""


class TranscriptError(Exception):
    """A transcript file does not have the expected structure."""
