"""ChatCompletionClient backed by LiteLLM."""

import dataclasses
import logging
from typing import Any

import litellm
from litellm.exceptions import AuthenticationError, RateLimitError

from chatsummary.config import LLMConfig
from chatsummary.infrastructure.exceptions import (
    LLMAuthenticationError,
    LLMError,
    LLMRateLimitError,
)

logger = logging.getLogger(__name__)

# Checked in order; anything unmatched becomes a plain LLMError.
_ERROR_MAP: tuple[tuple[type[Exception], type[LLMError]], ...] = (
    (AuthenticationError, LLMAuthenticationError),
    (RateLimitError, LLMRateLimitError),
)


def _translate_error(error: Exception) -> LLMError:
    target = next(
        (local for source, local in _ERROR_MAP if isinstance(error, source)),
        LLMError,
    )
    level = logging.WARNING if target is LLMRateLimitError else logging.ERROR
    logger.log(level, "Completion failed (%s): %s", type(error).__name__, error)
    return target(str(error))


class LiteLLMClient:
    """Sends chat completions through ``litellm.completion``.

    Every LLMConfig field is passed to litellm under the same name, so the
    config doubles as the default request parameters.
    """

    def __init__(self, config: LLMConfig) -> None:
        self._config = config

    @property
    def model(self) -> str:
        return self._config.model

    def complete(self, messages: list[dict[str, str]], **overrides: Any) -> str:
        """Run one completion and return the reply text.

        Raises:
            LLMAuthenticationError: Credentials were rejected.
            LLMRateLimitError: The provider throttled the call.
            LLMError: Any other failure.
        """
        request = {
            **dataclasses.asdict(self._config),
            **overrides,
            "messages": messages,
        }
        try:
            response = litellm.completion(**request)
        except Exception as e:
            raise _translate_error(e) from e

        reply = response.choices[0].message.content or ""
        logger.debug("%s replied with %d chars", request["model"], len(reply))
        return reply
