"""YAML transcript loading."""

import logging
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

import yaml

from chatsummary.domain.entities import ChatMessage
from chatsummary.infrastructure.exceptions import TranscriptError

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("sender", "message", "timestamp")


def _parse_timestamp(value: Any, index: int) -> datetime:
    """Parse a timestamp value read from YAML.

    PyYAML turns unquoted ISO timestamps into datetime and bare dates into
    date; quoted values arrive as strings. A date means midnight.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time())
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise TranscriptError(
                f"messages[{index}].timestamp is not an ISO-8601 value: {value!r}"
            ) from e
    raise TranscriptError(
        f"messages[{index}].timestamp has unsupported type {type(value).__name__}"
    )


def _to_chat_message(item: Any, index: int) -> ChatMessage:
    if not isinstance(item, dict):
        raise TranscriptError(f"messages[{index}] must be a mapping")

    for field in _REQUIRED_FIELDS:
        if item.get(field) is None:
            raise TranscriptError(f"messages[{index}].{field} is missing")

    return ChatMessage(
        sender=str(item["sender"]),
        message=str(item["message"]),
        timestamp=_parse_timestamp(item["timestamp"], index),
    )


def _message_items(data: Any) -> list[Any]:
    """Return the raw message list of a parsed transcript document."""
    if data is None:
        return []
    if isinstance(data, dict):
        if "messages" not in data:
            raise TranscriptError("Transcript must be a list of messages")
        data = data["messages"]
        if data is None:
            return []
    if not isinstance(data, list):
        raise TranscriptError("Transcript must be a list of messages")
    return data


def load_chat_messages(path: str | Path) -> list[ChatMessage]:
    """Load chat messages from a YAML transcript.

    The file holds either a list of messages or a mapping with a
    ``messages`` list. Each message has ``sender``, ``message`` and
    ``timestamp`` keys.

    Args:
        path: Transcript file path.

    Returns:
        Messages in file order.

    Raises:
        OSError: The file cannot be read (FileNotFoundError if missing).
        TranscriptError: The file structure is invalid.
        yaml.YAMLError: YAML syntax error.
    """
    path = Path(path)

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    messages = [
        _to_chat_message(item, i) for i, item in enumerate(_message_items(data))
    ]
    logger.debug("Loaded %d messages from %s", len(messages), path)
    return messages
