"""
Message normalizer - the composition root for a single transcript entry.

Combines role classification and content extraction into a NormalizedMessage.
Pure apart from one documented exception: a message without a numeric
timestamp is stamped with the current time.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping
from typing import Any

from .extract import extract_content_items
from .fields import MESSAGE_ID, TIMESTAMP
from .normalized import NormalizedMessage
from .roles import resolve_role

logger = logging.getLogger(__name__)


def _now_millis() -> int:
    return int(time.time() * 1000)


def normalize_message(message: Any) -> NormalizedMessage:
    """
    Normalize one raw transcript entry.

    Args:
        message: Raw entry. No field is required; non-mappings are treated
            as an empty entry.

    Returns:
        NormalizedMessage with the effective role, typed content items,
        epoch-millis timestamp and the declared id (never synthesized).

    Example:
        >>> msg = normalize_message({"role": "user", "content": "Hi", "timestamp": 1})
        >>> (msg.role, msg.content[0].text, msg.timestamp)
        ('user', 'Hi', 1)
    """
    timestamp = TIMESTAMP.first(message)

    return NormalizedMessage(
        role=resolve_role(message),
        content=extract_content_items(message),
        timestamp=int(timestamp) if timestamp is not None else _now_millis(),
        id=MESSAGE_ID.first(message),
    )


def normalize_messages(messages: Iterable[Any] | Mapping[str, Any]) -> list[NormalizedMessage]:
    """Normalize a transcript. A single mapping is treated as a one-entry transcript."""
    if isinstance(messages, Mapping):
        return [normalize_message(messages)]
    normalized = [normalize_message(message) for message in messages]
    logger.debug(f"Normalized {len(normalized)} transcript entries")
    return normalized
