"""
Grouping of consecutive normalized messages.

Consecutive messages whose roles fall into the same grouping bucket are
batched together, so a renderer can draw one speaker block per run.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .normalized import NormalizedMessage
from .roles import normalize_role_for_grouping


@dataclass
class MessageGroup:
    """A run of consecutive messages sharing a grouping role."""

    role: str
    messages: list[NormalizedMessage] = field(default_factory=list)

    @property
    def timestamp(self) -> int | None:
        """Timestamp of the first message in the group."""
        if not self.messages:
            return None
        return self.messages[0].timestamp


def group_messages(messages: Iterable[NormalizedMessage]) -> list[MessageGroup]:
    """
    Batch consecutive same-bucket messages.

    Example:
        >>> groups = group_messages(normalize_messages(raw_transcript))
        >>> [g.role for g in groups]
        ['user', 'assistant', 'tool', 'assistant']
    """
    groups: list[MessageGroup] = []
    current: MessageGroup | None = None

    for msg in messages:
        role = normalize_role_for_grouping(msg.role)
        if current and current.role == role:
            current.messages.append(msg)
        else:
            current = MessageGroup(role=role, messages=[msg])
            groups.append(current)

    return groups
