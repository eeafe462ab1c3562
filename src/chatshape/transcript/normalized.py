"""
Normalized shapes produced from raw transcript entries.

The flow is:

    Raw Entry            →  Normalized Message    →  Rendered Message
    (dict[str, Any])        (NormalizedMessage)       (chatshape.render)

Raw entries are only ever read. Everything here is constructed fresh per
call and is immutable once returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

ContentItemType = Literal["text", "toolCall", "toolResult", "unknown"]
ToolCardKind = Literal["call", "result"]

# Role assigned to any entry carrying tool evidence
TOOL_RESULT_ROLE = "toolResult"
UNKNOWN_ROLE = "unknown"


class NormalizedRole(str, Enum):
    """Grouping buckets used for styling and batching."""

    ASSISTANT = "assistant"
    USER = "user"
    SYSTEM = "system"
    TOOL = "tool"
    OTHER = "other"


class ContentItem(BaseModel):
    """One fragment of message content."""

    model_config = ConfigDict(frozen=True)

    type: ContentItemType = "text"
    text: str | None = None
    name: str | None = None
    args: dict[str, Any] | None = None
    raw_type: str | None = None  # type tag as sent upstream, if any


class NormalizedMessage(BaseModel):
    """
    A transcript entry after role classification and content coercion.

    ``role`` is the declared role, or ``"toolResult"`` when the entry was
    reclassified. ``id`` is only ever the declared id.
    """

    model_config = ConfigDict(frozen=True)

    role: str
    content: tuple[ContentItem, ...] = ()
    timestamp: int
    id: str | None = None


@dataclass(frozen=True)
class ToolCard:
    """
    A tool call or tool result pulled out of one message.

    ``identity`` is stable across re-renders of the same logical message and
    is the key external expand/collapse state hangs on.
    """

    identity: str
    kind: ToolCardKind
    name: str
    position: int
    args: dict[str, Any] | None = None
    text: str | None = None
    result: Any = None  # result payload as sent, copied; None for calls
    call_id: str | None = None  # fragment-level call id, if the producer sent one
