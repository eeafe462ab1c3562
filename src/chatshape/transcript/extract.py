"""
Content extraction: narrative text, reasoning text and typed content items.

The content field is inspected once by content_shape() and every extractor
dispatches on the result:

    str content          → ContentShape.TEXT
    list/tuple content   → ContentShape.PARTS
    flat ``text`` field  → ContentShape.LEGACY_TEXT
    anything else        → ContentShape.EMPTY
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

from chatshape.errors import SerializationError

from .fields import (
    FRAGMENT_ARGS,
    FRAGMENT_NAME,
    FRAGMENT_TEXT,
    FRAGMENT_THINKING,
    LEGACY_TEXT,
    MESSAGE_THINKING,
    TEXT_TYPES,
    THINKING_TYPES,
    TOOL_CALL_TYPES,
    TOOL_RESULT_TYPES,
    as_mapping,
    fragment_type,
)
from .normalized import ContentItem, ContentItemType
from .roles import declared_role, normalize_role_for_grouping, routes_to_tool_card

logger = logging.getLogger(__name__)


class ContentShape(str, Enum):
    TEXT = "text"
    PARTS = "parts"
    LEGACY_TEXT = "legacy_text"
    EMPTY = "empty"


@dataclass(frozen=True)
class ShapedContent:
    """The content of a message after the one-time shape decision."""

    shape: ContentShape
    text: str | None = None
    parts: tuple[Any, ...] = ()


def content_shape(message: Any) -> ShapedContent:
    m = as_mapping(message)
    content = m.get("content")
    if isinstance(content, str):
        return ShapedContent(ContentShape.TEXT, text=content)
    if isinstance(content, (list, tuple)):
        return ShapedContent(ContentShape.PARTS, parts=tuple(content))
    legacy = LEGACY_TEXT.first(m)
    if legacy is not None:
        return ShapedContent(ContentShape.LEGACY_TEXT, text=legacy)
    return ShapedContent(ContentShape.EMPTY)


# =============================================================================
# Content items
# =============================================================================


def _item_type(tag: str) -> ContentItemType:
    if tag in TOOL_CALL_TYPES:
        return "toolCall"
    if tag in TOOL_RESULT_TYPES:
        return "toolResult"
    # Unspecified and unrecognized tags both become text; raw_type keeps the tag
    return "text"


def detach(value: Any) -> Any:
    """Deep copy of ``value``, or ``value`` itself when it cannot be copied."""
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error, RecursionError) as e:
        logger.debug(f"Keeping uncopyable value by reference: {e}")
        return value


def coerce_args(value: Any) -> dict[str, Any] | None:
    """
    Tool arguments as a fresh dict.

    Mappings are deep-copied so the result never aliases caller data. A JSON
    string that decodes to an object is accepted. Anything else, including
    JSON nested too deeply to decode, is None.
    """
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except (ValueError, RecursionError):
            return None
    if not isinstance(value, Mapping):
        return None
    return {str(key): detach(item) for key, item in value.items()}


def _coerce_fragment(fragment: Any) -> ContentItem:
    if isinstance(fragment, str):
        return ContentItem(type="text", text=fragment)
    if not isinstance(fragment, Mapping):
        return ContentItem(type="unknown")

    raw_type = fragment.get("type")
    return ContentItem(
        type=_item_type(fragment_type(fragment)),
        text=FRAGMENT_TEXT.first(fragment),
        name=FRAGMENT_NAME.first(fragment),
        args=coerce_args(FRAGMENT_ARGS.first(fragment)),
        raw_type=raw_type if isinstance(raw_type, str) else None,
    )


def extract_content_items(message: Any) -> tuple[ContentItem, ...]:
    """Typed content items in source order. Unrecognized fragments are kept."""
    shaped = content_shape(message)
    if shaped.shape is ContentShape.PARTS:
        return tuple(_coerce_fragment(fragment) for fragment in shaped.parts)
    if shaped.text is not None:
        return (ContentItem(type="text", text=shaped.text),)
    return ()


# =============================================================================
# Narrative text
# =============================================================================


def _is_text_fragment(fragment: Any) -> bool:
    tag = fragment_type(fragment)
    return tag in TEXT_TYPES or (tag == "" and FRAGMENT_TEXT.present(fragment))


def join_text_parts(parts: Any) -> str | None:
    """Join the text of every text fragment with newlines, or None if there is none."""
    if isinstance(parts, str):
        return parts
    if not isinstance(parts, (list, tuple)):
        return None

    texts: list[str] = []
    for fragment in parts:
        if isinstance(fragment, str):
            texts.append(fragment)
        elif _is_text_fragment(fragment):
            text = FRAGMENT_TEXT.first(fragment)
            if text is not None:
                texts.append(text)

    if not texts:
        return None
    return "\n".join(texts)


def extract_text(message: Any) -> str | None:
    """Narrative text of a message. String content is returned unchanged."""
    shaped = content_shape(message)
    if shaped.shape is ContentShape.PARTS:
        return join_text_parts(shaped.parts)
    return shaped.text


# =============================================================================
# Reasoning
# =============================================================================


def extract_thinking(message: Any, *, show_reasoning: bool = False) -> str | None:
    """
    Reasoning text of an assistant message.

    Returns None unless the caller opted in with ``show_reasoning`` and the
    declared role is assistant. Typed thinking fragments come first, then a
    flat ``thinking``/``reasoning`` field.
    """
    if not show_reasoning:
        return None
    if normalize_role_for_grouping(declared_role(message)) != "assistant":
        return None

    segments: list[str] = []
    for fragment in content_shape(message).parts:
        if fragment_type(fragment) not in THINKING_TYPES:
            continue
        text = FRAGMENT_THINKING.first(fragment)
        if text and text.strip():
            segments.append(text.strip())

    flat = MESSAGE_THINKING.first(message)
    if flat and flat.strip():
        segments.append(flat.strip())

    if not segments:
        return None
    return "\n".join(segments)


def format_reasoning_markdown(text: str) -> str:
    """Render reasoning as its own markdown block: a header and italic lines."""
    lines = [line.strip() for line in text.strip().splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        return ""
    return "\n".join(["_Reasoning:_", *(f"_{line}_" for line in lines)])


# =============================================================================
# Display text
# =============================================================================


@dataclass(frozen=True)
class DisplayText:
    """Primary text chosen for display, and how it was obtained."""

    kind: Literal["text", "json"]
    value: str

    def to_markdown(self) -> str:
        if self.kind == "json":
            return "\n".join(["```json", self.value, "```"])
        return self.value


def dump_structure(message: Any, indent: int = 2) -> str:
    """
    Pretty-printed JSON of a whole message.

    Raises:
        SerializationError: If the message contains cyclic references.
    """
    try:
        return json.dumps(
            message, indent=indent, default=str, ensure_ascii=False, skipkeys=True
        )
    except (ValueError, TypeError, RecursionError) as e:
        logger.warning(f"Failed to serialize message for fallback display: {e}")
        raise SerializationError(
            "Message cannot be serialized for display", reason=str(e)
        ) from e


def extract_display_text(
    message: Any,
    *,
    has_tool_cards: bool,
    json_indent: int = 2,
) -> DisplayText | None:
    """
    Primary display text, in priority order:

    1. non-blank extracted narrative text
    2. non-blank flat string ``content``
    3. a JSON dump of the whole message, only if it yields no tool cards

    Messages routed to tool cards get no primary text at all.

    Raises:
        SerializationError: If the JSON fallback is needed and fails.
    """
    if routes_to_tool_card(message):
        return None

    text = extract_text(message)
    if text and text.strip():
        return DisplayText("text", text)

    content = as_mapping(message).get("content")
    if isinstance(content, str) and content.strip():
        return DisplayText("text", content)

    if has_tool_cards:
        return None

    logger.debug("No extractable text, falling back to structural dump")
    return DisplayText("json", dump_structure(message, indent=json_indent))
