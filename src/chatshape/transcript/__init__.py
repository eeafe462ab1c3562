"""
Transcript normalization for chat rendering.

The main entry point is `normalize_message()` which turns one raw transcript
entry (any dict, no guaranteed fields) into a NormalizedMessage. Tool cards
are extracted separately with `extract_tool_cards()`.

Example:
    from chatshape.transcript import normalize_message, extract_tool_cards

    raw = {
        "role": "assistant",
        "content": [{"type": "tool_use", "name": "search", "arguments": {"q": "x"}}],
    }
    normalized = normalize_message(raw)   # role == "toolResult"
    cards = extract_tool_cards(raw)       # one "search" call card
"""

from chatshape.errors import SerializationError
from .extract import (
    ContentShape,
    DisplayText,
    ShapedContent,
    content_shape,
    dump_structure,
    extract_content_items,
    extract_display_text,
    extract_text,
    extract_thinking,
    format_reasoning_markdown,
)
from .grouping import MessageGroup, group_messages
from .normalized import (
    ContentItem,
    NormalizedMessage,
    NormalizedRole,
    ToolCard,
)
from .normalizer import normalize_message, normalize_messages
from .roles import (
    classify_role,
    has_tool_markers,
    is_tool_result_message,
    normalize_role_for_grouping,
    resolve_role,
)
from .tool_cards import extract_tool_cards, tool_card_base, tool_card_identity

__all__ = [
    # Normalizer
    "normalize_message",
    "normalize_messages",
    "NormalizedMessage",
    "ContentItem",
    "NormalizedRole",
    # Roles
    "resolve_role",
    "classify_role",
    "has_tool_markers",
    "normalize_role_for_grouping",
    "is_tool_result_message",
    # Content
    "ContentShape",
    "ShapedContent",
    "content_shape",
    "extract_content_items",
    "extract_text",
    "extract_thinking",
    "format_reasoning_markdown",
    "extract_display_text",
    "DisplayText",
    "dump_structure",
    "SerializationError",
    # Tool cards
    "ToolCard",
    "extract_tool_cards",
    "tool_card_base",
    "tool_card_identity",
    # Grouping
    "MessageGroup",
    "group_messages",
]
