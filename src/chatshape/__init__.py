"""
chatshape - normalize loosely-typed chat transcript entries for rendering.

Transcript Layer:
    normalize_message: Raw entry → NormalizedMessage (role + content items)
    classify_role: Heuristic grouping bucket, tool evidence wins
    is_tool_result_message: Strict declared-role check
    extract_text / extract_thinking: Narrative and reasoning text
    extract_tool_cards: Tool call/result cards with stable identities
    group_messages: Batch consecutive same-bucket messages

Render Layer:
    render_message: Raw entry → RenderedMessage (text, reasoning, tool cards)
    ToolOutputProps: Injected expand/collapse accessors

Configuration:
    load_render_options: RenderOptions profiles from chatshape.yaml

Example:
    from chatshape import normalize_message, render_message, RenderOptions

    raw = {"role": "assistant", "content": [{"type": "text", "text": "Hi"}]}
    normalized = normalize_message(raw)
    rendered = render_message(raw, options=RenderOptions(show_reasoning=True))
"""

# Transcript layer
from .transcript import (
    ContentItem,
    MessageGroup,
    NormalizedMessage,
    NormalizedRole,
    ToolCard,
    classify_role,
    extract_content_items,
    extract_text,
    extract_thinking,
    extract_tool_cards,
    group_messages,
    is_tool_result_message,
    normalize_message,
    normalize_messages,
    normalize_role_for_grouping,
)

# Render layer
from .render import (
    RenderedMessage,
    RenderOptions,
    ToolCardView,
    ToolOutputProps,
    render_message,
    toggle_tool_card,
)

# Configuration
from .config import load_render_options

# Errors
from .errors import ChatShapeError, SerializationError

__all__ = [
    # Transcript - Normalizer
    "normalize_message",
    "normalize_messages",
    "NormalizedMessage",
    "ContentItem",
    "NormalizedRole",
    # Transcript - Roles
    "classify_role",
    "normalize_role_for_grouping",
    "is_tool_result_message",
    # Transcript - Content
    "extract_content_items",
    "extract_text",
    "extract_thinking",
    # Transcript - Tool cards
    "ToolCard",
    "extract_tool_cards",
    # Transcript - Grouping
    "MessageGroup",
    "group_messages",
    # Render
    "render_message",
    "toggle_tool_card",
    "RenderedMessage",
    "RenderOptions",
    "ToolCardView",
    "ToolOutputProps",
    # Configuration
    "load_render_options",
    # Errors
    "ChatShapeError",
    "SerializationError",
]

__version__ = "0.0.1"
