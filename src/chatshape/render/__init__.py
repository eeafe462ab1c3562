"""
Render-ready composition of transcript entries.

Markdown conversion and expand/collapse state are owned by the caller and
injected; this layer only decides what goes into each block.

Example:
    from chatshape.render import render_message, RenderOptions, ToolOutputProps

    expanded: dict[str, bool] = {}
    props = ToolOutputProps(
        is_expanded=lambda identity: expanded.get(identity, False),
        on_toggle=lambda identity, value: expanded.__setitem__(identity, value),
    )
    rendered = render_message(raw, props, RenderOptions(show_reasoning=True))
"""

from .message import escape_markdown, render_message, speaker_for, toggle_tool_card
from .types import (
    IsExpanded,
    MarkdownRenderer,
    OnToggle,
    RenderedMessage,
    RenderOptions,
    ToolCardView,
    ToolOutputProps,
)

__all__ = [
    "render_message",
    "toggle_tool_card",
    "escape_markdown",
    "speaker_for",
    "RenderedMessage",
    "RenderOptions",
    "ToolCardView",
    "ToolOutputProps",
    "MarkdownRenderer",
    "IsExpanded",
    "OnToggle",
]
