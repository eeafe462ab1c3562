"""Renderer-facing entry point: one raw message to a RenderedMessage."""

from __future__ import annotations

import html
import logging
from typing import Any

from chatshape.transcript.extract import (
    extract_display_text,
    extract_thinking,
    format_reasoning_markdown,
)
from chatshape.transcript.fields import TIMESTAMP
from chatshape.transcript.normalized import NormalizedRole
from chatshape.transcript.roles import normalize_role_for_grouping, resolve_role
from chatshape.transcript.tool_cards import extract_tool_cards

from .types import (
    MarkdownRenderer,
    RenderedMessage,
    RenderOptions,
    ToolCardView,
    ToolOutputProps,
)

logger = logging.getLogger(__name__)

_SPEAKERS: dict[str, tuple[str, str]] = {
    NormalizedRole.ASSISTANT.value: ("assistant", "Assistant"),
    NormalizedRole.USER.value: ("user", "You"),
    NormalizedRole.TOOL.value: ("tool", "Working"),
}


def escape_markdown(text: str) -> str:
    """Default converter: HTML-escape only, no markdown rendering."""
    return html.escape(text)


def speaker_for(group: str) -> tuple[str, str]:
    """CSS class and speaker label for a grouping role."""
    return _SPEAKERS.get(group, (NormalizedRole.OTHER.value, group))


def render_message(
    message: Any,
    props: ToolOutputProps | None = None,
    options: RenderOptions | None = None,
    markdown: MarkdownRenderer = escape_markdown,
) -> RenderedMessage:
    """
    Build the render-ready composite for a raw message.

    Args:
        message: Raw transcript entry.
        props: Expand/collapse accessors, keyed by tool card identity.
        options: Reasoning visibility, streaming flag, JSON fallback indent.
        markdown: Converts an extracted markdown block to sanitized markup.

    Returns:
        RenderedMessage with primary text, optional reasoning block and
        tool card views in source order.

    Raises:
        SerializationError: If the message needs the JSON fallback and
            cannot be serialized.
    """
    props = props or ToolOutputProps()
    options = options or RenderOptions()

    cards = extract_tool_cards(message)
    display = extract_display_text(
        message,
        has_tool_cards=bool(cards),
        json_indent=options.json_indent,
    )
    thinking = extract_thinking(message, show_reasoning=options.show_reasoning)

    text_html = markdown(display.to_markdown()) if display else None
    reasoning_html = None
    if thinking:
        reasoning_markdown = format_reasoning_markdown(thinking)
        if reasoning_markdown:
            reasoning_html = markdown(reasoning_markdown)

    role = resolve_role(message)
    group = normalize_role_for_grouping(role)
    css_class, label = speaker_for(group)

    views = tuple(
        ToolCardView(card=card, expanded=props.expanded(card.identity))
        for card in cards
    )
    logger.debug(
        f"Rendered {role!r} message: {len(views)} tool cards, "
        f"text={'yes' if text_html else 'no'}"
    )

    return RenderedMessage(
        role=role,
        group=group,
        css_class=css_class,
        label=label,
        text_html=text_html,
        reasoning_html=reasoning_html,
        tool_cards=views,
        timestamp=TIMESTAMP.first(message),
        streaming=options.streaming,
    )


def toggle_tool_card(view: ToolCardView, props: ToolOutputProps | None = None) -> bool:
    """
    Report a toggle of ``view`` to the caller and return the new state.

    The view itself is not changed; the caller re-renders from its own store.
    """
    expanded = not view.expanded
    (props or ToolOutputProps()).toggle(view.identity, expanded)
    return expanded
