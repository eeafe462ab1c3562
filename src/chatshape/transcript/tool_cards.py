"""
Tool card extraction.

Scans a message's content for tool call and tool result fragments and turns
each into a ToolCard. Cards keep source order and are never deduplicated.

Card identity is ``"{base}:{position}"`` where base is, first match wins:
the tool-call id, the message id, the ``messageId`` alias, the timestamp,
or the ``"tool-card"`` placeholder. Position counts tool cards only, so the
same message always yields the same identities.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .extract import (
    coerce_args,
    content_shape,
    detach,
    extract_text,
    join_text_parts,
)
from .fields import (
    CALL_SHAPE_ARGS,
    CARD_IDENTITY,
    FRAGMENT_ARGS,
    FRAGMENT_CALL_ID,
    FRAGMENT_NAME,
    RESULT_PAYLOAD,
    TIMESTAMP,
    TOOL_CALL_TYPES,
    TOOL_NAME,
    TOOL_RESULT_TYPES,
    fragment_type,
)
from .normalized import ToolCard, ToolCardKind
from .roles import routes_to_tool_card

logger = logging.getLogger(__name__)

PLACEHOLDER_BASE = "tool-card"
DEFAULT_TOOL_NAME = "tool"


def _format_timestamp(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def tool_card_base(message: Any) -> str:
    """Identity prefix shared by every card of ``message``."""
    base = CARD_IDENTITY.first(message)
    if base is not None:
        return base
    timestamp = TIMESTAMP.first(message)
    if timestamp is not None:
        return _format_timestamp(timestamp)
    return PLACEHOLDER_BASE


def tool_card_identity(message: Any, position: int) -> str:
    return f"{tool_card_base(message)}:{position}"


def _fragment_kind(fragment: Any) -> ToolCardKind | None:
    tag = fragment_type(fragment)
    if tag in TOOL_RESULT_TYPES:
        return "result"
    if tag in TOOL_CALL_TYPES:
        return "call"
    if FRAGMENT_NAME.present(fragment) and CALL_SHAPE_ARGS.present(fragment):
        return "call"
    return None


def _payload_text(payload: Any) -> str | None:
    """Text of a result payload; non-text payloads are rendered as compact JSON."""
    if payload is None:
        return None
    text = join_text_parts(payload)
    if text is not None:
        return text
    try:
        return json.dumps(payload, default=str, ensure_ascii=False, skipkeys=True)
    except (ValueError, TypeError, RecursionError) as e:
        logger.debug(f"Result payload has no text rendering: {e}")
        return None


def extract_tool_cards(message: Any) -> list[ToolCard]:
    """
    Tool cards for one message, in the order the fragments occur.

    A message routed to tool cards (strict tool-result role or a tool-call id)
    with no result fragment of its own gets one message-level result card.
    """
    base = tool_card_base(message)
    cards: list[ToolCard] = []

    for fragment in content_shape(message).parts:
        kind = _fragment_kind(fragment)
        if kind is None:
            continue

        position = len(cards)
        name = FRAGMENT_NAME.first(fragment) or DEFAULT_TOOL_NAME
        call_id = FRAGMENT_CALL_ID.first(fragment)

        if kind == "call":
            cards.append(
                ToolCard(
                    identity=f"{base}:{position}",
                    kind="call",
                    name=name,
                    position=position,
                    args=coerce_args(FRAGMENT_ARGS.first(fragment)),
                    call_id=call_id,
                )
            )
        else:
            payload = RESULT_PAYLOAD.first(fragment)
            cards.append(
                ToolCard(
                    identity=f"{base}:{position}",
                    kind="result",
                    name=name,
                    position=position,
                    text=_payload_text(payload),
                    result=detach(payload),
                    call_id=call_id,
                )
            )

    has_result = any(card.kind == "result" for card in cards)
    if routes_to_tool_card(message) and not has_result:
        position = len(cards)
        cards.append(
            ToolCard(
                identity=f"{base}:{position}",
                kind="result",
                name=TOOL_NAME.first(message) or DEFAULT_TOOL_NAME,
                position=position,
                text=extract_text(message),
            )
        )
        logger.debug(f"Added message-level result card {base}:{position}")

    return cards
