"""
Role classification for transcript entries.

Two checks coexist on purpose:

- resolve_role()/classify_role() are heuristic. Any tool evidence (a tool-call
  id, a tool-typed or call-shaped content fragment, a tool name) reclassifies
  the entry as a tool result, whatever its declared role.
- is_tool_result_message() is strict and only looks at the declared role.

Callers pick the one they need; the answers differ on the same input.
"""

from __future__ import annotations

import logging
from typing import Any

from .fields import (
    CALL_SHAPE_ARGS,
    FRAGMENT_NAME,
    ROLE,
    TOOL_CALL_ID,
    TOOL_FRAGMENT_TYPES,
    TOOL_NAME,
    TOOL_RESULT_ROLES,
    TOOL_ROLES,
    as_mapping,
    fragment_type,
)
from .normalized import TOOL_RESULT_ROLE, UNKNOWN_ROLE, NormalizedRole

logger = logging.getLogger(__name__)

_GROUPING_PASSTHROUGH = frozenset({"assistant", "user", "system"})


def declared_role(message: Any) -> str:
    """The ``role`` field as sent, or ``"unknown"`` when absent or not a string."""
    return ROLE.first(message) or UNKNOWN_ROLE


def is_tool_fragment(fragment: Any) -> bool:
    """
    True for a fragment typed as a tool call/result, or shaped like a call.

    Only the type tag is compared case-insensitively. A call shape is a string
    ``name`` plus non-null ``arguments`` or ``args``.
    """
    if fragment_type(fragment) in TOOL_FRAGMENT_TYPES:
        return True
    return FRAGMENT_NAME.present(fragment) and CALL_SHAPE_ARGS.present(fragment)


def has_tool_content(message: Any) -> bool:
    content = as_mapping(message).get("content")
    if not isinstance(content, (list, tuple)):
        return False
    return any(is_tool_fragment(fragment) for fragment in content)


def has_tool_markers(message: Any) -> bool:
    """Disjunction of every known tool encoding."""
    return (
        TOOL_CALL_ID.present(message)
        or has_tool_content(message)
        or TOOL_NAME.present(message)
    )


def resolve_role(message: Any) -> str:
    """
    Effective role of a message.

    Returns the declared role unless tool markers are present, in which case
    the message becomes ``"toolResult"``.
    """
    role = declared_role(message)
    if has_tool_markers(message):
        if role != TOOL_RESULT_ROLE:
            logger.debug(f"Reclassifying message with role {role!r} as tool result")
        return TOOL_RESULT_ROLE
    return role


def normalize_role_for_grouping(role: str) -> str:
    """
    Map a role onto its grouping bucket.

    Tool-ish roles collapse to ``"tool"``, the three conversational roles are
    lower-cased, and anything else is returned exactly as given.
    """
    if not isinstance(role, str):
        return UNKNOWN_ROLE
    lower = role.lower()
    if lower in TOOL_ROLES:
        return NormalizedRole.TOOL.value
    if lower in _GROUPING_PASSTHROUGH:
        return lower
    return role


def classify_role(message: Any) -> NormalizedRole:
    """Heuristic role of a message as a fixed grouping bucket."""
    grouping = normalize_role_for_grouping(resolve_role(message))
    try:
        return NormalizedRole(grouping)
    except ValueError:
        return NormalizedRole.OTHER


def is_tool_result_message(message: Any) -> bool:
    """Strict check: the declared role itself is ``toolResult``/``tool_result``."""
    role = ROLE.first(message)
    return role is not None and role.lower() in TOOL_RESULT_ROLES


def routes_to_tool_card(message: Any) -> bool:
    """
    True when a message's content belongs in a tool card rather than prose.

    Narrower than has_tool_markers(): the strict role check, or a tool-call id.
    """
    return is_tool_result_message(message) or TOOL_CALL_ID.present(message)
