"""
Field probes for loosely-typed transcript entries.

Upstream producers spell the same concept several ways (``toolCallId`` vs
``tool_call_id``, ``args`` vs ``arguments``). Every such concept is declared
here once as an ordered list of keys plus an acceptance check, and the rest
of the package asks the probe instead of poking at raw dicts.

A probe never raises: absent keys and wrong-typed values are skipped and the
next key is tried.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

EMPTY_MAPPING: Mapping[str, Any] = MappingProxyType({})


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return ``value`` if it is a mapping, otherwise an empty read-only mapping."""
    if isinstance(value, Mapping):
        return value
    return EMPTY_MAPPING


def is_str(value: Any) -> bool:
    return isinstance(value, str)


def is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_present(value: Any) -> bool:
    return value is not None


def is_number(value: Any) -> bool:
    """Finite int/float. bool is excluded even though it subclasses int."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


@dataclass(frozen=True)
class FieldProbe(Generic[T]):
    """Ordered accessor attempts for one concept."""

    concept: str
    keys: tuple[str, ...]
    accept: Callable[[Any], bool]

    def first(self, source: Any) -> T | None:
        """Return the first accepted value, or None."""
        mapping = as_mapping(source)
        for key in self.keys:
            value = mapping.get(key)
            if self.accept(value):
                return value
        return None

    def present(self, source: Any) -> bool:
        mapping = as_mapping(source)
        return any(self.accept(mapping.get(key)) for key in self.keys)


# Message-level probes
ROLE: FieldProbe[str] = FieldProbe("role", ("role",), is_str)
MESSAGE_ID: FieldProbe[str] = FieldProbe("id", ("id",), is_str)
TIMESTAMP: FieldProbe[int | float] = FieldProbe("timestamp", ("timestamp",), is_number)
TOOL_CALL_ID: FieldProbe[str] = FieldProbe(
    "tool_call_id", ("toolCallId", "tool_call_id"), is_str
)
TOOL_NAME: FieldProbe[str] = FieldProbe("tool_name", ("toolName", "tool_name"), is_str)
LEGACY_TEXT: FieldProbe[str] = FieldProbe("text", ("text",), is_str)
MESSAGE_THINKING: FieldProbe[str] = FieldProbe(
    "thinking", ("thinking", "reasoning"), is_str
)

# Tool card identity base, highest priority first. Empty strings fall through.
CARD_IDENTITY: FieldProbe[str] = FieldProbe(
    "card_identity",
    ("toolCallId", "tool_call_id", "id", "messageId"),
    is_non_empty_str,
)

# Fragment-level probes
FRAGMENT_NAME: FieldProbe[str] = FieldProbe("name", ("name",), is_str)
FRAGMENT_TEXT: FieldProbe[str] = FieldProbe("text", ("text",), is_str)
# What makes an untyped fragment look like a call
CALL_SHAPE_ARGS: FieldProbe[Any] = FieldProbe(
    "call_args", ("arguments", "args"), is_present
)
FRAGMENT_ARGS: FieldProbe[Any] = FieldProbe(
    "args", ("args", "arguments", "input"), is_present
)
FRAGMENT_CALL_ID: FieldProbe[str] = FieldProbe(
    "call_id",
    ("id", "toolCallId", "tool_call_id", "tool_use_id", "call_id"),
    is_non_empty_str,
)
RESULT_PAYLOAD: FieldProbe[Any] = FieldProbe(
    "result", ("text", "content", "output", "result"), is_present
)
FRAGMENT_THINKING: FieldProbe[str] = FieldProbe(
    "thinking", ("thinking", "reasoning", "text"), is_str
)

# Type tag synonyms, compared against the lower-cased ``type`` field
TOOL_CALL_TYPES = frozenset({"toolcall", "tool_call", "tooluse", "tool_use"})
TOOL_RESULT_TYPES = frozenset({"toolresult", "tool_result"})
TOOL_FRAGMENT_TYPES = TOOL_CALL_TYPES | TOOL_RESULT_TYPES
TEXT_TYPES = frozenset({"text", "output_text", "input_text"})
THINKING_TYPES = frozenset({"thinking", "reasoning"})

# Role synonyms, compared lower-cased
TOOL_ROLES = frozenset({"toolresult", "tool_result", "tool", "function"})
TOOL_RESULT_ROLES = frozenset({"toolresult", "tool_result"})


def fragment_type(fragment: Any) -> str:
    """Lower-cased ``type`` tag of a content fragment, ``""`` when absent."""
    value = as_mapping(fragment).get("type")
    if value is None:
        return ""
    return str(value).lower()
