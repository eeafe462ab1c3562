"""
Pytest fixtures for chatshape tests.

Provides raw transcript entries in the shapes different upstream producers
emit, so tests can share them without rebuilding dicts everywhere.
"""

import pytest


@pytest.fixture
def assistant_tool_use_message() -> dict:
    """Assistant message whose only content is a tool_use fragment."""
    return {
        "role": "assistant",
        "id": "msg-1",
        "timestamp": 1700000000000,
        "content": [
            {"type": "tool_use", "name": "search", "arguments": {"q": "x"}},
        ],
    }


@pytest.fixture
def three_tool_calls_message() -> dict:
    """Assistant message with three tool calls interleaved with text."""
    return {
        "role": "assistant",
        "id": "msg-3",
        "content": [
            {"type": "text", "text": "Let me look that up."},
            {"type": "toolCall", "name": "alpha", "arguments": {"n": 1}},
            {"type": "tool_call", "name": "beta", "args": {"n": 2}},
            {"type": "TOOL_USE", "name": "alpha", "input": {"n": 3}},
        ],
    }


@pytest.fixture
def tool_result_message() -> dict:
    """Flat tool result as sent by the gateway."""
    return {
        "role": "toolResult",
        "toolCallId": "call-42",
        "toolName": "read_file",
        "content": [{"type": "text", "text": "file contents"}],
        "timestamp": 1700000000500,
    }


@pytest.fixture
def reasoning_message() -> dict:
    """Assistant message with a thinking fragment and narrative text."""
    return {
        "role": "assistant",
        "content": [
            {"type": "thinking", "thinking": "First idea.\n\nSecond idea."},
            {"type": "text", "text": "Here is the answer."},
        ],
        "timestamp": 1700000001000,
    }


@pytest.fixture
def cyclic_message() -> dict:
    """Message that references itself and cannot be serialized."""
    message: dict = {"role": "weird"}
    message["self"] = message
    return message
