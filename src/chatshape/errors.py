"""Exceptions raised by chatshape.

Normalization itself never raises for malformed input. The only surfaced
failure is a message that cannot be dumped for the structural fallback.
"""

from __future__ import annotations


class ChatShapeError(Exception):
    """Base class for chatshape errors."""


class SerializationError(ChatShapeError):
    """Raised when a raw message cannot be serialized for the JSON fallback.

    Typically caused by cyclic references inside the message.
    """

    def __init__(self, message: str, *, reason: str | None = None):
        super().__init__(message)
        self.reason = reason
