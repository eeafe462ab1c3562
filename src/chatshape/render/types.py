"""
Render-side types.

UI state is never stored here. Expanded state is asked for through an
injected ``is_expanded`` callback and toggles are reported through
``on_toggle``; both default to "not expanded, no-op".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from chatshape.transcript.normalized import ToolCard

MarkdownRenderer = Callable[[str], str]
IsExpanded = Callable[[str], bool]
OnToggle = Callable[[str, bool], None]


@dataclass
class RenderOptions:
    """Options for render_message()."""

    show_reasoning: bool = False
    streaming: bool = False
    json_indent: int = 2


@dataclass(frozen=True)
class ToolOutputProps:
    """Caller-owned expand/collapse state accessors."""

    is_expanded: IsExpanded | None = None
    on_toggle: OnToggle | None = None

    def expanded(self, identity: str) -> bool:
        if self.is_expanded is None:
            return False
        return bool(self.is_expanded(identity))

    def toggle(self, identity: str, expanded: bool) -> None:
        if self.on_toggle is not None:
            self.on_toggle(identity, expanded)


@dataclass(frozen=True)
class ToolCardView:
    """A tool card plus its expanded state at render time."""

    card: ToolCard
    expanded: bool = False

    @property
    def identity(self) -> str:
        return self.card.identity


@dataclass(frozen=True)
class RenderedMessage:
    """
    Render-ready composite for one transcript entry.

    ``text_html`` and ``reasoning_html`` are already passed through the
    markdown converter. ``timestamp`` is raw epoch millis, unformatted.
    """

    role: str
    group: str
    css_class: str
    label: str
    text_html: str | None = None
    reasoning_html: str | None = None
    tool_cards: tuple[ToolCardView, ...] = field(default_factory=tuple)
    timestamp: int | float | None = None
    streaming: bool = False
