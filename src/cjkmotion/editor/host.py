"""Protocols implemented by the editor hosting the motion core.

The core never mutates buffers itself: it reads text and the cursor, asks
the host for generic thing boundaries, and hands finished selections back
for realization.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from ..core.ranges import Span
from ..core.things import Direction, Thing
from .document_model import Selection

StepCallback = Callable[[int], Optional[int]]


class ThingStepper(Protocol):
    """Counted stepping over things; must clamp at the buffer edges."""

    def step(self, thing: Thing, origin: int, count: int) -> int:
        ...


class ThingLocator(Protocol):
    def bounds_of(self, thing: Thing, cursor: int) -> Span | None:
        ...


class SelectionRealizer(Protocol):
    """Owner of the active selection."""

    @property
    def selection(self) -> Selection | None:
        ...

    def realize(self, selection: Selection, *, extend: bool) -> Selection:
        ...

    def cancel_selection(self) -> None:
        ...

    def set_direction(self, direction: Direction) -> None:
        ...


class SearchHighlighter(Protocol):
    def push_search_pattern(self, regex: str) -> None:
        ...

    def highlight_all_matches(self, regex: str) -> None:
        ...


class RepeatOverlay(Protocol):
    """Receives single-step callbacks used to preview repeat counts.

    Each callback takes an origin offset and returns the position one thing
    away, or ``None`` when no movement is possible.
    """

    def show_repeat_positions(self, backward: StepCallback, forward: StepCallback) -> None:
        ...


class EditorHost(ThingStepper, ThingLocator, SelectionRealizer, SearchHighlighter, RepeatOverlay, Protocol):
    """Everything the motion core needs from the editor."""

    @property
    def text(self) -> str:
        ...

    @property
    def point(self) -> int:
        ...

    def char_at(self, position: int) -> str | None:
        ...


__all__ = [
    "EditorHost",
    "RepeatOverlay",
    "SearchHighlighter",
    "SelectionRealizer",
    "StepCallback",
    "ThingLocator",
    "ThingStepper",
]
