"""Counted steppers used by the repeat engine."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.things import Thing
from ..editor.host import EditorHost
from ..segmentation.source import SegmentSource


@dataclass(slots=True)
class GenericThingStepper:
    """Delegates to the host's own thing stepping."""

    host: EditorHost

    def step(self, thing: Thing, origin: int, count: int) -> int:
        return self.host.step(thing, origin, count)


@dataclass(slots=True)
class CjkWordStepper:
    """Word stepping that treats every CJK segment as a word."""

    host: EditorHost
    source: SegmentSource

    def step(self, thing: Thing, origin: int, count: int) -> int:
        self.source.ensure_loaded()
        return self.source.step_words(self.host.text, origin, count)


__all__ = ["CjkWordStepper", "GenericThingStepper"]
