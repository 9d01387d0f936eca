"""Selection strategies and the dispatcher choosing between them.

Both strategies are built once when the motion core is configured; the
dispatcher only decides, per request, which of the two to run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Protocol

from ..core.charclass import CharClassifier
from ..core.things import Thing
from ..editor.document_model import MarkRequest, Selection, SelectionKind
from ..editor.host import EditorHost
from ..segmentation.locator import locate
from ..segmentation.source import SegmentSource
from .builder import SelectionBuilder

LOGGER = logging.getLogger(__name__)


class SelectionStrategy(Protocol):
    name: ClassVar[str]

    def select(self, request: MarkRequest) -> Selection | None:
        ...


@dataclass(slots=True)
class GenericThingStrategy:
    """Selects the host's own notion of the thing at point."""

    host: EditorHost
    builder: SelectionBuilder
    name: ClassVar[str] = "generic"

    def select(self, request: MarkRequest) -> Selection | None:
        bounds = self.host.bounds_of(request.thing, self.host.point)
        if bounds is None or bounds.is_empty:
            LOGGER.debug("No %s at point %d", request.thing.value, self.host.point)
            return None
        selection = self.builder.build(SelectionKind.EXPAND, bounds, request.mode_tag, request.direction)
        realized = self.builder.realize(selection, extend=False)
        if request.regexp_format:
            self.builder.register_search(bounds.slice(self.host.text), request.regexp_format)
        return realized


@dataclass(slots=True)
class CjkSegmentStrategy:
    """Selects the CJK segment containing point."""

    host: EditorHost
    builder: SelectionBuilder
    source: SegmentSource
    name: ClassVar[str] = "cjk"

    def select(self, request: MarkRequest) -> Selection | None:
        self.source.ensure_loaded()
        text = self.host.text
        cursor = self.host.point
        scan = self.source.bounds_for_direction_scan(text, cursor, request.direction)
        if scan is None:
            LOGGER.debug("No CJK run around point %d", cursor)
            return None
        segment = locate(cursor, scan, self.source.segments_of(scan.slice(text)))
        if segment is None:
            LOGGER.debug("Segmenter produced no segments for %s", scan.to_tuple())
            return None
        selection = self.builder.build(SelectionKind.EXPAND, segment, Thing.WORD, request.direction)
        realized = self.builder.realize(selection, extend=True)
        self.builder.register_search(segment.slice(text))
        return realized


@dataclass(slots=True)
class StrategyDispatcher:
    classifier: CharClassifier
    cjk: SelectionStrategy
    generic: SelectionStrategy

    def dispatch(self, char: str | None, requested_type: Thing) -> SelectionStrategy:
        """Only word requests on a CJK character use segments.

        Every other thing, and any request on a non-CJK character or at the
        end of the buffer, goes to the generic strategy.
        """

        if requested_type is not Thing.WORD or not self.classifier.is_cjk(char):
            return self.generic
        return self.cjk


__all__ = [
    "CjkSegmentStrategy",
    "GenericThingStrategy",
    "SelectionStrategy",
    "StrategyDispatcher",
]
