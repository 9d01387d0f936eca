"""Selection construction and hand-off to the host."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..core.ranges import Span
from ..core.things import Direction, Thing
from ..editor.document_model import Selection, SelectionKind
from ..editor.host import EditorHost

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SelectionBuilder:
    """Builds selection descriptors and asks the host to realize them."""

    host: EditorHost

    def build(
        self,
        kind: SelectionKind,
        bounds: Span,
        mode_tag: Thing,
        direction: Direction = Direction.FORWARD,
    ) -> Selection:
        return Selection.over(kind, bounds, mode_tag, direction)

    def from_positions(self, kind: SelectionKind, mark: int, point: int, mode_tag: Thing) -> Selection:
        return Selection(kind=kind, mode_tag=mode_tag, mark=mark, point=point)

    def realize(self, selection: Selection, *, extend: bool) -> Selection:
        return self.host.realize(selection, extend=extend)

    def register_search(self, text: str, regexp_format: str | None = None) -> str | None:
        """Push ``text`` (regex-escaped, optionally templated) and highlight its matches.

        Returns the registered pattern, or ``None`` when there was nothing to
        search for.
        """

        if not text:
            return None
        escaped = re.escape(text)
        pattern = regexp_format.format(escaped) if regexp_format else escaped
        self.host.push_search_pattern(pattern)
        self.host.highlight_all_matches(pattern)
        LOGGER.debug("Registered search pattern %r", pattern)
        return pattern


__all__ = ["SelectionBuilder"]
