"""Map a cursor offset onto the segment that contains it."""

from __future__ import annotations

import logging
from typing import Sequence

from ..core.ranges import Span

LOGGER = logging.getLogger(__name__)


def locate(cursor: int, scan_range: Span | None, segments: Sequence[Span]) -> Span | None:
    """Return the absolute span of the segment containing ``cursor``.

    ``segments`` are relative to ``scan_range.start``. Every segment is
    scanned and the last match wins; segments are expected not to overlap,
    in which case at most one can match. When nothing matches, the first
    segment is used. ``None`` means there is nothing to select: no scan
    range, an empty scan range, or no segments at all.
    """

    if scan_range is None or scan_range.is_empty or not segments:
        return None
    relative = cursor - scan_range.start
    found: Span | None = None
    for segment in segments:
        if segment.start <= relative < segment.end:
            found = segment
    if found is None:
        LOGGER.debug("Cursor %d outside every segment of %s; using the first", cursor, scan_range.to_tuple())
        found = segments[0]
    return found.shift(scan_range.start)


__all__ = ["locate"]
