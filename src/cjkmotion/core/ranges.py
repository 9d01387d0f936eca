"""Half-open text spans."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Span:
    """Half-open ``[start, end)`` span of buffer offsets.

    The same type is used for absolute buffer spans and for segment spans
    expressed relative to the start of a scanned range. Reversed bounds are
    swapped and negative offsets pinned to zero.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        start = max(0, int(self.start))
        end = max(0, int(self.end))
        if end < start:
            start, end = end, start
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, offset: int) -> bool:
        """Inclusive on the left, exclusive on the right."""

        return self.start <= offset < self.end

    def shift(self, offset: int) -> Span:
        """Translate a relative span into the coordinates starting at ``offset``."""

        return Span(self.start + offset, self.end + offset)

    def slice(self, text: str) -> str:
        return text[self.start : self.end]

    def to_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)


__all__ = ["Span"]
