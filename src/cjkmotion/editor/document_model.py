"""Dataclasses describing selections and motion requests."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.ranges import Span
from ..core.things import Direction, Thing


class SelectionKind(str, Enum):
    """``EXPAND`` selections grow with repeated motion; ``SELECT`` ones are replaced."""

    EXPAND = "expand"
    SELECT = "select"


@dataclass(slots=True, frozen=True)
class Selection:
    """Selection descriptor handed to the host for realization.

    ``mark`` is the fixed edge and ``point`` the edge the cursor sits on, so
    the direction is implied by their order.
    """

    kind: SelectionKind
    mode_tag: Thing
    mark: int
    point: int

    @property
    def bounds(self) -> Span:
        return Span(self.mark, self.point)

    @property
    def direction(self) -> Direction:
        return Direction.BACKWARD if self.point < self.mark else Direction.FORWARD

    @property
    def is_expand(self) -> bool:
        return self.kind is SelectionKind.EXPAND

    def matches(self, kind: SelectionKind, mode_tag: Thing) -> bool:
        return self.kind is kind and self.mode_tag is mode_tag

    @classmethod
    def over(
        cls,
        kind: SelectionKind,
        bounds: Span,
        mode_tag: Thing,
        direction: Direction = Direction.FORWARD,
    ) -> "Selection":
        """Build a selection covering ``bounds`` with the cursor on the ``direction`` edge."""

        if direction is Direction.BACKWARD:
            return cls(kind=kind, mode_tag=mode_tag, mark=bounds.end, point=bounds.start)
        return cls(kind=kind, mode_tag=mode_tag, mark=bounds.start, point=bounds.end)


@dataclass(slots=True, frozen=True)
class RepeatRequest:
    """Signed request to move over ``n`` things."""

    thing: Thing
    mode_tag: Thing
    n: int
    include_syntax: str | None = None

    @property
    def direction(self) -> Direction:
        return Direction.from_count(self.n)

    @property
    def is_noop(self) -> bool:
        return self.n == 0


@dataclass(slots=True, frozen=True)
class MarkRequest:
    """Request to select the thing at point.

    ``regexp_format`` is a :meth:`str.format` template with a single ``{}``
    slot that receives the regex-escaped selected text.
    """

    thing: Thing
    mode_tag: Thing
    backward: bool = False
    regexp_format: str | None = None

    @property
    def direction(self) -> Direction:
        return Direction.BACKWARD if self.backward else Direction.FORWARD


__all__ = ["MarkRequest", "RepeatRequest", "Selection", "SelectionKind"]
