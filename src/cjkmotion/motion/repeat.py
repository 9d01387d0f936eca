"""Signed repeat movement over things.

``next_thing`` moves ``n`` things away from point and selects what it
crossed. Continuing in the same mode tag grows an existing expand
selection; anything else produces a one-shot ``select`` selection.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Mapping

from ..core.things import Direction, IncludeSyntaxTable, Thing, compile_include_syntax
from ..editor.document_model import RepeatRequest, Selection, SelectionKind
from ..editor.host import EditorHost, ThingStepper
from .builder import SelectionBuilder

LOGGER = logging.getLogger(__name__)


def absorb(text: str, origin: int, target: int, include_syntax: str) -> int:
    """Move from ``origin`` toward ``target`` over characters in ``[include_syntax]``.

    The result never crosses ``target``; an empty class leaves ``origin``
    where it is.
    """

    pattern = compile_include_syntax(include_syntax)
    if pattern is None or origin == target:
        return origin
    position = origin
    if target > origin:
        while position < target and pattern.match(text, position):
            position += 1
    else:
        while position > target and pattern.match(text, position - 1):
            position -= 1
    return position


class RepeatMovementEngine:
    """Computes and realizes selections for signed repeat counts."""

    def __init__(
        self,
        host: EditorHost,
        *,
        builder: SelectionBuilder | None = None,
        steppers: Mapping[Thing, ThingStepper] | None = None,
        default_stepper: ThingStepper | None = None,
        include_syntax: IncludeSyntaxTable | None = None,
    ) -> None:
        self.host = host
        self.builder = builder or SelectionBuilder(host)
        self._steppers: dict[Thing, ThingStepper] = dict(steppers or {})
        self._default_stepper: ThingStepper = host if default_stepper is None else default_stepper
        self.include_syntax = include_syntax or IncludeSyntaxTable()

    def stepper_for(self, thing: Thing) -> ThingStepper:
        return self._steppers.get(thing, self._default_stepper)

    def next_thing(
        self,
        thing: Thing,
        mode_tag: Thing,
        n: int,
        include_syntax: str | None = None,
    ) -> Selection | None:
        return self.run(RepeatRequest(thing=thing, mode_tag=mode_tag, n=n, include_syntax=include_syntax))

    def run(self, request: RepeatRequest) -> Selection | None:
        if request.is_noop:
            return None
        current = self.host.selection
        if current is not None and current.mode_tag is not request.mode_tag:
            LOGGER.debug(
                "Dropping %s selection for %s motion", current.mode_tag.value, request.mode_tag.value
            )
            self.host.cancel_selection()
            current = None

        include_syntax = request.include_syntax
        if include_syntax is None:
            include_syntax = self.include_syntax.resolve(request.thing, request.n)

        expanding = current is not None and current.matches(SelectionKind.EXPAND, request.mode_tag)
        if expanding:
            self.host.set_direction(request.direction)

        origin = self.host.point
        target = self.stepper_for(request.thing).step(request.thing, origin, request.n)
        if target == origin:
            LOGGER.debug("No %s movement from %d (n=%d)", request.thing.value, origin, request.n)
            return None

        mark = absorb(self.host.text, origin, target, include_syntax)
        kind = SelectionKind.EXPAND if expanding else SelectionKind.SELECT
        selection = self.builder.from_positions(kind, mark, target, request.mode_tag)
        realized = self.builder.realize(selection, extend=True)
        self.host.show_repeat_positions(
            partial(self.backward_thing_1, request.thing),
            partial(self.forward_thing_1, request.thing),
        )
        return realized

    def forward_thing_1(self, thing: Thing, origin: int | None = None) -> int | None:
        return self._step_once(thing, origin, Direction.FORWARD)

    def backward_thing_1(self, thing: Thing, origin: int | None = None) -> int | None:
        return self._step_once(thing, origin, Direction.BACKWARD)

    def _step_once(self, thing: Thing, origin: int | None, direction: Direction) -> int | None:
        start = self.host.point if origin is None else origin
        target = self.stepper_for(thing).step(thing, start, direction.sign)
        return None if target == start else target


__all__ = ["RepeatMovementEngine", "absorb"]
