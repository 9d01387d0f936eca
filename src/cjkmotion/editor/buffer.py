"""Headless in-memory editor host.

:class:`TextBuffer` implements :class:`~cjkmotion.editor.host.EditorHost`
on a plain string so the motion core can run without a GUI toolkit. Its
generic stepping mirrors a host's default character-class boundaries: CJK
runs count as one long word, which is exactly what the CJK strategies
refine.
"""

from __future__ import annotations

import logging
import re
from collections import deque
from dataclasses import replace
from typing import Callable

from ..core.ranges import Span
from ..core.things import Direction, Thing
from .document_model import Selection
from .host import StepCallback

LOGGER = logging.getLogger(__name__)

DEFAULT_SEARCH_RING_SIZE = 16

CharPredicate = Callable[[str], bool]


def is_word_char(ch: str) -> bool:
    return ch.isalnum()


def is_symbol_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


_CONSTITUENTS: dict[Thing, CharPredicate] = {
    Thing.WORD: is_word_char,
    Thing.SYMBOL: is_symbol_char,
}


class TextBuffer:
    """Plain-string editor host with a cursor, an active selection and a search ring."""

    def __init__(
        self,
        text: str = "",
        point: int = 0,
        *,
        search_ring_size: int = DEFAULT_SEARCH_RING_SIZE,
    ) -> None:
        self._text = text
        self._point = 0
        self._selection: Selection | None = None
        self._search_ring: deque[str] = deque(maxlen=max(1, int(search_ring_size)))
        self._highlights: tuple[Span, ...] = ()
        self._repeat_callbacks: tuple[StepCallback, StepCallback] | None = None
        self.point = point

    # ------------------------------------------------------------------
    # Text & cursor
    # ------------------------------------------------------------------
    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Replace the buffer contents, dropping the selection and highlights."""

        self._text = text
        self.cancel_selection()
        self._set_highlights(())
        self.point = min(self.point, len(text))

    @property
    def point(self) -> int:
        return self._point

    @point.setter
    def point(self, value: int) -> None:
        self._point = max(0, min(int(value), len(self.text)))

    def char_at(self, position: int) -> str | None:
        text = self.text
        if 0 <= position < len(text):
            return text[position]
        return None

    # ------------------------------------------------------------------
    # Selection realization
    # ------------------------------------------------------------------
    @property
    def selection(self) -> Selection | None:
        return self._selection

    def realize(self, selection: Selection, *, extend: bool) -> Selection:
        """Make ``selection`` the active region.

        With ``extend`` set, an expand selection of the same mode tag keeps the
        far edge of the region it replaces so repeated motion keeps growing it.
        """

        current = self.selection
        if (
            extend
            and selection.is_expand
            and current is not None
            and current.matches(selection.kind, selection.mode_tag)
        ):
            if selection.mark < selection.point:
                mark = min(current.mark, current.point)
            else:
                mark = max(current.mark, current.point)
            selection = replace(selection, mark=mark)
        self._selection = selection
        self.point = selection.point
        self._apply_region(selection)
        LOGGER.debug(
            "Realized %s/%s selection mark=%d point=%d",
            selection.kind.value,
            selection.mode_tag.value,
            selection.mark,
            selection.point,
        )
        return selection

    def cancel_selection(self) -> None:
        if self.selection is None:
            return
        self._selection = None
        self._apply_region(None)

    def set_direction(self, direction: Direction) -> None:
        """Swap point and mark so the cursor sits on the ``direction`` edge."""

        current = self.selection
        if current is None or current.direction is direction or current.mark == current.point:
            return
        swapped = replace(current, mark=current.point, point=current.mark)
        self._selection = swapped
        self.point = swapped.point
        self._apply_region(swapped)

    def _apply_region(self, selection: Selection | None) -> None:
        """Hook for subclasses mirroring the region into a widget."""

    # ------------------------------------------------------------------
    # Search ring & highlights
    # ------------------------------------------------------------------
    @property
    def search_ring(self) -> tuple[str, ...]:
        """Search patterns, most recent first."""

        return tuple(self._search_ring)

    @property
    def highlights(self) -> tuple[Span, ...]:
        return self._highlights

    def push_search_pattern(self, regex: str) -> None:
        if self._search_ring and self._search_ring[0] == regex:
            return
        self._search_ring.appendleft(regex)

    def highlight_all_matches(self, regex: str) -> None:
        try:
            pattern = re.compile(regex)
        except re.error as exc:
            LOGGER.warning("Ignoring highlight for invalid pattern %r: %s", regex, exc)
            self._set_highlights(())
            return
        spans = tuple(
            Span(match.start(), match.end())
            for match in pattern.finditer(self.text)
            if match.end() > match.start()
        )
        self._set_highlights(spans)

    def clear_highlights(self) -> None:
        self._set_highlights(())

    def _set_highlights(self, spans: tuple[Span, ...]) -> None:
        self._highlights = spans
        self._apply_highlights(spans)

    def _apply_highlights(self, spans: tuple[Span, ...]) -> None:
        """Hook for subclasses painting highlights into a widget."""

    # ------------------------------------------------------------------
    # Repeat overlay
    # ------------------------------------------------------------------
    @property
    def repeat_callbacks(self) -> tuple[StepCallback, StepCallback] | None:
        return self._repeat_callbacks

    def show_repeat_positions(self, backward: StepCallback, forward: StepCallback) -> None:
        self._repeat_callbacks = (backward, forward)

    def repeat_positions(self, limit: int = 9) -> dict[int, int]:
        """Preview where repeating the last motion would land, keyed by repeat count.

        Positive keys come from the forward callback, negative keys from the
        backward one. Stepping stops early once a callback reports no movement.
        """

        if self._repeat_callbacks is None:
            return {}
        backward, forward = self._repeat_callbacks
        positions: dict[int, int] = {}
        for sign, callback in ((1, forward), (-1, backward)):
            position = self.point
            for count in range(1, limit + 1):
                target = callback(position)
                if target is None:
                    break
                positions[sign * count] = target
                position = target
        return positions

    # ------------------------------------------------------------------
    # Generic thing stepping
    # ------------------------------------------------------------------
    def step(self, thing: Thing, origin: int, count: int) -> int:
        text = self.text
        position = max(0, min(int(origin), len(text)))
        forward = count > 0
        for _ in range(abs(count)):
            if thing in _CONSTITUENTS:
                target = _step_constituent(text, position, forward, _CONSTITUENTS[thing])
            elif thing is Thing.LINE:
                target = _step_line(text, position, forward)
            else:
                target = _step_paragraph(text, position, forward)
            if target == position:
                break
            position = target
        return position

    def bounds_of(self, thing: Thing, cursor: int) -> Span | None:
        text = self.text
        cursor = max(0, min(int(cursor), len(text)))
        if thing in _CONSTITUENTS:
            return _constituent_bounds(text, cursor, _CONSTITUENTS[thing])
        if not text:
            return None
        if thing is Thing.LINE:
            return Span(_line_start(text, cursor), _line_end(text, cursor))
        return _paragraph_bounds(text, cursor)


def _step_constituent(text: str, position: int, forward: bool, constituent: CharPredicate) -> int:
    if forward:
        limit = len(text)
        while position < limit and not constituent(text[position]):
            position += 1
        while position < limit and constituent(text[position]):
            position += 1
        return position
    while position > 0 and not constituent(text[position - 1]):
        position -= 1
    while position > 0 and constituent(text[position - 1]):
        position -= 1
    return position


def _constituent_bounds(text: str, cursor: int, constituent: CharPredicate) -> Span | None:
    if cursor < len(text) and constituent(text[cursor]):
        anchor = cursor
    elif cursor > 0 and constituent(text[cursor - 1]):
        anchor = cursor - 1
    else:
        return None
    start = anchor
    while start > 0 and constituent(text[start - 1]):
        start -= 1
    end = anchor + 1
    while end < len(text) and constituent(text[end]):
        end += 1
    return Span(start, end)


def _line_start(text: str, position: int) -> int:
    return text.rfind("\n", 0, position) + 1


def _line_end(text: str, position: int) -> int:
    index = text.find("\n", position)
    return len(text) if index < 0 else index


def _next_line(text: str, position: int) -> int:
    index = text.find("\n", position)
    return len(text) if index < 0 else index + 1


def _is_blank_line(text: str, position: int) -> bool:
    start = _line_start(text, position)
    return not text[start : _line_end(text, start)].strip()


def _step_line(text: str, position: int, forward: bool) -> int:
    if forward:
        return _next_line(text, position)
    start = _line_start(text, position)
    if start != position or start == 0:
        return start
    return _line_start(text, start - 1)


def _step_paragraph(text: str, position: int, forward: bool) -> int:
    if forward:
        limit = len(text)
        while position < limit and _is_blank_line(text, position):
            position = _next_line(text, position)
        while position < limit and not _is_blank_line(text, position):
            position = _next_line(text, position)
        return position
    while position > 0 and _is_blank_line(text, position - 1):
        position = _line_start(text, position - 1)
    while position > 0 and not _is_blank_line(text, position - 1):
        position = _line_start(text, position - 1)
    return position


def _paragraph_bounds(text: str, cursor: int) -> Span | None:
    if _is_blank_line(text, cursor):
        return None
    start = _line_start(text, cursor)
    while start > 0 and not _is_blank_line(text, start - 1):
        start = _line_start(text, start - 1)
    end = _line_end(text, cursor)
    while end < len(text) and not _is_blank_line(text, end + 1):
        end = _line_end(text, end + 1)
    return Span(start, end)


__all__ = ["DEFAULT_SEARCH_RING_SIZE", "TextBuffer", "is_symbol_char", "is_word_char"]
