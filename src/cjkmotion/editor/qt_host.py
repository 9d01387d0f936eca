"""Editor host driving a PySide6 ``QPlainTextEdit``.

Text and the cursor are read from the widget on every access, so edits
made by the user between motions are always seen. Selections map onto the
widget's ``QTextCursor`` (mark = anchor, point = position) and search
matches are painted as extra selections.
"""

from __future__ import annotations

import logging

from PySide6.QtGui import QColor, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import QPlainTextEdit, QTextEdit

from ..core.ranges import Span
from ..services.settings import Settings
from .buffer import DEFAULT_SEARCH_RING_SIZE, TextBuffer
from .document_model import Selection

LOGGER = logging.getLogger(__name__)

DEFAULT_HIGHLIGHT_COLOR = "#fff3a3"


class QtEditorHost(TextBuffer):
    """:class:`TextBuffer` whose state lives in a ``QPlainTextEdit``."""

    def __init__(
        self,
        editor: QPlainTextEdit,
        *,
        search_ring_size: int = DEFAULT_SEARCH_RING_SIZE,
        highlight_color: str = DEFAULT_HIGHLIGHT_COLOR,
    ) -> None:
        self._editor = editor
        self._highlight_color = QColor(highlight_color)
        super().__init__(
            editor.toPlainText(),
            editor.textCursor().position(),
            search_ring_size=search_ring_size,
        )

    @classmethod
    def from_settings(cls, editor: QPlainTextEdit, settings: Settings) -> "QtEditorHost":
        return cls(
            editor,
            search_ring_size=settings.search_ring_size,
            highlight_color=settings.highlight_color,
        )

    @property
    def editor(self) -> QPlainTextEdit:
        return self._editor

    @property
    def text(self) -> str:
        return self._editor.toPlainText()

    def set_text(self, text: str) -> None:
        self._editor.setPlainText(text)
        super().set_text(text)

    @property
    def point(self) -> int:
        return self._editor.textCursor().position()

    @point.setter
    def point(self, value: int) -> None:
        cursor = self._editor.textCursor()
        cursor.setPosition(self._clamp(value))
        self._editor.setTextCursor(cursor)

    @property
    def selection(self) -> Selection | None:
        """Active region, or ``None`` once the widget no longer shows it.

        The region is dropped as soon as the widget cursor's anchor or
        position stops matching its mark and point, e.g. after a click.
        """

        current = self._selection
        if current is None:
            return None
        cursor = self._editor.textCursor()
        if (
            not cursor.hasSelection()
            or cursor.anchor() != current.mark
            or cursor.position() != current.point
        ):
            LOGGER.debug("Widget cursor left the %s selection; dropping it", current.mode_tag.value)
            self._selection = None
        return self._selection

    def _clamp(self, value: int) -> int:
        return max(0, min(int(value), len(self.text)))

    def _apply_region(self, selection: Selection | None) -> None:
        cursor = self._editor.textCursor()
        if selection is None:
            cursor.clearSelection()
        else:
            cursor.setPosition(self._clamp(selection.mark))
            cursor.setPosition(self._clamp(selection.point), QTextCursor.MoveMode.KeepAnchor)
        self._editor.setTextCursor(cursor)

    def _apply_highlights(self, spans: tuple[Span, ...]) -> None:
        char_format = QTextCharFormat()
        char_format.setBackground(self._highlight_color)
        extra_selections = []
        for span in spans:
            cursor = QTextCursor(self._editor.document())
            cursor.setPosition(self._clamp(span.start))
            cursor.setPosition(self._clamp(span.end), QTextCursor.MoveMode.KeepAnchor)
            extra = QTextEdit.ExtraSelection()
            extra.cursor = cursor
            extra.format = char_format
            extra_selections.append(extra)
        self._editor.setExtraSelections(extra_selections)


__all__ = ["DEFAULT_HIGHLIGHT_COLOR", "QtEditorHost"]
