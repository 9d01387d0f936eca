"""QPlainTextEdit host tests running in headless mode."""

import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtGui import QTextCursor  # noqa: E402
from PySide6.QtWidgets import QPlainTextEdit  # noqa: E402

from cjkmotion.editor.document_model import SelectionKind  # noqa: E402
from cjkmotion.editor.qt_host import QtEditorHost  # noqa: E402
from cjkmotion.motion.commands import CjkMotion  # noqa: E402
from cjkmotion.services.settings import Settings  # noqa: E402


@pytest.fixture(autouse=True)
def _ensure_qapp(qapp):  # pragma: no cover - pytest-qt provides the fixture
    """Guarantee a running QApplication when PySide6 is installed."""

    return qapp


def _make_host(text: str) -> tuple[QPlainTextEdit, QtEditorHost]:
    editor = QPlainTextEdit()
    editor.setPlainText(text)
    return editor, QtEditorHost(editor)


def test_host_reads_text_and_cursor_from_widget():
    editor, host = _make_host("foo bar")

    editor.setPlainText("changed text")
    host.point = 4

    assert host.text == "changed text"
    assert editor.textCursor().position() == 4
    host.point = 100
    assert host.point == len("changed text")


def test_mark_word_selects_segment_in_widget(segment_source):
    editor, host = _make_host("我们喜欢北京天安门")
    host.point = 5

    CjkMotion(host, segment_source).mark_word()

    cursor = editor.textCursor()
    assert cursor.anchor() == 4
    assert cursor.position() == 6
    assert cursor.selectedText() == "北京"
    assert len(editor.extraSelections()) == 1


def test_cancel_selection_clears_widget_selection(segment_source):
    editor, host = _make_host("foo bar foo")
    host.point = 1

    CjkMotion(host, segment_source).mark_word()
    assert len(editor.extraSelections()) == 2

    host.cancel_selection()
    host.clear_highlights()

    assert not editor.textCursor().hasSelection()
    assert editor.extraSelections() == []


def test_from_settings_applies_search_ring_size():
    editor = QPlainTextEdit()
    editor.setPlainText("abc")
    host = QtEditorHost.from_settings(editor, Settings(search_ring_size=1))

    host.push_search_pattern("a")
    host.push_search_pattern("b")

    assert host.search_ring == ("b",)


def test_clicking_elsewhere_drops_stale_selection(segment_source):
    editor, host = _make_host("foo bar baz qux quux")
    host.point = 1
    motion = CjkMotion(host, segment_source)
    motion.mark_word()
    assert host.selection is not None

    cursor = editor.textCursor()
    cursor.setPosition(12)
    editor.setTextCursor(cursor)

    assert host.selection is None
    selection = motion.next_word()

    assert selection is not None
    assert selection.kind is SelectionKind.SELECT
    assert (selection.mark, selection.point) == (12, 15)


def test_user_drawn_selection_is_not_grown(segment_source):
    editor, host = _make_host("foo bar baz qux quux")
    host.point = 1
    CjkMotion(host, segment_source).mark_word()

    cursor = editor.textCursor()
    cursor.setPosition(4)
    cursor.setPosition(7, QTextCursor.MoveMode.KeepAnchor)
    editor.setTextCursor(cursor)

    assert host.selection is None
