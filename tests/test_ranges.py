"""Tests for the Span value type."""

from __future__ import annotations

from cjkmotion.core.ranges import Span


def test_span_normalises_reversed_bounds() -> None:
    span = Span(9, 4)

    assert span.to_tuple() == (4, 9)
    assert span.length == 5


def test_span_contains_is_inclusive_left_exclusive_right() -> None:
    span = Span(2, 5)

    assert span.contains(2)
    assert span.contains(4)
    assert not span.contains(5)
    assert not span.contains(1)


def test_empty_span_contains_nothing() -> None:
    span = Span(3, 3)

    assert span.is_empty
    assert not span.contains(3)


def test_shift_translates_relative_span() -> None:
    assert Span(2, 5).shift(100).to_tuple() == (102, 105)


def test_slice_extracts_text() -> None:
    assert Span(6, 9).slice("我们喜欢北京天安门") == "天安门"


def test_negative_offsets_are_pinned_to_zero() -> None:
    assert Span(-3, 2).to_tuple() == (0, 2)
