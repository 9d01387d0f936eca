"""Tests for the boundary locator."""

from __future__ import annotations

from cjkmotion.core.ranges import Span
from cjkmotion.segmentation.locator import locate


def test_locate_translates_matching_segment_to_absolute_offsets() -> None:
    segments = [Span(0, 2), Span(2, 5)]

    result = locate(103, Span(100, 105), segments)

    assert result is not None
    assert result.to_tuple() == (102, 105)


def test_cursor_on_boundary_belongs_to_segment_starting_there() -> None:
    segments = [Span(0, 2), Span(2, 5)]

    result = locate(102, Span(100, 105), segments)

    assert result is not None
    assert result.to_tuple() == (102, 105)


def test_every_cursor_inside_range_lands_in_its_segment() -> None:
    segments = [Span(0, 2), Span(2, 4), Span(4, 6), Span(6, 9)]
    scan = Span(10, 19)

    for cursor in range(scan.start, scan.end):
        result = locate(cursor, scan, segments)
        assert result is not None
        assert result.start <= cursor < result.end


def test_last_matching_segment_wins_for_overlapping_spans() -> None:
    segments = [Span(0, 4), Span(1, 3)]

    result = locate(2, Span(0, 4), segments)

    assert result is not None
    assert result.to_tuple() == (1, 3)


def test_falls_back_to_first_segment_when_nothing_matches() -> None:
    segments = [Span(0, 2), Span(2, 5)]

    result = locate(105, Span(100, 105), segments)

    assert result is not None
    assert result.to_tuple() == (100, 102)


def test_returns_none_without_segments() -> None:
    assert locate(3, Span(0, 5), []) is None


def test_returns_none_without_scan_range() -> None:
    assert locate(3, None, [Span(0, 2)]) is None


def test_returns_none_for_empty_scan_range() -> None:
    assert locate(3, Span(3, 3), [Span(0, 2)]) is None
