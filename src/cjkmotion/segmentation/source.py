"""Segment sources: the contract with the external CJK segmenter.

The core never segments text itself. :class:`SegmentSource` is what it
consumes; :class:`TokenizerSegmentSource` adapts any tokenizer callable
(``text -> iterable of token strings``, e.g. ``jieba.cut``) to it, loading
the tokenizer lazily from a dotted path the first time it is needed.
"""

from __future__ import annotations

import importlib
import logging
from typing import Callable, Iterable, Protocol

from ..core.charclass import CharClassifier
from ..core.ranges import Span
from ..core.things import Direction
from ..errors import SegmenterUnavailableError
from .locator import locate

LOGGER = logging.getLogger(__name__)

Tokenizer = Callable[[str], Iterable[str]]


class SegmentSource(Protocol):
    """External segmentation engine consumed by the motion core."""

    def ensure_loaded(self) -> None:
        """Load the engine once; raise :class:`SegmenterUnavailableError` on failure."""
        ...

    def segments_of(self, text: str) -> list[Span]:
        """Split ``text`` into ordered spans relative to its first character."""
        ...

    def step_words(self, text: str, origin: int, count: int) -> int:
        ...

    def bounds_for_direction_scan(self, text: str, cursor: int, direction: Direction) -> Span | None:
        ...


def resolve_tokenizer(path: str) -> Tokenizer:
    """Import ``module:attr`` (or ``module.attr``) and return the callable it names."""

    module_name, sep, attr_name = path.partition(":")
    if not sep:
        module_name, _, attr_name = path.rpartition(".")
    if not module_name or not attr_name:
        raise SegmenterUnavailableError(path, "expected 'module:callable' or 'module.callable'")
    try:
        target = importlib.import_module(module_name)
    except ImportError as exc:
        raise SegmenterUnavailableError(path, f"cannot import module {module_name!r}", cause=exc) from exc
    for part in attr_name.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise SegmenterUnavailableError(path, f"{module_name!r} has no attribute {attr_name!r}", cause=exc) from exc
    if not callable(target):
        raise SegmenterUnavailableError(path, f"{attr_name!r} is not callable")
    return target


class TokenizerSegmentSource:
    """:class:`SegmentSource` backed by a token-producing callable."""

    def __init__(
        self,
        tokenizer: Tokenizer | str | None = None,
        *,
        classifier: CharClassifier | None = None,
    ) -> None:
        self.classifier = classifier or CharClassifier()
        if tokenizer is None or isinstance(tokenizer, str):
            self._path = tokenizer or None
            self._tokenizer: Tokenizer | None = None
        else:
            self._path = getattr(tokenizer, "__qualname__", None) or repr(tokenizer)
            self._tokenizer = tokenizer

    @property
    def name(self) -> str | None:
        return self._path

    @property
    def loaded(self) -> bool:
        return self._tokenizer is not None

    def ensure_loaded(self) -> None:
        if self._tokenizer is not None:
            return
        if not self._path:
            raise SegmenterUnavailableError(None, "no segmenter configured")
        self._tokenizer = resolve_tokenizer(self._path)
        LOGGER.info("Loaded segmenter %s", self._path)

    def segments_of(self, text: str) -> list[Span]:
        self.ensure_loaded()
        assert self._tokenizer is not None
        spans: list[Span] = []
        offset = 0
        for token in self._tokenizer(text):
            token = str(token)
            if not token:
                continue
            if text.startswith(token, offset):
                start = offset
            else:
                # some tokenizers drop whitespace or normalise characters
                start = text.find(token, offset)
                if start < 0:
                    LOGGER.debug("Token %r not found after offset %d; skipped", token, offset)
                    continue
            end = start + len(token)
            spans.append(Span(start, end))
            offset = end
        return spans

    def bounds_for_direction_scan(self, text: str, cursor: int, direction: Direction) -> Span | None:
        """Return the contiguous CJK run around ``cursor``.

        The character at the cursor anchors the run; when scanning backward
        the character before the cursor is used if the one at it is not CJK.
        """

        is_cjk = self.classifier.is_cjk
        length = len(text)
        if 0 <= cursor < length and is_cjk(text[cursor]):
            anchor = cursor
        elif direction is Direction.BACKWARD and 0 < cursor <= length and is_cjk(text[cursor - 1]):
            anchor = cursor - 1
        else:
            return None
        start = anchor
        while start > 0 and is_cjk(text[start - 1]):
            start -= 1
        end = anchor + 1
        while end < length and is_cjk(text[end]):
            end += 1
        return Span(start, end)

    def step_words(self, text: str, origin: int, count: int) -> int:
        """Move ``|count|`` words, treating each CJK segment as one word."""

        position = max(0, min(int(origin), len(text)))
        forward = count > 0
        for _ in range(abs(count)):
            target = self._step_forward(text, position) if forward else self._step_backward(text, position)
            if target == position:
                break
            position = target
        return position

    def _step_forward(self, text: str, position: int) -> int:
        is_cjk = self.classifier.is_cjk
        limit = len(text)
        while position < limit and not text[position].isalnum():
            position += 1
        if position >= limit:
            return limit
        if is_cjk(text[position]):
            run = self.bounds_for_direction_scan(text, position, Direction.FORWARD)
            assert run is not None
            segment = locate(position, run, self.segments_of(run.slice(text)))
            if segment is None or segment.end <= position:
                return run.end
            return segment.end
        while position < limit and text[position].isalnum() and not is_cjk(text[position]):
            position += 1
        return position

    def _step_backward(self, text: str, position: int) -> int:
        is_cjk = self.classifier.is_cjk
        while position > 0 and not text[position - 1].isalnum():
            position -= 1
        if position == 0:
            return 0
        if is_cjk(text[position - 1]):
            run = self.bounds_for_direction_scan(text, position - 1, Direction.BACKWARD)
            assert run is not None
            segment = locate(position - 1, run, self.segments_of(run.slice(text)))
            if segment is None or segment.start >= position:
                return run.start
            return segment.start
        while position > 0 and text[position - 1].isalnum() and not is_cjk(text[position - 1]):
            position -= 1
        return position


__all__ = ["SegmentSource", "Tokenizer", "TokenizerSegmentSource", "resolve_tokenizer"]
