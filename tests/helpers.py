"""Shared test helpers and stub classes.

Fakes for the collaborators the motion core treats as external: the
segmenter, the steppers and a host that records what it was asked to do.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Sequence

from cjkmotion.core.ranges import Span
from cjkmotion.core.things import Direction, Thing
from cjkmotion.editor.buffer import TextBuffer
from cjkmotion.editor.document_model import Selection

VOCABULARY = ("我们", "喜欢", "北京", "天安门", "中文", "分词")


def dictionary_tokenizer(vocabulary: Iterable[str] = VOCABULARY) -> Callable[[str], Iterator[str]]:
    """Greedy longest-match tokenizer; unknown characters become single tokens."""

    words = sorted(vocabulary, key=len, reverse=True)

    def cut(text: str) -> Iterator[str]:
        index = 0
        while index < len(text):
            for word in words:
                if text.startswith(word, index):
                    yield word
                    index += len(word)
                    break
            else:
                yield text[index]
                index += 1

    return cut


class RecordingHost(TextBuffer):
    """TextBuffer that remembers every realize call."""

    def __init__(self, text: str = "", point: int = 0) -> None:
        super().__init__(text, point)
        self.realized: list[tuple[Selection, bool]] = []
        self.directions: list[Direction] = []

    def realize(self, selection: Selection, *, extend: bool) -> Selection:
        self.realized.append((selection, extend))
        return super().realize(selection, extend=extend)

    def set_direction(self, direction: Direction) -> None:
        self.directions.append(direction)
        super().set_direction(direction)


class FixedStepper:
    """Stepper that always lands on ``target``."""

    def __init__(self, target: int) -> None:
        self.target = target
        self.calls: list[tuple[Thing, int, int]] = []

    def step(self, thing: Thing, origin: int, count: int) -> int:
        self.calls.append((thing, origin, count))
        return self.target


class FakeSegmentSource:
    """Segment source returning canned scan bounds and segments."""

    def __init__(self, scan: Span | None = None, segments: Sequence[Span] = (), *, fail: Exception | None = None) -> None:
        self.scan = scan
        self.segments = list(segments)
        self.fail = fail
        self.load_calls = 0
        self.segmented: list[str] = []

    def ensure_loaded(self) -> None:
        self.load_calls += 1
        if self.fail is not None:
            raise self.fail

    def segments_of(self, text: str) -> list[Span]:
        self.segmented.append(text)
        return list(self.segments)

    def step_words(self, text: str, origin: int, count: int) -> int:
        return origin

    def bounds_for_direction_scan(self, text: str, cursor: int, direction: Direction) -> Span | None:
        return self.scan
