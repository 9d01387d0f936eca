"""Movement granularities, directions and per-thing include-syntax policy."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from ..errors import InvalidIncludeSyntaxError


class Thing(str, Enum):
    """Closed set of movement granularities; also used as selection mode tags."""

    WORD = "word"
    SYMBOL = "symbol"
    LINE = "line"
    PARAGRAPH = "paragraph"

    @classmethod
    def parse(cls, value: "Thing | str") -> "Thing":
        if isinstance(value, Thing):
            return value
        return cls(str(value).strip().lower())


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"

    @classmethod
    def from_count(cls, count: int) -> "Direction":
        """Negative counts move backward; zero and positive counts move forward."""

        return cls.BACKWARD if count < 0 else cls.FORWARD

    @property
    def sign(self) -> int:
        return -1 if self is Direction.BACKWARD else 1


@dataclass(slots=True, frozen=True)
class IncludeSyntax:
    """Characters a selection edge moves over, per direction.

    Each entry is the body of a regular-expression character class, so
    ``"^\\w"`` reads "any character that is not a word character". An empty
    entry absorbs nothing.
    """

    forward: str = ""
    backward: str = ""

    def __post_init__(self) -> None:
        for value in (self.forward, self.backward):
            compile_include_syntax(value)

    def for_count(self, count: int) -> str:
        return self.forward if count > 0 else self.backward


def compile_include_syntax(body: str) -> re.Pattern[str] | None:
    """Compile an include-syntax class body, returning ``None`` for an empty one."""

    if not body:
        return None
    try:
        return re.compile(f"[{body}]")
    except re.error as exc:
        raise InvalidIncludeSyntaxError(body, str(exc)) from exc


_ABSORB_NOTHING = IncludeSyntax()


@dataclass(slots=True)
class IncludeSyntaxTable:
    """Explicit ``Thing -> IncludeSyntax`` mapping with a default entry.

    Things without an entry resolve to ``default``, which absorbs nothing
    unless configured otherwise.
    """

    entries: dict[Thing, IncludeSyntax] = field(default_factory=dict)
    default: IncludeSyntax = _ABSORB_NOTHING

    def lookup(self, thing: Thing) -> IncludeSyntax:
        return self.entries.get(thing, self.default)

    def resolve(self, thing: Thing, count: int) -> str:
        """Return the include-syntax body used when stepping ``count`` things."""

        return self.lookup(thing).for_count(count)

    def register(self, thing: Thing, forward: str = "", backward: str = "") -> IncludeSyntax:
        entry = IncludeSyntax(forward, backward)
        self.entries[thing] = entry
        return entry

    @classmethod
    def from_mapping(cls, payload: Mapping[Thing | str, IncludeSyntax | tuple[str, str]]) -> "IncludeSyntaxTable":
        table = cls()
        for key, value in payload.items():
            thing = Thing.parse(key)
            if isinstance(value, IncludeSyntax):
                table.entries[thing] = value
            else:
                forward, backward = value
                table.register(thing, forward, backward)
        return table


__all__ = [
    "Direction",
    "IncludeSyntax",
    "IncludeSyntaxTable",
    "Thing",
    "compile_include_syntax",
]
