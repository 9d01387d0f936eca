"""Core domain types: spans, things, directions and character classes."""

from .charclass import DEFAULT_CJK_PATTERN, CharClassifier
from .ranges import Span
from .things import Direction, IncludeSyntax, IncludeSyntaxTable, Thing

__all__ = [
    "CharClassifier",
    "DEFAULT_CJK_PATTERN",
    "Direction",
    "IncludeSyntax",
    "IncludeSyntaxTable",
    "Span",
    "Thing",
]
