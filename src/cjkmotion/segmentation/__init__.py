"""Segment sources and the boundary locator."""

from .locator import locate
from .source import SegmentSource, Tokenizer, TokenizerSegmentSource, resolve_tokenizer

__all__ = ["SegmentSource", "Tokenizer", "TokenizerSegmentSource", "locate", "resolve_tokenizer"]
