"""CJK character classification."""

from __future__ import annotations

import re

# Hiragana, Katakana, CJK Extension A, Unified and Compatibility Ideographs,
# half-width Katakana.
DEFAULT_CJK_PATTERN = r"[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\uff66-\uff9f]"


class CharClassifier:
    """Decides whether a single character belongs to the CJK class."""

    def __init__(self, pattern: str = DEFAULT_CJK_PATTERN) -> None:
        self.pattern = pattern
        self._regex = re.compile(pattern)

    def is_cjk(self, char: str | None) -> bool:
        if not char:
            return False
        return self._regex.fullmatch(char[0]) is not None

    def contains_cjk(self, text: str) -> bool:
        return self._regex.search(text) is not None

    def __repr__(self) -> str:
        return f"CharClassifier({self.pattern!r})"


__all__ = ["CharClassifier", "DEFAULT_CJK_PATTERN"]
