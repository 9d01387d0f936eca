"""Exception hierarchy shared across the package.

Only :class:`SegmenterUnavailableError` is meant to reach the user: every
other recoverable condition (no bounds, zero movement, mode mismatch)
degrades to a silent no-op inside the core.
"""

from __future__ import annotations

from typing import Any


class CjkMotionError(Exception):
    """Base class for all package errors."""


class SegmenterUnavailableError(CjkMotionError, RuntimeError):
    """Raised when the segment source cannot be loaded."""

    def __init__(self, segmenter: str | None, reason: str, *, cause: BaseException | None = None) -> None:
        self.segmenter = segmenter
        self.reason = reason
        self.cause = cause
        label = segmenter or "<unconfigured>"
        super().__init__(f"Segmenter {label!r} is unavailable: {reason}")

    def details(self) -> dict[str, Any]:
        return {
            "segmenter": self.segmenter,
            "reason": self.reason,
            "cause": repr(self.cause) if self.cause is not None else None,
        }


class BehaviorNotRegisteredError(CjkMotionError, KeyError):
    """Raised when an override targets a behavior the host never registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Behavior '{name}' has no registered default")

    def __str__(self) -> str:
        return self.args[0]


class InvalidIncludeSyntaxError(CjkMotionError, ValueError):
    """Raised when an include-syntax character class does not compile."""

    def __init__(self, body: str, reason: str) -> None:
        self.body = body
        self.reason = reason
        super().__init__(f"Invalid include-syntax class [{body}]: {reason}")


__all__ = [
    "BehaviorNotRegisteredError",
    "CjkMotionError",
    "InvalidIncludeSyntaxError",
    "SegmenterUnavailableError",
]
