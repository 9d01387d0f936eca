"""Editor integration: override registration and the mode toggle."""

from .overrides import Behavior, CjkMotionMode, OverrideHandle, OverrideRegistry

__all__ = ["Behavior", "CjkMotionMode", "OverrideHandle", "OverrideRegistry"]
