"""Explicit override registration for host behaviors.

Hosts register their default handlers for each :class:`Behavior`; the CJK
mode installs its own handlers on top and keeps the returned
:class:`OverrideHandle` objects to restore the defaults later.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from ..core.things import Thing
from ..editor.host import EditorHost
from ..errors import BehaviorNotRegisteredError
from ..motion.commands import CjkMotion
from ..segmentation.source import SegmentSource
from ..services.settings import Settings

__all__ = [
    "Behavior",
    "CjkMotionMode",
    "OverrideHandle",
    "OverrideRegistry",
]

LOGGER = logging.getLogger(__name__)

Handler = Callable[..., Any]


class Behavior(str, Enum):
    MARK_THING = "mark_thing"
    NEXT_THING = "next_thing"


# -----------------------------------------------------------------------------
# Registry
# -----------------------------------------------------------------------------


@dataclass(slots=True, eq=False)
class OverrideHandle:
    """Restores the handler that was active before an override was installed.

    ``restore`` is idempotent.
    """

    registry: "OverrideRegistry"
    behavior: Behavior
    handler: Handler
    previous: Handler
    restored: bool = False

    def restore(self) -> None:
        if self.restored:
            return
        self.registry._restore(self)
        self.restored = True


class OverrideRegistry:
    """Registry of host behaviors and the handlers currently serving them.

    Example:
        registry = OverrideRegistry()
        registry.register_default(Behavior.MARK_THING, host_mark_thing)

        handle = registry.install(Behavior.MARK_THING, motion.mark_thing)
        registry.call(Behavior.MARK_THING, Thing.WORD, Thing.WORD)
        handle.restore()
    """

    def __init__(self) -> None:
        self._defaults: dict[Behavior, Handler] = {}
        self._active: dict[Behavior, Handler] = {}
        self._handles: dict[Behavior, list[OverrideHandle]] = {}

    def register_default(self, behavior: Behavior, handler: Handler) -> None:
        self._defaults[behavior] = handler
        if not self._handles.get(behavior):
            self._active[behavior] = handler
        LOGGER.debug("Registered default handler for %s", behavior.value)

    def install(self, behavior: Behavior, handler: Handler) -> OverrideHandle:
        """Install ``handler`` for ``behavior``.

        Raises:
            BehaviorNotRegisteredError: If the host never registered a default.
        """

        if behavior not in self._defaults:
            raise BehaviorNotRegisteredError(behavior.value)
        handle = OverrideHandle(
            registry=self,
            behavior=behavior,
            handler=handler,
            previous=self._active[behavior],
        )
        self._handles.setdefault(behavior, []).append(handle)
        self._active[behavior] = handler
        LOGGER.debug("Installed override for %s", behavior.value)
        return handle

    def resolve(self, behavior: Behavior) -> Handler:
        try:
            return self._active[behavior]
        except KeyError:
            raise BehaviorNotRegisteredError(behavior.value) from None

    def call(self, behavior: Behavior, *args: Any, **kwargs: Any) -> Any:
        return self.resolve(behavior)(*args, **kwargs)

    def is_overridden(self, behavior: Behavior) -> bool:
        return bool(self._handles.get(behavior))

    def _restore(self, handle: OverrideHandle) -> None:
        stack = self._handles.get(handle.behavior, [])
        if handle not in stack:
            return
        index = stack.index(handle)
        if index + 1 < len(stack):
            # an override stacked on top now falls back to what this one replaced
            stack[index + 1].previous = handle.previous
        else:
            self._active[handle.behavior] = handle.previous
        stack.pop(index)
        LOGGER.debug("Restored handler for %s", handle.behavior.value)


# -----------------------------------------------------------------------------
# Mode toggle
# -----------------------------------------------------------------------------


@dataclass(slots=True)
class CjkMotionMode:
    """Capability object enabling or disabling the CJK overrides."""

    registry: OverrideRegistry
    motion: CjkMotion
    _handles: dict[Behavior, OverrideHandle] = field(default_factory=dict)

    @classmethod
    def from_settings(
        cls,
        registry: OverrideRegistry,
        host: EditorHost,
        settings: Settings,
        *,
        source: SegmentSource | None = None,
    ) -> "CjkMotionMode":
        """Wire the motion core from ``settings`` and enable it when configured to."""

        mode = cls(registry=registry, motion=CjkMotion.from_settings(host, settings, source=source))
        if settings.enabled:
            mode.enable()
        return mode

    @property
    def enabled(self) -> bool:
        return bool(self._handles)

    def enable(self) -> None:
        if self._handles:
            return
        self._handles[Behavior.MARK_THING] = self.registry.install(Behavior.MARK_THING, self._mark_thing)
        self._handles[Behavior.NEXT_THING] = self.registry.install(Behavior.NEXT_THING, self._next_thing)
        LOGGER.info("CJK motion mode enabled")

    def disable(self) -> None:
        if not self._handles:
            return
        for handle in reversed(list(self._handles.values())):
            handle.restore()
        self._handles.clear()
        LOGGER.info("CJK motion mode disabled")

    def toggle(self) -> bool:
        """Flip the mode and return the new state."""

        if self.enabled:
            self.disable()
        else:
            self.enable()
        return self.enabled

    def _mark_thing(
        self,
        thing: Thing,
        type: Thing,
        backward: bool = False,
        regexp_format: str | None = None,
    ) -> Any:
        return self.motion.mark_thing(thing, type, backward, regexp_format)

    def _next_thing(
        self,
        thing: Thing,
        type: Thing,
        n: int,
        include_syntax: str | None = None,
    ) -> Any:
        return self.motion.next_thing(thing, type, n, include_syntax)
