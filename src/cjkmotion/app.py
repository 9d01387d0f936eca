"""Bootstrap helpers for editors embedding the CJK motion mode."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from .editor.host import EditorHost
from .integration.overrides import CjkMotionMode, OverrideRegistry
from .segmentation.source import SegmentSource
from .services.settings import Settings, SettingsStore
from .utils import logging as logging_utils

_LOGGER = logging.getLogger(__name__)


def configure_logging(
    debug: bool = False,
    *,
    force: bool = False,
    log_dir: Path | str | None = None,
    console: bool = True,
    qt_messages: bool = False,
) -> Path:
    """Configure package logging; optionally route Qt messages into it."""

    level = logging.DEBUG if debug else logging.INFO
    log_path = logging_utils.setup_logging(level, log_dir=log_dir, console=console, force=force)
    _LOGGER.debug("Logging configured (level=%s)", logging.getLevelName(level))
    if qt_messages:
        _install_qt_message_handler()
    return log_path


def load_settings(
    path: Optional[Path] = None,
    *,
    store: SettingsStore | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Settings:
    """Load persisted settings or fall back to defaults."""

    active_store = store or SettingsStore(path)
    try:
        return active_store.load(overrides=overrides)
    except OSError as exc:
        _LOGGER.warning("Failed to load settings from %s: %s", active_store.path, exc)
        return Settings()


def bootstrap(
    registry: OverrideRegistry,
    host: EditorHost,
    *,
    settings: Settings | None = None,
    settings_path: Optional[Path] = None,
    source: SegmentSource | None = None,
    log_dir: Path | str | None = None,
    console: bool = True,
) -> CjkMotionMode:
    """Load settings, configure logging and attach the mode to ``registry``.

    This is the single entry point a host calls once its default
    ``mark_thing``/``next_thing`` handlers are registered.
    """

    active = settings if settings is not None else load_settings(settings_path)
    configure_logging(active.debug_logging, force=True, log_dir=log_dir, console=console)
    mode = CjkMotionMode.from_settings(registry, host, active, source=source)
    _LOGGER.info("CJK motion mode attached (enabled=%s, segmenter=%s)", mode.enabled, active.segmenter)
    return mode


def _install_qt_message_handler() -> None:
    """Redirect Qt warnings to the Python logging stack."""

    from PySide6.QtCore import QtMsgType, qInstallMessageHandler

    level_map = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def _handler(mode, context, message):  # type: ignore[no-untyped-def]
        del context
        logging.getLogger("PySide6").log(level_map.get(mode, logging.INFO), message)

    qInstallMessageHandler(_handler)


__all__ = ["bootstrap", "configure_logging", "load_settings"]
