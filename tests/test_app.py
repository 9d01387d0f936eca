"""Tests for the host bootstrap helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from cjkmotion import app
from cjkmotion.core.things import Thing
from cjkmotion.editor.buffer import TextBuffer
from cjkmotion.integration.overrides import Behavior, OverrideRegistry
from cjkmotion.services.settings import Settings, SettingsStore
from cjkmotion.utils import logging as logging_utils


def _registry() -> OverrideRegistry:
    registry = OverrideRegistry()
    registry.register_default(Behavior.MARK_THING, lambda *args, **kwargs: "host-mark")
    registry.register_default(Behavior.NEXT_THING, lambda *args, **kwargs: "host-next")
    return registry


def test_configure_logging_levels(tmp_path: Path) -> None:
    app.configure_logging(True, force=True, log_dir=tmp_path, console=False)
    assert logging.getLogger().level == logging.DEBUG

    app.configure_logging(False, force=True, log_dir=tmp_path, console=False)
    assert logging.getLogger().level == logging.INFO


def test_load_settings_defaults_when_file_missing(tmp_path: Path) -> None:
    assert app.load_settings(tmp_path / "absent.json") == Settings()


def test_bootstrap_reads_settings_and_configures_logging(tmp_path: Path, segment_source) -> None:
    settings_path = tmp_path / "settings.json"
    SettingsStore(settings_path).save(Settings(enabled=True, debug_logging=True))
    registry = _registry()
    host = TextBuffer("我们喜欢北京天安门", point=5)

    mode = app.bootstrap(
        registry,
        host,
        settings_path=settings_path,
        source=segment_source,
        log_dir=tmp_path / "logs",
        console=False,
    )

    assert mode.enabled
    assert logging.getLogger().level == logging.DEBUG
    assert logging_utils.get_log_path() == tmp_path / "logs" / "cjkmotion.log"
    selection = registry.call(Behavior.MARK_THING, Thing.WORD, Thing.WORD)
    assert selection.bounds.to_tuple() == (4, 6)


def test_bootstrap_leaves_host_defaults_when_disabled(tmp_path: Path, segment_source) -> None:
    registry = _registry()

    mode = app.bootstrap(
        registry,
        TextBuffer("abc"),
        settings=Settings(),
        source=segment_source,
        log_dir=tmp_path,
        console=False,
    )

    assert not mode.enabled
    assert registry.call(Behavior.NEXT_THING) == "host-next"
