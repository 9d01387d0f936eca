"""Tests for settings persistence and overrides."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cjkmotion.core.charclass import DEFAULT_CJK_PATTERN
from cjkmotion.core.things import Thing
from cjkmotion.services.settings import Settings, SettingsStore


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    settings = SettingsStore(tmp_path / "settings.json").load()

    assert settings == Settings()
    assert settings.cjk_pattern == DEFAULT_CJK_PATTERN
    assert settings.enabled is False


def test_settings_round_trip(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "nested" / "settings.json")
    original = Settings(
        enabled=True,
        segmenter="jieba:cut",
        include_syntax={"word": ["^\\w", "\\s"]},
        search_ring_size=4,
    )

    path = store.save(original)
    restored = store.load()

    assert path.exists()
    assert restored == original
    assert json.loads(path.read_text(encoding="utf-8"))["version"] == 1


def test_invalid_json_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    assert SettingsStore(path).load() == Settings()


def test_unexpected_payload_shape_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(["enabled"]), encoding="utf-8")

    assert SettingsStore(path).load() == Settings()


def test_unversioned_payload_is_rewritten(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"segmenter": "jieba:cut", "unknown": 1}), encoding="utf-8")

    settings = SettingsStore(path).load()

    assert settings.segmenter == "jieba:cut"
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["version"] == 1
    assert "unknown" not in payload


def test_runtime_overrides_merge_include_syntax(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "settings.json")

    settings = store.load(overrides={"include_syntax": {"line": ["\\s", ""]}, "segmenter": None})

    assert settings.include_syntax["line"] == ["\\s", ""]
    assert "word" in settings.include_syntax
    assert settings.segmenter is None


def test_environment_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CJKMOTION_SEGMENTER", "jieba:cut")
    monkeypatch.setenv("CJKMOTION_ENABLED", "yes")
    monkeypatch.setenv("CJKMOTION_CJK_WORD_MOTION", "off")
    monkeypatch.setenv("CJKMOTION_SEARCH_RING_SIZE", "32")

    settings = SettingsStore(tmp_path / "settings.json").load()

    assert settings.segmenter == "jieba:cut"
    assert settings.enabled is True
    assert settings.cjk_word_motion is False
    assert settings.search_ring_size == 32


def test_invalid_integer_environment_override_is_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CJKMOTION_SEARCH_RING_SIZE", "many")

    assert SettingsStore(tmp_path / "settings.json").load().search_ring_size == 16


def test_include_syntax_table_skips_bad_entries() -> None:
    settings = Settings(
        include_syntax={
            "word": ["^\\w", "\\s"],
            "line": "\\s",
            "sentence": ["x", "y"],
            "symbol": ["\\", ""],
            "paragraph": ["a", "b", "c"],
        }
    )

    table = settings.include_syntax_table()

    assert table.resolve(Thing.WORD, 1) == "^\\w"
    assert table.resolve(Thing.WORD, -1) == "\\s"
    assert table.resolve(Thing.LINE, -1) == "\\s"
    assert table.resolve(Thing.SYMBOL, 1) == ""
    assert table.resolve(Thing.PARAGRAPH, 1) == ""
