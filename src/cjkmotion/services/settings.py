"""Settings dataclass and JSON persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

from ..core.charclass import DEFAULT_CJK_PATTERN
from ..core.things import IncludeSyntaxTable, Thing
from ..errors import InvalidIncludeSyntaxError

__all__ = [
    "DEFAULT_INCLUDE_SYNTAX",
    "Settings",
    "SettingsStore",
]

LOGGER = logging.getLogger(__name__)
_SETTINGS_DIR = Path.home() / ".cjkmotion"
_DEFAULT_SETTINGS_PATH = _SETTINGS_DIR / "settings.json"
_SETTINGS_VERSION = 1
_ENV_OVERRIDES: Mapping[str, str] = {
    "CJKMOTION_SEGMENTER": "segmenter",
    "CJKMOTION_CJK_PATTERN": "cjk_pattern",
    "CJKMOTION_HIGHLIGHT_COLOR": "highlight_color",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "CJKMOTION_ENABLED": "enabled",
    "CJKMOTION_CJK_WORD_MOTION": "cjk_word_motion",
    "CJKMOTION_DEBUG_LOGGING": "debug_logging",
}
_INT_ENV_OVERRIDES: Mapping[str, str] = {
    "CJKMOTION_SEARCH_RING_SIZE": "search_ring_size",
}
_TRUE_VALUES = {"1", "true", "yes", "on"}

# Word and symbol motions start their selection past any non-word characters.
DEFAULT_INCLUDE_SYNTAX: Mapping[str, tuple[str, str]] = {
    "word": (r"^\w", r"^\w"),
    "symbol": (r"^\w", r"^\w"),
}


def _default_include_syntax() -> dict[str, list[str]]:
    return {name: list(pair) for name, pair in DEFAULT_INCLUDE_SYNTAX.items()}


@dataclass(slots=True)
class Settings:
    """User-configurable settings persisted between sessions."""

    enabled: bool = False
    segmenter: str | None = None
    cjk_pattern: str = DEFAULT_CJK_PATTERN
    cjk_word_motion: bool = True
    include_syntax: dict[str, list[str]] = field(default_factory=_default_include_syntax)
    search_ring_size: int = 16
    highlight_color: str = "#fff3a3"
    debug_logging: bool = False

    def include_syntax_table(self) -> IncludeSyntaxTable:
        """Build the include-syntax table, skipping entries that do not parse."""

        table = IncludeSyntaxTable()
        for name, pair in (self.include_syntax or {}).items():
            try:
                thing = Thing.parse(name)
            except ValueError:
                LOGGER.warning("Ignoring include-syntax for unknown thing %r", name)
                continue
            if isinstance(pair, str):
                forward = backward = pair
            elif isinstance(pair, (list, tuple)) and len(pair) == 2:
                forward, backward = (str(value or "") for value in pair)
            else:
                LOGGER.warning("Include-syntax for %r must be a string or a pair, got %r", name, pair)
                continue
            try:
                table.register(thing, forward, backward)
            except InvalidIncludeSyntaxError as exc:
                LOGGER.warning("%s", exc)
        return table


class SettingsStore:
    """Persistence adapter for :class:`Settings`."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or _DEFAULT_SETTINGS_PATH

    @property
    def path(self) -> Path:
        """Return the resolved path backing this store."""

        return self._path

    def load(self, *, overrides: Mapping[str, Any] | None = None) -> Settings:
        """Load settings from disk, applying runtime and environment overrides."""

        payload = self._read_payload()
        settings = Settings()
        if payload:
            data = _filter_fields(payload)
            include_payload = data.get("include_syntax")
            if include_payload is not None and not isinstance(include_payload, Mapping):
                LOGGER.warning("Ignoring non-mapping include_syntax payload of type %s", type(include_payload))
                data.pop("include_syntax")
            try:
                settings = Settings(**data)
            except TypeError as exc:
                LOGGER.warning("Settings payload contained unexpected data: %s", exc)
                settings = Settings()
        LOGGER.debug("Settings loaded from %s (segmenter=%s)", self._path, settings.segmenter)

        if payload and payload.get("version") != _SETTINGS_VERSION:
            try:
                self.save(settings)
            except OSError as exc:
                LOGGER.warning("Failed to migrate settings payload: %s", exc)

        if overrides:
            settings = self._apply_overrides(settings, overrides, source="runtime")
        return self._apply_env_overrides(settings)

    def save(self, settings: Settings) -> Path:
        """Persist settings to disk with atomic file writes."""

        payload = self._serialize(settings)
        body = json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(".tmp")
        tmp_path.write_text(body, encoding="utf-8")
        tmp_path.replace(self._path)
        LOGGER.debug("Settings saved to %s", self._path)
        return self._path

    def _serialize(self, settings: Settings) -> Dict[str, Any]:
        data = asdict(settings)
        data["version"] = _SETTINGS_VERSION
        return data

    def _read_payload(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
            payload = json.loads(text)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            LOGGER.warning("Settings file %s is not valid JSON: %s", self._path, exc)
            return {}
        if not isinstance(payload, dict):
            LOGGER.warning("Settings file %s does not contain an object", self._path)
            return {}
        return payload

    def _apply_overrides(
        self,
        settings: Settings,
        overrides: Mapping[str, Any],
        *,
        source: str = "runtime",
    ) -> Settings:
        allowed = {item.name for item in fields(Settings)}
        filtered: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in allowed or value is None:
                continue
            filtered[key] = value
        include_override = filtered.get("include_syntax")
        if isinstance(include_override, Mapping):
            merged = dict(settings.include_syntax or {})
            merged.update(include_override)
            filtered["include_syntax"] = merged
        if filtered:
            LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
            settings = replace(settings, **filtered)
        return settings

    def _apply_env_overrides(self, settings: Settings) -> Settings:
        overrides: Dict[str, Any] = {}
        for env_name, field_name in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value
        for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value.strip().lower() in _TRUE_VALUES
        for env_name, field_name in _INT_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue
            try:
                overrides[field_name] = int(value, 10)
            except ValueError:
                LOGGER.warning(
                    "Environment override %s=%s is not a valid integer",
                    env_name,
                    value,
                )
        if overrides:
            settings = self._apply_overrides(settings, overrides, source="environment")
        return settings


def _filter_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    allowed = {item.name for item in fields(Settings)}
    return {key: value for key, value in payload.items() if key in allowed}
