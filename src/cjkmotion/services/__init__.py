"""Service layer helpers (settings persistence)."""

from .settings import DEFAULT_INCLUDE_SYNTAX, Settings, SettingsStore

__all__ = ["DEFAULT_INCLUDE_SYNTAX", "Settings", "SettingsStore"]
