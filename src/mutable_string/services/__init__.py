"""Service layer helpers (settings, etc.)."""

from .settings import Settings, SettingsStore

__all__ = ["Settings", "SettingsStore"]
