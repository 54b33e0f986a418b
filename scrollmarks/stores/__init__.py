"""Persistent stores used by scrollmarks."""

from .settings_store import DEFAULT_COLLECTION, SettingsListener, SettingsStore

__all__ = ["DEFAULT_COLLECTION", "SettingsListener", "SettingsStore"]
