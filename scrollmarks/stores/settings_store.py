"""Persistent store for feature flags with change notification."""

from __future__ import annotations

from dataclasses import replace
import json
from pathlib import Path
from typing import Callable, Dict, List, Mapping

from ..logging import get_logger
from ..models import FeatureFlags

_STORE_VERSION = 1
DEFAULT_COLLECTION = "scrollmarks.FeatureFlags"

SettingsListener = Callable[[FeatureFlags], None]


class SettingsStore:
    """Keeps the five display flags as named booleans in a JSON collection.

    ``apply`` saves and then pushes the new flags to every subscriber, which is
    how open overlays learn about changes.
    """

    def __init__(
        self,
        path: Path | None,
        *,
        collection: str = DEFAULT_COLLECTION,
        defaults: FeatureFlags | None = None,
    ) -> None:
        self._path = path
        self.collection = collection
        self._defaults = defaults or FeatureFlags()
        self._listeners: List[SettingsListener] = []
        self.logger = get_logger("settings")
        self._flags = self.load()

    @property
    def flags(self) -> FeatureFlags:
        return self._flags

    def load(self) -> FeatureFlags:
        """Read flags from disk; missing or invalid values keep their defaults."""
        flags = self._defaults
        stored = self._read_collection()
        for name in FeatureFlags.names():
            if name not in stored:
                continue
            value = stored[name]
            if not isinstance(value, bool):
                self.logger.warning(
                    "Ignoring stored setting %s=%r (expected a boolean)", name, value
                )
                continue
            flags = replace(flags, **{name: value})
        self._flags = flags
        return flags

    def save(self, flags: FeatureFlags | None = None) -> None:
        if flags is not None:
            self._flags = flags
        if self._path is None:
            return
        payload = self._read_payload()
        collections = payload.get("collections")
        if not isinstance(collections, dict):
            collections = {}
        collections[self.collection] = self._flags.as_dict()
        payload["collections"] = collections
        payload["version"] = _STORE_VERSION
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8"
        )

    def apply(self, flags: FeatureFlags) -> None:
        """Persist ``flags`` and notify subscribers."""
        self.save(flags)
        self.notify()

    def update(self, changes: Mapping[str, object]) -> FeatureFlags:
        """Apply named boolean changes, e.g. ``{"show_functions": False}``."""
        values: Dict[str, bool] = {}
        for name, value in changes.items():
            if name not in FeatureFlags.names():
                raise ValueError(f"Unknown setting: {name}")
            if not isinstance(value, bool):
                raise ValueError(f"Setting {name} expects a boolean, got {value!r}")
            values[name] = value
        flags = replace(self._flags, **values)
        self.apply(flags)
        return flags

    def subscribe(self, listener: SettingsListener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._flags)

    # ------------------------------------------------------------------
    # Internal helpers

    def _read_collection(self) -> Dict[str, object]:
        collections = self._read_payload().get("collections")
        if not isinstance(collections, dict):
            return {}
        stored = collections.get(self.collection)
        if not isinstance(stored, dict):
            return {}
        return stored

    def _read_payload(self) -> Dict[str, object]:
        if self._path is None:
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as exc:
            self.logger.debug("Unreadable settings file %s: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            self.logger.warning("Ignoring settings file %s: expected a JSON object", self._path)
            return {}
        if data.get("version") != _STORE_VERSION:
            self.logger.warning(
                "Ignoring settings file %s with version %r; saving will replace it",
                self._path,
                data.get("version"),
            )
            return {}
        return data


__all__ = ["DEFAULT_COLLECTION", "SettingsListener", "SettingsStore"]
