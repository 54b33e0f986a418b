"""Configuration loading for scrollmarks (.scrollmarks.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .language import C_LIKE_SUFFIXES, CSHARP_SUFFIXES
from .models import FeatureFlags
from .stores import DEFAULT_COLLECTION

CONFIG_FILENAME = ".scrollmarks.yml"
DEFAULT_SETTINGS_PATH = Path(".scrollmarks") / "settings.json"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class LanguageConfig:
    """File suffixes mapped to each language mode."""

    csharp_suffixes: List[str] = field(default_factory=lambda: sorted(CSHARP_SUFFIXES))
    clike_suffixes: List[str] = field(default_factory=lambda: sorted(C_LIKE_SUFFIXES))


@dataclass
class SettingsConfig:
    """Location of the persisted feature flags."""

    path: Path = DEFAULT_SETTINGS_PATH
    collection: str = DEFAULT_COLLECTION


@dataclass
class ScrollmarksConfig:
    """Represents the settings defined in .scrollmarks.yml."""

    root: Path
    flags: FeatureFlags = field(default_factory=FeatureFlags)
    languages: LanguageConfig = field(default_factory=LanguageConfig)
    settings: SettingsConfig = field(default_factory=SettingsConfig)

    @property
    def settings_path(self) -> Path:
        path = self.settings.path.expanduser()
        return path if path.is_absolute() else self.root / path


def load_config(config_path: Path) -> ScrollmarksConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ScrollmarksConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    flags = _parse_flags(_as_dict(data.get("flags")))

    languages = LanguageConfig()
    language_data = _as_dict(data.get("languages"))
    if language_data:
        if "csharp_suffixes" in language_data:
            languages.csharp_suffixes = _as_str_list(language_data.get("csharp_suffixes"))
        if "clike_suffixes" in language_data:
            languages.clike_suffixes = _as_str_list(language_data.get("clike_suffixes"))

    settings = SettingsConfig()
    settings_data = _as_dict(data.get("settings"))
    if settings_data:
        path_value = _as_str(settings_data.get("path"))
        if path_value:
            settings.path = Path(path_value)
        collection = _as_str(settings_data.get("collection"))
        if collection:
            settings.collection = collection

    return ScrollmarksConfig(root=root, flags=flags, languages=languages, settings=settings)


def _parse_flags(flag_data: Dict[str, Any]) -> FeatureFlags:
    flags = FeatureFlags()
    known = FeatureFlags.names()
    for key, raw in flag_data.items():
        if key not in known:
            raise ConfigError(f"Unknown flag '{key}' in {CONFIG_FILENAME}")
        value = _as_bool(raw)
        if value is None:
            raise ConfigError(f"Flag '{key}' must be a boolean, got {raw!r}")
        flags = replace(flags, **{key: value})
    return flags


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "on", "1"}:
            return True
        if lowered in {"false", "no", "off", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "LanguageConfig",
    "ScrollmarksConfig",
    "SettingsConfig",
    "load_config",
]
