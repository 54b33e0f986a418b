"""Core data models shared across scrollmarks components."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict


class MarkerKind(str, Enum):
    """Structural category of a marker; the renderer picks a style from it."""

    HEADER = "header"
    FUNCTION = "function"
    CLASS = "class"
    ACCESS_SPECIFIER = "access_specifier"


class LanguageMode(str, Enum):
    """Rule set applied to a document, fixed when the document is opened."""

    C_LIKE = "clike"
    CSHARP_LIKE = "csharp"

    @classmethod
    def parse(cls, value: str) -> "LanguageMode":
        lowered = value.strip().lower()
        for mode in cls:
            if lowered in {mode.value, mode.name.lower()}:
                return mode
        if lowered in {"c#", "cs", "c_sharp"}:
            return cls.CSHARP_LIKE
        if lowered in {"c", "c++", "cpp", "cxx"}:
            return cls.C_LIKE
        raise ValueError(f"Unknown language mode: {value!r}")


@dataclass(frozen=True)
class FeatureFlags:
    """Display toggles read by the scan pipeline before each scan."""

    show_headers: bool = True
    show_functions: bool = True
    show_classes: bool = True
    show_access_specifiers: bool = False
    shorten_access_specifiers: bool = True

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(item.name for item in fields(cls))

    def as_dict(self) -> Dict[str, bool]:
        return {name: getattr(self, name) for name in self.names()}


@dataclass(frozen=True)
class Marker:
    """Structural annotation for one source line."""

    kind: MarkerKind
    name: str
    offset: int = 0
    line: int = 0

    def as_dict(self) -> Dict[str, object]:
        return {
            "offset": self.offset,
            "line": self.line,
            "kind": self.kind.value,
            "name": self.name,
        }
