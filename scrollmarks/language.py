"""Language mode detection from file names."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .models import LanguageMode

CSHARP_SUFFIXES = frozenset({".cs", ".csx"})

C_LIKE_SUFFIXES = frozenset(
    {
        ".c",
        ".h",
        ".cpp",
        ".hpp",
        ".cc",
        ".hh",
        ".cxx",
        ".hxx",
        ".c++",
        ".h++",
        ".inl",
        ".ipp",
        ".tpp",
        ".m",
        ".mm",
        ".cu",
        ".cuh",
    }
)


def detect_language_mode(
    path: str | Path,
    *,
    csharp_suffixes: Iterable[str] | None = None,
) -> LanguageMode:
    """Return the rule set for ``path``.

    Any code file that is not recognised as C# falls back to the C-like rules,
    which are the more conservative of the two.
    """
    suffix = Path(path).suffix.lower()
    csharp = _normalise_suffixes(csharp_suffixes) if csharp_suffixes is not None else CSHARP_SUFFIXES
    if suffix in csharp:
        return LanguageMode.CSHARP_LIKE
    return LanguageMode.C_LIKE


def is_known_source(
    path: str | Path,
    *,
    csharp_suffixes: Iterable[str] | None = None,
    clike_suffixes: Iterable[str] | None = None,
) -> bool:
    """Return True when ``path`` carries a suffix of either language family."""
    suffix = Path(path).suffix.lower()
    csharp = _normalise_suffixes(csharp_suffixes) if csharp_suffixes is not None else CSHARP_SUFFIXES
    clike = _normalise_suffixes(clike_suffixes) if clike_suffixes is not None else C_LIKE_SUFFIXES
    return suffix in csharp or suffix in clike


def _normalise_suffixes(values: Iterable[str]) -> frozenset[str]:
    result = set()
    for value in values:
        cleaned = value.strip().lower()
        if not cleaned:
            continue
        if not cleaned.startswith("."):
            cleaned = f".{cleaned}"
        result.add(cleaned)
    return frozenset(result)


__all__ = ["C_LIKE_SUFFIXES", "CSHARP_SUFFIXES", "detect_language_mode", "is_known_source"]
