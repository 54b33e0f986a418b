"""Tests for language mode detection."""

from __future__ import annotations

from pathlib import Path

import pytest

from scrollmarks.language import detect_language_mode, is_known_source
from scrollmarks.models import LanguageMode


def test_detects_csharp_by_suffix() -> None:
    assert detect_language_mode("src/Program.cs") is LanguageMode.CSHARP_LIKE
    assert detect_language_mode(Path("scripts/build.CSX")) is LanguageMode.CSHARP_LIKE


def test_other_code_files_use_c_like_rules() -> None:
    assert detect_language_mode("engine/Actor.cpp") is LanguageMode.C_LIKE
    assert detect_language_mode("engine/Actor.h") is LanguageMode.C_LIKE
    assert detect_language_mode("notes.txt") is LanguageMode.C_LIKE


def test_custom_suffixes_are_normalised() -> None:
    assert detect_language_mode("a.razor", csharp_suffixes=["razor"]) is LanguageMode.CSHARP_LIKE
    assert detect_language_mode("a.cs", csharp_suffixes=[".razor"]) is LanguageMode.C_LIKE
    assert is_known_source("a.ino", clike_suffixes=[".INO"])
    assert not is_known_source("a.py")


def test_language_mode_parse_accepts_aliases() -> None:
    assert LanguageMode.parse("csharp") is LanguageMode.CSHARP_LIKE
    assert LanguageMode.parse("C#") is LanguageMode.CSHARP_LIKE
    assert LanguageMode.parse("cpp") is LanguageMode.C_LIKE
    assert LanguageMode.parse("CLIKE") is LanguageMode.C_LIKE
    with pytest.raises(ValueError):
        LanguageMode.parse("python")
