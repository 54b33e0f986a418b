"""Tests for comment banner recognition."""

from __future__ import annotations

from scrollmarks.classifier import classify_line
from scrollmarks.classifiers.headers import HeaderRule, extract_header_text
from scrollmarks.models import FeatureFlags, LanguageMode, MarkerKind


def test_header_rule_extracts_banner_title() -> None:
    marker = classify_line("// == Initialization ==", LanguageMode.C_LIKE)

    assert marker is not None
    assert marker.kind is MarkerKind.HEADER
    assert marker.name == "Initialization"


def test_header_rule_accepts_every_decoration_and_indentation() -> None:
    for line in ("    // ## Setup ##", "\t//-- Setup --", "/* ** Setup", "// === Setup"):
        marker = classify_line(line, LanguageMode.C_LIKE)
        assert marker is not None, line
        assert marker.kind is MarkerKind.HEADER
        assert marker.name == "Setup"


def test_header_rule_works_in_csharp_documents() -> None:
    marker = classify_line("// -- Public API --", LanguageMode.CSHARP_LIKE)

    assert marker is not None
    assert marker.kind is MarkerKind.HEADER
    assert marker.name == "Public API"


def test_plain_comment_is_not_a_header() -> None:
    assert classify_line("// just a comment", LanguageMode.C_LIKE) is None
    assert HeaderRule().match("# == not a c comment", FeatureFlags()) is None


def test_decoration_only_banner_yields_no_marker() -> None:
    assert classify_line("// ==================", LanguageMode.C_LIKE) is None


def test_header_title_is_truncated_without_ellipsis() -> None:
    title = "A" * 30
    marker = classify_line(f"// == {title} ==", LanguageMode.C_LIKE)

    assert marker is not None
    assert marker.name == "A" * 20


def test_header_rule_respects_flag() -> None:
    flags = FeatureFlags(show_headers=False)

    assert classify_line("// == Initialization ==", LanguageMode.C_LIKE, flags) is None


def test_extract_header_text_keeps_inner_punctuation() -> None:
    assert extract_header_text("// == Load - Save ==") == "Load - Save"
