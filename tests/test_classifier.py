"""Tests for rule chain ordering and flag handling."""

from __future__ import annotations

from typing import Optional

from scrollmarks.classifier import LineClassifier, classify_line
from scrollmarks.classifiers import (
    AccessSpecifierRule,
    CSharpClassRule,
    CSharpFunctionRule,
    CppClassRule,
    CppFunctionRule,
    HeaderRule,
    LineRule,
    build_rule_chain,
)
from scrollmarks.models import FeatureFlags, LanguageMode, MarkerKind


def test_rule_chains_follow_priority_order() -> None:
    cpp = [type(rule) for rule in build_rule_chain(LanguageMode.C_LIKE)]
    csharp = [type(rule) for rule in build_rule_chain(LanguageMode.CSHARP_LIKE)]

    assert cpp == [HeaderRule, CppClassRule, CppFunctionRule, AccessSpecifierRule]
    assert csharp == [HeaderRule, CSharpClassRule, CSharpFunctionRule]


def test_rule_chain_is_reused_per_mode() -> None:
    assert build_rule_chain(LanguageMode.C_LIKE) is build_rule_chain(LanguageMode.C_LIKE)


def test_class_rule_wins_over_function_rule() -> None:
    line = "public record Person(string Name)"

    marker = classify_line(line, LanguageMode.CSHARP_LIKE)
    assert marker is not None
    assert marker.kind is MarkerKind.CLASS
    assert marker.name == "Person"

    without_classes = classify_line(line, LanguageMode.CSHARP_LIKE, FeatureFlags(show_classes=False))
    assert without_classes is not None
    assert without_classes.kind is MarkerKind.FUNCTION
    assert without_classes.name == "Person"


def test_all_flags_off_yields_nothing() -> None:
    flags = FeatureFlags(
        show_headers=False,
        show_functions=False,
        show_classes=False,
        show_access_specifiers=False,
    )
    lines = ["// == Init ==", "class Widget {", "void Foo::Bar(int x) {", "public:"]

    assert all(classify_line(line, LanguageMode.C_LIKE, flags) is None for line in lines)


def test_classifier_is_deterministic(all_flags: FeatureFlags) -> None:
    classifier = LineClassifier(LanguageMode.C_LIKE)
    lines = ["// == Init ==", "class Widget {", "void Foo::Bar(int x) {", "public slots:", "x = 1;"]

    first = [classifier.classify(line, all_flags) for line in lines]
    second = [classifier.classify(line, all_flags) for line in lines]

    assert first == second


def test_classifier_accepts_custom_rule_chain() -> None:
    class _TodoRule(LineRule):
        kind = MarkerKind.HEADER
        flag = "show_headers"

        def supports(self, mode: LanguageMode) -> bool:
            return True

        def match(self, text: str, flags: FeatureFlags) -> Optional[str]:
            return text[len("TODO "):] if text.startswith("TODO ") else None

    classifier = LineClassifier(LanguageMode.C_LIKE, rules=[_TodoRule()])

    marker = classifier.classify("   TODO tidy up", FeatureFlags())
    assert marker is not None
    assert marker.name == "tidy up"
    assert classifier.classify("void Foo::Bar(int x) {", FeatureFlags()) is None


def test_blank_lines_yield_nothing(all_flags: FeatureFlags) -> None:
    for mode in LanguageMode:
        assert classify_line("", mode, all_flags) is None
        assert classify_line("   \t", mode, all_flags) is None
