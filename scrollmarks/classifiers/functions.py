"""Rules for function and method definitions.

Both rules work on a single line, so only signatures that open on one line
are found. The filters run before the pattern because they are cheaper and
cut most call sites and declarations early.
"""

from __future__ import annotations

import re
from typing import Optional

from .base import LineRule
from .utils import (
    is_blank_or_line_comment,
    is_likely_macro,
    is_likely_not_function,
    truncate_name,
)
from ..models import FeatureFlags, LanguageMode, MarkerKind

_CPP_FUNCTION = re.compile(
    r"^\s*(?:[\w\s*&<>:,]+\s+)?(?:(\w+)::)?(\w+)\s*\([^)]*\)\s*"
    r"(?:const\s*)?(?:override\s*)?(?:final\s*)?\s*(?:\{|$)"
)
_CSHARP_FUNCTION = re.compile(
    r"^\s*(?:public|private|protected|internal|static|virtual|override|async|sealed|abstract|extern|unsafe)*\s*"
    r"(?:[\w<>\[\],\s*&?]+\s+)?(\w+)\s*\([^)]*\)\s*(?:=>|\{|$)"
)
# UFUNCTION(...), UPROPERTY(...), GENERATED_BODY() and friends.
_MACRO_CALL = re.compile(r"^\s*[A-Z_]+\s*\(")
_CONTROL_PREFIXES = ("if", "while", "for", "switch", "return")
_QUOTES = ('"', "'")


class CppFunctionRule(LineRule):
    """Finds function definitions in C-family code."""

    kind = MarkerKind.FUNCTION
    flag = "show_functions"

    def supports(self, mode: LanguageMode) -> bool:
        return mode is LanguageMode.C_LIKE

    def match(self, text: str, flags: FeatureFlags) -> Optional[str]:
        if is_blank_or_line_comment(text):
            return None
        trimmed = text.strip()
        if _looks_like_statement(trimmed):
            return None
        if _quote_before_paren(trimmed):
            return None
        if trimmed.startswith(_CONTROL_PREFIXES):
            return None
        if _MACRO_CALL.match(trimmed):
            return None
        if "(" not in trimmed:
            return None

        found = _CPP_FUNCTION.match(text)
        if not found:
            return None
        # group(1) holds the scope of ``Scope::name``; only the method name is shown.
        name = found.group(2)

        position = text.rfind(name)
        end = position + len(name)
        if position >= 0 and end < len(text) and text[end] == "(" and is_likely_macro(name):
            return None
        if is_likely_not_function(name):
            return None
        return truncate_name(name)


class CSharpFunctionRule(LineRule):
    """Finds block-bodied and expression-bodied methods in C#-like code."""

    kind = MarkerKind.FUNCTION
    flag = "show_functions"

    def supports(self, mode: LanguageMode) -> bool:
        return mode is LanguageMode.CSHARP_LIKE

    def match(self, text: str, flags: FeatureFlags) -> Optional[str]:
        if is_blank_or_line_comment(text):
            return None
        trimmed = text.strip()
        if trimmed.startswith("["):
            return None
        if _looks_like_property(trimmed):
            return None
        if "(" not in trimmed:
            return None

        found = _CSHARP_FUNCTION.match(text)
        if not found:
            return None
        name = found.group(1)
        if is_likely_not_function(name):
            return None
        return truncate_name(name)


def _looks_like_statement(trimmed: str) -> bool:
    """Return True for a ``;`` not closing a brace (calls and declarations).

    ``} catch {};`` style lines are still allowed through.
    """
    semi = trimmed.find(";")
    if semi < 0:
        return False
    return not trimmed[:semi].strip().endswith("}")


def _quote_before_paren(trimmed: str) -> bool:
    quotes = [index for index in (trimmed.find(quote) for quote in _QUOTES) if index >= 0]
    if not quotes:
        return False
    return min(quotes) < trimmed.find("(")


def _looks_like_property(trimmed: str) -> bool:
    accessor = "{ get" in trimmed or "{ set" in trimmed
    expression_bodied = "=>" in trimmed and ";" in trimmed
    return (accessor or expression_bodied) and "(" not in trimmed


__all__ = ["CSharpFunctionRule", "CppFunctionRule"]
