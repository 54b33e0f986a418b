"""Rules for class, struct, interface and record declarations."""

from __future__ import annotations

import re
from typing import Optional

from .base import LineRule
from .utils import is_blank_or_line_comment, truncate_name
from ..models import FeatureFlags, LanguageMode, MarkerKind

# Everything between the keyword and the base list or body is captured; the
# real name is picked out of it afterwards because export macros and
# qualifiers share that span.
_CPP_CLASS = re.compile(
    r"^\s*(?:template\s*<[^>]*>\s*)?(?:class|struct)\s+(.+?)(?:\s*[:{\r\n]|$)"
)
_CSHARP_CLASS = re.compile(
    r"^\s*(?:(?:public|private|protected|internal|static|sealed|abstract|partial)\s+)*"
    r"(?:class|struct|interface|record)\s+(\w+)"
)
_TYPE_NAME = re.compile(r"^[A-Z_]\w*$")
_MACRO_SUFFIXES = ("_API", "_EXPORT")
_QUALIFIERS = frozenset({"final", "abstract"})


class CppClassRule(LineRule):
    """Finds ``class``/``struct`` heads in C-family code, skipping export macros."""

    kind = MarkerKind.CLASS
    flag = "show_classes"

    def supports(self, mode: LanguageMode) -> bool:
        return mode is LanguageMode.C_LIKE

    def match(self, text: str, flags: FeatureFlags) -> Optional[str]:
        if is_blank_or_line_comment(text):
            return None
        found = _CPP_CLASS.match(text)
        if not found:
            return None
        name = pick_class_name(found.group(1))
        if not name:
            return None
        return truncate_name(name)


class CSharpClassRule(LineRule):
    """Finds type declarations in C#-like code."""

    kind = MarkerKind.CLASS
    flag = "show_classes"

    def supports(self, mode: LanguageMode) -> bool:
        return mode is LanguageMode.CSHARP_LIKE

    def match(self, text: str, flags: FeatureFlags) -> Optional[str]:
        if is_blank_or_line_comment(text):
            return None
        found = _CSHARP_CLASS.match(text)
        if not found or not found.group(1):
            return None
        return truncate_name(found.group(1))


def pick_class_name(captured: str) -> Optional[str]:
    """Return the last token of ``captured`` that looks like a type name.

    ``MYLIB_API Widget final`` yields ``Widget``.
    """
    parts = captured.strip().split()
    for part in reversed(parts):
        if part.endswith(_MACRO_SUFFIXES):
            continue
        if part.lower() in _QUALIFIERS:
            continue
        if _TYPE_NAME.match(part):
            return part
    return None


__all__ = ["CSharpClassRule", "CppClassRule", "pick_class_name"]
