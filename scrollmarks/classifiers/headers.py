"""Rule for decorated comment banners such as ``// == Setup ==``."""

from __future__ import annotations

from typing import Optional

from .base import LineRule
from .utils import truncate_name
from ..models import FeatureFlags, LanguageMode, MarkerKind

_COMMENT_OPENERS = ("//", "/*")
_DECORATIONS = ("==", "--", "##", "**")


class HeaderRule(LineRule):
    """Recognises section banners written as decorated comments."""

    kind = MarkerKind.HEADER
    flag = "show_headers"

    def supports(self, mode: LanguageMode) -> bool:
        return True

    def match(self, text: str, flags: FeatureFlags) -> Optional[str]:
        if not text.startswith(_COMMENT_OPENERS):
            return None
        body = text[2:].strip()
        if not body.startswith(_DECORATIONS):
            return None
        return extract_header_text(text)


def extract_header_text(text: str) -> str:
    """Return the banner title with comment tokens and decoration removed."""
    title = text.lstrip("/* \t")
    title = title.strip("=-#* \t")
    return truncate_name(title)


__all__ = ["HeaderRule", "extract_header_text"]
