"""Rule for C++ access-specifier sections, including Qt signal/slot labels."""

from __future__ import annotations

from typing import Optional

from .base import LineRule
from .utils import truncate_name
from ..models import FeatureFlags, LanguageMode, MarkerKind

STANDARD_SPECIFIERS = frozenset({"public", "private", "protected"})
QT_SPECIFIERS = frozenset({"signals", "slots", "Q_SIGNALS", "Q_SLOTS"})

_SHORT_FORMS = {
    "public": "pub",
    "private": "priv",
    "protected": "prot",
    "signals": "sig",
    "slots": "slot",
    "Q_SIGNALS": "Q_SIG",
    "Q_SLOTS": "Q_SLOT",
}
_COMBINED_PREFIXES = ("public ", "private ", "protected ")


class AccessSpecifierRule(LineRule):
    """Recognises ``public:``, ``signals:``, ``private slots:`` and similar."""

    kind = MarkerKind.ACCESS_SPECIFIER
    flag = "show_access_specifiers"

    def supports(self, mode: LanguageMode) -> bool:
        return mode is LanguageMode.C_LIKE

    def match(self, text: str, flags: FeatureFlags) -> Optional[str]:
        trimmed = text.strip()
        if not trimmed.endswith(":"):
            return None
        specifier = trimmed.rstrip(":").strip()
        if not is_access_specifier(specifier):
            return None
        if flags.shorten_access_specifiers:
            specifier = shorten_access_specifier(specifier)
        return truncate_name(specifier)


def is_access_specifier(specifier: str) -> bool:
    if specifier in STANDARD_SPECIFIERS or specifier in QT_SPECIFIERS:
        return True
    return specifier.startswith(_COMBINED_PREFIXES)


def shorten_access_specifier(specifier: str) -> str:
    """Abbreviate ``specifier``; combined forms shorten each word in turn.

    >>> shorten_access_specifier("public slots")
    'pub slot'
    """
    short = _SHORT_FORMS.get(specifier)
    if short is not None:
        return short
    for prefix in _COMBINED_PREFIXES:
        if specifier.startswith(prefix):
            head = _SHORT_FORMS[prefix.rstrip()]
            return f"{head} {shorten_access_specifier(specifier[len(prefix):])}"
    return specifier


__all__ = [
    "AccessSpecifierRule",
    "QT_SPECIFIERS",
    "STANDARD_SPECIFIERS",
    "is_access_specifier",
    "shorten_access_specifier",
]
