"""Single-line structural classification."""

from __future__ import annotations

from typing import Optional, Sequence

from .classifiers import LineRule, build_rule_chain
from .models import FeatureFlags, LanguageMode, Marker


class LineClassifier:
    """Applies the rule chain of one language mode to individual lines.

    The classifier holds no state besides its immutable rule chain, so one
    instance can be shared by every document of the same mode.
    """

    def __init__(
        self, mode: LanguageMode, rules: Sequence[LineRule] | None = None
    ) -> None:
        self.mode = mode
        self.rules = tuple(rules) if rules is not None else build_rule_chain(mode)

    def classify(self, text: str, flags: FeatureFlags) -> Optional[Marker]:
        """Return the marker for ``text`` or None.

        The first enabled rule that matches ends the chain. A match whose
        display name is blank produces no marker at all.
        """
        trimmed = text.lstrip()
        for rule in self.rules:
            if not rule.enabled(flags):
                continue
            name = rule.match(trimmed, flags)
            if name is None:
                continue
            if not name.strip():
                return None
            return Marker(kind=rule.kind, name=name)
        return None


def classify_line(
    text: str, mode: LanguageMode, flags: FeatureFlags | None = None
) -> Optional[Marker]:
    """Classify one line with the built-in rules for ``mode``."""
    return LineClassifier(mode).classify(text, flags or FeatureFlags())


__all__ = ["LineClassifier", "classify_line"]
