"""Base classes for line rules."""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from ..models import FeatureFlags, LanguageMode, MarkerKind


class LineRule(ABC):
    """Contract for rules that recognise one kind of structural line.

    Rules receive the line with leading whitespace removed and return the
    display name when they match, or None to let the next rule try.
    """

    kind: ClassVar[MarkerKind]
    flag: ClassVar[str]

    def enabled(self, flags: FeatureFlags) -> bool:
        """Return True when the feature flag governing this rule is set."""
        return bool(getattr(flags, self.flag))

    @abstractmethod
    def supports(self, mode: LanguageMode) -> bool:
        """Return True when this rule belongs to the chain for ``mode``."""

    @abstractmethod
    def match(self, text: str, flags: FeatureFlags) -> Optional[str]:
        """Return the display name for ``text`` or None."""
