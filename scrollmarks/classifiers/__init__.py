"""Line rule implementations and rule chain assembly."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from .access import AccessSpecifierRule
from .base import LineRule
from .classes import CppClassRule, CSharpClassRule
from .functions import CppFunctionRule, CSharpFunctionRule
from .headers import HeaderRule
from ..models import LanguageMode

# Priority order: the first rule that matches a line wins.
_BUILTIN_FACTORIES: Tuple[Callable[[], LineRule], ...] = (
    HeaderRule,
    CppClassRule,
    CSharpClassRule,
    CppFunctionRule,
    CSharpFunctionRule,
    AccessSpecifierRule,
)

_CHAINS: Dict[LanguageMode, Tuple[LineRule, ...]] = {}


def build_rule_chain(mode: LanguageMode) -> Tuple[LineRule, ...]:
    """Return the ordered, immutable rule chain for ``mode``."""
    chain = _CHAINS.get(mode)
    if chain is not None:
        return chain

    rules: List[LineRule] = []
    for factory in _BUILTIN_FACTORIES:
        instance = factory()
        if not isinstance(instance, LineRule):
            raise TypeError(f"Rule factory {factory!r} did not return a LineRule instance")
        if instance.supports(mode):
            rules.append(instance)

    chain = tuple(rules)
    _CHAINS[mode] = chain
    return chain


__all__ = [
    "AccessSpecifierRule",
    "CSharpClassRule",
    "CSharpFunctionRule",
    "CppClassRule",
    "CppFunctionRule",
    "HeaderRule",
    "LineRule",
    "build_rule_chain",
]
