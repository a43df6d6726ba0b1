"""Decide which JSX attributes carry user-visible text."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Iterable, Mapping, Optional

WILDCARD = "*"


class AttributeClass(str, Enum):
    CHECKED = "checked"
    IGNORED = "ignored"
    UNSPECIFIED = "unspecified"


def _clean(names: Optional[Iterable[Any]]) -> FrozenSet[str]:
    if not names:
        return frozenset()
    return frozenset(str(n).strip() for n in names if n is not None and str(n).strip())


@dataclass(frozen=True)
class AttributeRules:
    """The pair of attribute name sets that drives classification.

    Ignore entries ending in ``*`` match by prefix (``data-*`` covers every
    ``data-`` attribute). Ignore always wins over target.
    """

    target: FrozenSet[str] = field(default_factory=frozenset)
    ignore: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_config(cls, section: Optional[Mapping[str, Any]]) -> "AttributeRules":
        """Build rules from the ``attributes`` config section.

        A missing or malformed section yields empty sets (nothing is checked).
        """
        if not isinstance(section, Mapping):
            return cls()
        target = section.get("target")
        ignore = section.get("ignore")
        return cls(
            target=_clean(target if isinstance(target, (list, tuple, set, frozenset)) else None),
            ignore=_clean(ignore if isinstance(ignore, (list, tuple, set, frozenset)) else None),
        )

    def _is_ignored(self, name: str) -> bool:
        if name in self.ignore:
            return True
        for pattern in self.ignore:
            if pattern.endswith(WILDCARD) and name.startswith(pattern[:-1]):
                return True
        return False

    def classify(self, name: str) -> AttributeClass:
        if self._is_ignored(name):
            return AttributeClass.IGNORED
        if name in self.target:
            return AttributeClass.CHECKED
        return AttributeClass.UNSPECIFIED

    def is_checked(self, name: str) -> bool:
        return self.classify(name) is AttributeClass.CHECKED


__all__ = ["AttributeClass", "AttributeRules"]
