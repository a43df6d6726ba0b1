"""Rule-based prose style checks for short UI strings."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple

from tsxlint.core.engine.models import Issue

from .base import BlockingChecker

RULE_PREFIX = "prose/"

_REPEATED_WORD_RE = re.compile(r"\b([A-Za-z]+)\s+\1\b", re.IGNORECASE)
_SPACE_BEFORE_PUNCT_RE = re.compile(r"[A-Za-z0-9)\"'] +([,.;:!?])(?=\s|$)")
_REPEATED_PUNCT_RE = re.compile(r"([!?,;])\1+")
_DOUBLE_SPACE_RE = re.compile(r"\S {2,}\S")


def _repeated_word(text: str) -> Iterator[str]:
    for m in _REPEATED_WORD_RE.finditer(text):
        yield f'Repeated word "{m.group(1)}"'


def _space_before_punctuation(text: str) -> Iterator[str]:
    for m in _SPACE_BEFORE_PUNCT_RE.finditer(text):
        yield f'Unexpected space before "{m.group(1)}"'


def _repeated_punctuation(text: str) -> Iterator[str]:
    for m in _REPEATED_PUNCT_RE.finditer(text):
        yield f'Repeated punctuation "{m.group(0)}"'


def _double_space(text: str) -> Iterator[str]:
    if _DOUBLE_SPACE_RE.search(text):
        yield "Multiple consecutive spaces"


_BUILTIN_RULES: Dict[str, Callable[[str], Iterator[str]]] = {
    "repeated-word": _repeated_word,
    "space-before-punctuation": _space_before_punctuation,
    "repeated-punctuation": _repeated_punctuation,
    "double-space": _double_space,
}


@dataclass(frozen=True)
class ForbiddenPhrase:
    phrase: str
    message: str
    pattern: "re.Pattern[str]"

    @classmethod
    def build(cls, phrase: str, message: str) -> "ForbiddenPhrase":
        pattern = re.compile(r"\b" + re.escape(phrase) + r"\b", re.IGNORECASE)
        return cls(phrase=phrase, message=message or f'Avoid "{phrase}"', pattern=pattern)


class ProseChecker(BlockingChecker):
    """Flag style problems: repeated words, stray spacing, noisy punctuation,
    and configured forbidden phrases.
    """

    name = "prose"

    def __init__(
        self,
        rules: Optional[Mapping[str, bool]] = None,
        forbidden_phrases: Optional[Mapping[str, str]] = None,
    ) -> None:
        enabled = dict(rules) if rules is not None else {}
        self._rules: List[Tuple[str, Callable[[str], Iterator[str]]]] = [
            (rule_id, fn) for rule_id, fn in _BUILTIN_RULES.items() if enabled.get(rule_id, True)
        ]
        self._forbidden: List[ForbiddenPhrase] = []
        if enabled.get("forbidden-phrase", True):
            self._forbidden = [
                ForbiddenPhrase.build(str(p), str(m or ""))
                for p, m in (forbidden_phrases or {}).items()
            ]

    @classmethod
    def from_config(cls, section: Optional[Mapping[str, Any]]) -> "ProseChecker":
        section = section if isinstance(section, Mapping) else {}
        rules = section.get("rules")
        phrases = section.get("forbidden_phrases")
        return cls(
            rules=rules if isinstance(rules, Mapping) else None,
            forbidden_phrases=phrases if isinstance(phrases, Mapping) else None,
        )

    @property
    def rule_ids(self) -> List[str]:
        ids = [RULE_PREFIX + rule_id for rule_id, _ in self._rules]
        if self._forbidden:
            ids.append(RULE_PREFIX + "forbidden-phrase")
        return ids

    def check_text(self, text: str) -> List[Issue]:
        issues: List[Issue] = []
        for rule_id, rule in self._rules:
            issues.extend(Issue(message=msg, rule_id=RULE_PREFIX + rule_id) for msg in rule(text))
        for phrase in self._forbidden:
            if phrase.pattern.search(text):
                issues.append(Issue(message=phrase.message, rule_id=RULE_PREFIX + "forbidden-phrase"))
        return issues


__all__ = ["ProseChecker", "ForbiddenPhrase", "RULE_PREFIX"]
