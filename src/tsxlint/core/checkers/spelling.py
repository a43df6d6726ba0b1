"""Dictionary spell checking backed by pyspellchecker.

The dictionary is loaded once when the checker is built and reused for every
segment of every document in the run.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional

from spellchecker import SpellChecker

from tsxlint.core.engine.models import Issue

from .base import BlockingChecker

logger = logging.getLogger(__name__)

RULE_ID = "spelling/unknown-word"

_TOKEN_RE = re.compile(r"[\w'’-]+")
_APOSTROPHES = ("'", "’")


class SpellingChecker(BlockingChecker):
    """Report words missing from the dictionary.

    Tokens that look like code or names rather than prose are skipped:
    anything with digits or underscores, short all-caps acronyms, and
    mixed-case identifiers such as ``GitHub`` or ``iPhone``.
    """

    name = "spelling"

    def __init__(
        self,
        language: str = "en",
        allow: Optional[Iterable[str]] = None,
        max_acronym_length: int = 5,
    ) -> None:
        try:
            self._speller = SpellChecker(language=language)
        except ValueError:
            logger.warning("Spelling language '%s' unavailable, falling back to 'en'", language)
            self._speller = SpellChecker(language="en")
        self.allow = {w.lower() for w in (allow or [])}
        if self.allow:
            self._speller.word_frequency.load_words(sorted(self.allow))
        self.max_acronym_length = max_acronym_length

    @classmethod
    def from_config(cls, section: Optional[Mapping[str, Any]]) -> "SpellingChecker":
        section = section if isinstance(section, Mapping) else {}
        return cls(
            language=str(section.get("language") or "en"),
            allow=[str(w) for w in section.get("allow") or []],
            max_acronym_length=int(section.get("max_acronym_length", 5)),
        )

    def _is_prose_token(self, token: str) -> bool:
        if re.search(r"[\d_]", token):
            return False
        if token.isupper() and len(token) <= self.max_acronym_length:
            return False
        if any(c.isupper() for c in token[1:]) and not token.isupper():
            return False
        return True

    def words(self, text: str) -> List[str]:
        """Split ``text`` into the words that should be looked up."""
        words: List[str] = []
        for match in _TOKEN_RE.finditer(text):
            token = match.group(0).strip("'’-")
            if not token or not self._is_prose_token(token):
                continue
            words.extend(part for part in token.split("-") if part)
        return words

    def _known(self, word: str) -> bool:
        lowered = word.lower()
        if lowered in self.allow or not self._speller.unknown([lowered]):
            return True
        for mark in _APOSTROPHES:
            if mark in lowered:
                # Contractions and possessives: "won't", "user's"
                stem = lowered.split(mark, 1)[0]
                return bool(stem) and not self._speller.unknown([stem])
        return False

    def check_text(self, text: str) -> List[Issue]:
        issues: List[Issue] = []
        seen: set[str] = set()
        for word in self.words(text):
            key = word.lower()
            if key in seen or self._known(word):
                continue
            seen.add(key)
            suggestion = self._speller.correction(key)
            message = f'"{word}" is misspelled'
            if suggestion and suggestion != key:
                message = f'{message} (did you mean "{suggestion}"?)'
            issues.append(Issue(message=message, rule_id=RULE_ID))
        return issues


__all__ = ["SpellingChecker", "RULE_ID"]
