"""Turn raw extracted fragments into plain text for the checkers."""
from __future__ import annotations

import re

_OUTER_QUOTES_RE = re.compile(r"^['\"`]|['\"`]$")
_HTML_ENTITY_RE = re.compile(r"&[a-zA-Z]+;")
_WRAPPED_LINE_RE = re.compile(r"\n\s+")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")
_LETTER_RE = re.compile(r"[a-zA-Z]")


def normalize_text(raw: str) -> str:
    """Normalize a raw fragment.

    Steps, in order: strip one leading and one trailing quote character,
    replace named HTML entities with a space, join wrapped lines, collapse
    whitespace runs, trim.

    >>> normalize_text("  Hello   world\\n   !")
    'Hello world !'
    >>> normalize_text("'Save changes'")
    'Save changes'
    """
    text = _OUTER_QUOTES_RE.sub("", raw)
    text = _HTML_ENTITY_RE.sub(" ", text)
    text = _WRAPPED_LINE_RE.sub(" ", text)
    text = _MULTI_SPACE_RE.sub(" ", text)
    return text.strip()


def is_checkable(text: str) -> bool:
    """Whether normalized text is worth sending to checkers (has a letter)."""
    return bool(text) and _LETTER_RE.search(text) is not None


__all__ = ["normalize_text", "is_checkable"]
