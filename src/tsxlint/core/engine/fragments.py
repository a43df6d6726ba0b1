"""Detect text runs that are only a slice of an interpolated sentence.

``<p>Count: {count} items</p>`` yields two text runs, ``Count: `` and
`` items``. Neither is meaningful on its own, so any run whose parent mixes
text with tags or expressions is skipped.
"""
from __future__ import annotations

import re

from .nodes import NodeKind, SyntaxNode

_CONTENT_KINDS = frozenset(
    {NodeKind.TEXT_RUN, NodeKind.EXPRESSION, NodeKind.COMMENT, NodeKind.ELEMENT}
)

_OPENING_TAG_RE = re.compile(r"<[A-Za-z]")
_EXPRESSION_RE = re.compile(r"\{[^}]+\}")
_SELF_CLOSING_RE = re.compile(r"/\s*>")


def inline_content(parent: SyntaxNode) -> str:
    """Reassemble the inline markup between a parent element's tags."""
    return "".join(child.text for child in parent.children if child.kind in _CONTENT_KINDS)


def is_fragmented(node: SyntaxNode) -> bool:
    if node.kind is not NodeKind.TEXT_RUN or node.parent is None:
        return False
    content = inline_content(node.parent)
    return bool(
        _OPENING_TAG_RE.search(content)
        or _EXPRESSION_RE.search(content)
        or _SELF_CLOSING_RE.search(content)
    )


__all__ = ["inline_content", "is_fragmented"]
