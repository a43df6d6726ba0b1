"""Syntax tree model consumed by the validation pipeline.

Parser adapters translate their native trees into ``SyntaxNode`` instances
with one of a small, closed set of categories. The pipeline only ever reads
these nodes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class NodeKind(str, Enum):
    """Closed set of node categories the engine distinguishes."""

    ATTRIBUTE = "attribute"
    TEXT_RUN = "text-run"
    COMMENT = "comment"
    EXPRESSION = "expression"
    ELEMENT = "element"
    OTHER = "other"


@dataclass(eq=False)
class SyntaxNode:
    """A node of a parsed JSX/TSX document.

    ``name``, ``value`` and ``value_line`` are only meaningful for attribute
    nodes: ``value`` is the literal value as written in source (quotes
    included) and is ``None`` for boolean or dynamic attributes.
    """

    kind: NodeKind
    text: str = ""
    line: int = 1
    file_id: str = ""
    name: Optional[str] = None
    value: Optional[str] = None
    value_line: Optional[int] = None
    leading_comments: List[str] = field(default_factory=list)
    children: List["SyntaxNode"] = field(default_factory=list, repr=False)
    parent: Optional["SyntaxNode"] = field(default=None, repr=False)

    def add(self, child: "SyntaxNode") -> "SyntaxNode":
        """Append ``child``, wiring its parent and inheriting the file id."""
        child.parent = self
        if not child.file_id:
            child.file_id = self.file_id
        self.children.append(child)
        return child

    @property
    def previous_sibling(self) -> Optional["SyntaxNode"]:
        if self.parent is None:
            return None
        siblings = self.parent.children
        for idx, sibling in enumerate(siblings):
            if sibling is self:
                return siblings[idx - 1] if idx > 0 else None
        return None

    def iter_descendants(self) -> Iterator["SyntaxNode"]:
        """Yield all descendants in document order (depth-first, pre-order)."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    @property
    def is_blank_text(self) -> bool:
        return self.kind is NodeKind.TEXT_RUN and not self.text.strip()


@dataclass
class SyntaxDocument:
    """A parsed document: its identity (usually the file path) and root node."""

    file_id: str
    root: SyntaxNode

    def iter_nodes(self) -> Iterator[SyntaxNode]:
        return self.root.iter_descendants()


__all__ = ["NodeKind", "SyntaxNode", "SyntaxDocument"]
