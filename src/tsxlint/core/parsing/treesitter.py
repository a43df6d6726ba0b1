"""Tree-sitter adapter producing ``SyntaxDocument`` trees from JSX/TSX source.

Tree-sitter node types are folded into the engine's closed set of
categories:

- ``jsx_attribute`` -> attribute (name, literal value, value line)
- adjacent ``jsx_text`` / ``html_character_reference`` -> one text run
- ``comment`` and comment-only ``jsx_expression`` (``{/* ... */}``) -> comment
- other ``jsx_expression`` -> expression
- ``jsx_element`` / ``jsx_self_closing_element`` -> element
- everything else -> other

Only named tree-sitter nodes are kept; punctuation tokens carry no text the
engine cares about.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import tree_sitter
import tree_sitter_typescript

from tsxlint.core.engine.nodes import NodeKind, SyntaxDocument, SyntaxNode
from tsxlint.core.errors import ParseUnavailableError

logger = logging.getLogger(__name__)

_TEXT_TYPES = frozenset({"jsx_text", "html_character_reference"})
_ELEMENT_TYPES = frozenset({"jsx_element", "jsx_self_closing_element"})
_LITERAL_TYPES = frozenset({"string", "template_string"})

# Grammar per file extension; JSX lives in the TSX grammar.
_EXTENSION_GRAMMARS: Dict[str, str] = {
    ".tsx": "tsx",
    ".jsx": "tsx",
    ".js": "tsx",
    ".mjs": "tsx",
    ".ts": "typescript",
}


def grammar_for(file_id: str) -> str:
    return _EXTENSION_GRAMMARS.get(Path(file_id).suffix.lower(), "tsx")


def _line_of(ts_node: Any) -> int:
    return ts_node.start_point[0] + 1


@dataclass
class TsxParser:
    """Parse JSX/TSX source into the engine's syntax model.

    Usage::

        parser = TsxParser()
        document = parser.parse(source, "src/App.tsx")
    """

    _languages: Dict[str, Any] = field(default_factory=dict, repr=False)

    def _get_language(self, grammar: str) -> Any:
        if grammar not in self._languages:
            if grammar == "typescript":
                lang_fn = tree_sitter_typescript.language_typescript
            else:
                lang_fn = tree_sitter_typescript.language_tsx
            self._languages[grammar] = tree_sitter.Language(lang_fn())
            logger.debug("Loaded tree-sitter grammar '%s'", grammar)
        return self._languages[grammar]

    def parse(self, source: str, file_id: str) -> SyntaxDocument:
        """Parse ``source`` and convert it.

        Raises:
            ParseUnavailableError: The tree contains syntax errors.
        """
        data = source.encode("utf-8")
        # One Parser per call; only Language objects are shared.
        parser = tree_sitter.Parser(self._get_language(grammar_for(file_id)))
        tree = parser.parse(data)
        if tree.root_node.has_error:
            logger.debug("Syntax errors in %s", file_id)
            raise ParseUnavailableError(file_id, "syntax error")
        root = SyntaxNode(kind=NodeKind.OTHER, text="", line=1, file_id=file_id)
        _Builder(data=data, file_id=file_id).build(root, tree.root_node)
        return SyntaxDocument(file_id=file_id, root=root)

    def parse_file(self, path: Path) -> SyntaxDocument:
        return self.parse(Path(path).read_text(encoding="utf-8"), str(path))


@dataclass
class _Builder:
    """Converts a tree-sitter tree using an explicit work stack.

    ``convert`` builds a single node and queues it on ``frames``; ``build``
    pops frames and fills in children until none are left.
    """

    data: bytes
    file_id: str
    frames: List[Tuple[SyntaxNode, Any]] = field(default_factory=list)

    def build(self, root: SyntaxNode, ts_root: Any) -> None:
        self.frames.append((root, ts_root))
        while self.frames:
            parent, ts_parent = self.frames.pop()
            self.add_children(parent, ts_parent)

    def text(self, ts_node: Any) -> str:
        return self.data[ts_node.start_byte:ts_node.end_byte].decode("utf-8", errors="replace")

    def add_children(self, parent: SyntaxNode, ts_parent: Any) -> None:
        pending_text: List[Any] = []
        comments: List[str] = []

        def flush_text() -> None:
            if not pending_text:
                return
            node = self._text_run(pending_text)
            pending_text.clear()
            self._attach(parent, node, comments)

        for ts_child in ts_parent.named_children:
            if ts_child.type in _TEXT_TYPES:
                pending_text.append(ts_child)
                continue
            flush_text()
            node = self.convert(ts_child)
            self._attach(parent, node, comments)
        flush_text()

    def _attach(self, parent: SyntaxNode, node: SyntaxNode, comments: List[str]) -> None:
        if node.is_blank_text:
            parent.add(node)
            return
        node.leading_comments = list(comments)
        parent.add(node)
        if node.kind is NodeKind.COMMENT:
            comments.append(node.text)
        else:
            comments.clear()

    def _text_run(self, ts_nodes: List[Any]) -> SyntaxNode:
        start, end = ts_nodes[0], ts_nodes[-1]
        text = self.data[start.start_byte:end.end_byte].decode("utf-8", errors="replace")
        leading = text[: len(text) - len(text.lstrip())]
        line = _line_of(start) + leading.count("\n")
        return SyntaxNode(kind=NodeKind.TEXT_RUN, text=text, line=line, file_id=self.file_id)

    def convert(self, ts_node: Any) -> SyntaxNode:
        node_type = ts_node.type
        if node_type == "comment":
            return SyntaxNode(
                kind=NodeKind.COMMENT, text=self.text(ts_node), line=_line_of(ts_node), file_id=self.file_id
            )
        if node_type == "jsx_expression":
            named = ts_node.named_children
            if named and all(c.type == "comment" for c in named):
                return SyntaxNode(
                    kind=NodeKind.COMMENT, text=self.text(ts_node), line=_line_of(ts_node), file_id=self.file_id
                )
            kind = NodeKind.EXPRESSION
        elif node_type == "jsx_attribute":
            return self._attribute(ts_node)
        elif node_type in _ELEMENT_TYPES:
            kind = NodeKind.ELEMENT
        else:
            kind = NodeKind.OTHER

        node = SyntaxNode(kind=kind, text=self.text(ts_node), line=_line_of(ts_node), file_id=self.file_id)
        self.frames.append((node, ts_node))
        return node

    def _literal_value(self, ts_value: Any) -> Optional[Any]:
        """The literal node holding a static attribute value, if any."""
        if ts_value.type == "string":
            return ts_value
        if ts_value.type == "jsx_expression":
            named = [c for c in ts_value.named_children if c.type != "comment"]
            if len(named) == 1 and named[0].type in _LITERAL_TYPES:
                literal = named[0]
                if not any(c.type == "template_substitution" for c in literal.named_children):
                    return literal
        return None

    def _attribute(self, ts_node: Any) -> SyntaxNode:
        named = ts_node.named_children
        node = SyntaxNode(
            kind=NodeKind.ATTRIBUTE,
            text=self.text(ts_node),
            line=_line_of(ts_node),
            file_id=self.file_id,
            name=self.text(named[0]) if named else None,
        )
        if len(named) > 1:
            literal = self._literal_value(named[1])
            if literal is not None:
                node.value = self.text(literal)
                node.value_line = _line_of(literal)
            # Values such as icon={<span>Hi</span>} hold nested JSX.
            for ts_child in named[1:]:
                if ts_child.type not in _LITERAL_TYPES:
                    self._attach(node, self.convert(ts_child), [])
        return node


__all__ = ["TsxParser", "grammar_for"]
