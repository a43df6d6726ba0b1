"""Inline ignore directives embedded in source comments.

Two forms are recognized:

- Region markers (``@text-lint ignore start`` / ``@text-lint ignore end``)
  suppress every node between them. Regions are flat: a second start inside
  an active region changes nothing, and a start without an end stays active
  until the end of the document.
- The single-node marker (``@text-lint ignore``) suppresses only the node
  it precedes, either as a leading comment or as the nearest preceding
  comment sibling (e.g. ``{/* @text-lint ignore */}`` in JSX children).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from .nodes import NodeKind, SyntaxNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Directives:
    """Marker strings recognized inside comments."""

    region_start: str = "@text-lint ignore start"
    region_end: str = "@text-lint ignore end"
    single: str = "@text-lint ignore"

    @classmethod
    def from_config(cls, section: Optional[Mapping[str, Any]]) -> "Directives":
        if not isinstance(section, Mapping):
            return cls()
        defaults = cls()
        return cls(
            region_start=str(section.get("region_start") or defaults.region_start),
            region_end=str(section.get("region_end") or defaults.region_end),
            single=str(section.get("single") or defaults.single),
        )

    def is_single(self, comment: str) -> bool:
        """Whether ``comment`` carries the single-node marker.

        A region marker that happens to start with the single-node marker
        does not count.
        """
        if self.single not in comment:
            return False
        stripped = comment.replace(self.region_start, "").replace(self.region_end, "")
        return self.single in stripped


@dataclass
class IgnoreRegion:
    """Current region state for one document traversal."""

    active: bool = False
    file_id: Optional[str] = None


@dataclass
class IgnoreRegionTracker:
    """Flat INACTIVE / ACTIVE(file) state machine driven by region markers.

    One tracker is created per ``validate`` call, so concurrent validations
    never share region state.
    """

    directives: Directives = field(default_factory=Directives)
    region: IgnoreRegion = field(default_factory=IgnoreRegion)

    def reset(self) -> None:
        self.region = IgnoreRegion()

    def _apply(self, comment: str, node: SyntaxNode) -> bool:
        if self.directives.region_start in comment:
            if not self.region.active:
                logger.debug("Ignore region starts at %s:%d", node.file_id, node.line)
            self.region = IgnoreRegion(active=True, file_id=node.file_id)
            return True
        if self.directives.region_end in comment:
            if self.region.active:
                logger.debug("Ignore region ends at %s:%d", node.file_id, node.line)
            self.region = IgnoreRegion()
            return True
        return False

    def observe(self, node: SyntaxNode) -> bool:
        """Update the state from ``node``.

        Returns True when the node itself is a comment carrying a region
        marker, i.e. a control comment rather than text.
        """
        for comment in node.leading_comments:
            self._apply(comment, node)
        if node.kind is NodeKind.COMMENT:
            return self._apply(node.text, node)
        return False

    def suppresses(self, node: SyntaxNode) -> bool:
        return self.region.active and self.region.file_id == node.file_id


def _preceding_comment(node: SyntaxNode) -> Optional[SyntaxNode]:
    sibling = node.previous_sibling
    while sibling is not None and sibling.is_blank_text:
        sibling = sibling.previous_sibling
    if sibling is not None and sibling.kind is NodeKind.COMMENT:
        return sibling
    return None


def has_ignore_directive(node: SyntaxNode, directives: Directives) -> bool:
    """Whether a single-node ignore marker is attached to ``node``."""
    comments: Iterable[str] = node.leading_comments
    if any(directives.is_single(c) for c in comments):
        return True
    previous = _preceding_comment(node)
    return previous is not None and directives.is_single(previous.text)


__all__ = [
    "Directives",
    "IgnoreRegion",
    "IgnoreRegionTracker",
    "has_ignore_directive",
]
