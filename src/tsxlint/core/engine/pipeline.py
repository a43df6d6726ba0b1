"""Validation pipeline: walk a document, extract text, run checkers.

The pipeline makes one depth-first pass over the syntax tree. Each node is
first shown to a per-call ``IgnoreRegionTracker``; attribute nodes are then
filtered through ``AttributeRules`` and text runs through the fragment
detector. Surviving segments are normalized and handed to every configured
checker in turn, and the resulting issues become line-addressed diagnostics
in document order.

Checker calls are awaited one at a time so output order always follows the
source. A failing or slow checker only loses its own diagnostics for that
segment.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Sequence, Tuple

from tsxlint.core.errors import CheckerError

from .attributes import AttributeRules
from .directives import Directives, IgnoreRegionTracker, has_ignore_directive
from .fragments import is_fragmented
from .models import Diagnostic, Issue, SegmentOrigin, TextSegment
from .nodes import NodeKind, SyntaxDocument, SyntaxNode
from .normalizer import is_checkable, normalize_text

if TYPE_CHECKING:
    from tsxlint.core.checkers.base import Checker

logger = logging.getLogger(__name__)

DEFAULT_CHECKER_TIMEOUT = 10.0


@dataclass
class ValidationPipeline:
    """Extract user-visible text from documents and check it.

    Example:
        pipeline = ValidationPipeline(
            rules=AttributeRules(target=frozenset({"alt"})),
            checkers=[SpellingChecker()],
        )
        diagnostics = await pipeline.validate(document)
    """

    rules: AttributeRules = field(default_factory=AttributeRules)
    checkers: Sequence[Checker] = field(default_factory=list)
    directives: Directives = field(default_factory=Directives)
    timeout: Optional[float] = DEFAULT_CHECKER_TIMEOUT

    # ---------- Extraction ----------

    def extract_segment(self, node: SyntaxNode) -> Optional[TextSegment]:
        """Return the text segment carried by ``node``, if it should be checked."""
        if node.kind is NodeKind.ATTRIBUTE:
            if not node.name or not self.rules.is_checked(node.name):
                return None
            if node.value is None or has_ignore_directive(node, self.directives):
                return None
            line = node.value_line if node.value_line is not None else node.line
            return TextSegment(text=node.value, line=line, origin=SegmentOrigin.ATTRIBUTE)

        if node.kind is NodeKind.TEXT_RUN:
            text = node.text.strip()
            if not text or is_fragmented(node) or has_ignore_directive(node, self.directives):
                return None
            return TextSegment(text=text, line=node.line, origin=SegmentOrigin.TEXT_RUN)

        return None

    def iter_segments(self, document: SyntaxDocument) -> Iterator[TextSegment]:
        """Yield checkable segments of ``document`` in document order.

        Region state lives in a tracker local to this generator.
        """
        tracker = IgnoreRegionTracker(directives=self.directives)
        for node in document.iter_nodes():
            if tracker.observe(node):
                continue
            if tracker.suppresses(node):
                continue
            segment = self.extract_segment(node)
            if segment is not None:
                yield segment

    def extract_segments(self, document: SyntaxDocument) -> List[TextSegment]:
        return list(self.iter_segments(document))

    # ---------- Checking ----------

    async def _run_checker(self, checker: Checker, text: str, segment: TextSegment) -> List[Issue]:
        name = getattr(checker, "name", type(checker).__name__)
        try:
            if self.timeout:
                return list(await asyncio.wait_for(checker.check(text), timeout=self.timeout))
            return list(await checker.check(text))
        except asyncio.TimeoutError:
            logger.warning(
                "Checker '%s' timed out after %.1fs on line %d", name, self.timeout, segment.line
            )
        except CheckerError as exc:
            logger.warning("%s (line %d)", exc, segment.line)
        except Exception as exc:
            logger.warning("Checker '%s' failed on line %d: %s", name, segment.line, exc)
        return []

    async def check_segment(
        self,
        segment: TextSegment,
        *,
        file_id: str = "",
        memo: Optional[Dict[Tuple[int, str], List[Issue]]] = None,
    ) -> List[Diagnostic]:
        """Normalize ``segment`` and collect diagnostics from every checker."""
        text = normalize_text(segment.text)
        if not is_checkable(text):
            return []

        diagnostics: List[Diagnostic] = []
        for idx, checker in enumerate(self.checkers):
            key = (idx, text)
            if memo is not None and key in memo:
                issues = memo[key]
            else:
                issues = await self._run_checker(checker, text, segment)
                if memo is not None:
                    memo[key] = issues
            name = getattr(checker, "name", type(checker).__name__)
            diagnostics.extend(
                Diagnostic(
                    line=segment.line,
                    message=i.message,
                    rule_id=i.rule_id,
                    checker=name,
                    file=file_id,
                )
                for i in issues
            )
        return diagnostics

    async def validate(self, document: SyntaxDocument) -> List[Diagnostic]:
        """Validate one document and return its diagnostics in document order."""
        # Same text, same checker, same issues; line attribution stays per segment.
        memo: Dict[Tuple[int, str], List[Issue]] = {}
        diagnostics: List[Diagnostic] = []
        for segment in self.iter_segments(document):
            diagnostics.extend(
                await self.check_segment(segment, file_id=document.file_id, memo=memo)
            )
        logger.debug("Validated %s: %d diagnostic(s)", document.file_id, len(diagnostics))
        return diagnostics

    def validate_sync(self, document: SyntaxDocument) -> List[Diagnostic]:
        """Blocking wrapper around ``validate`` for callers without a loop."""
        return asyncio.run(self.validate(document))


__all__ = ["ValidationPipeline", "DEFAULT_CHECKER_TIMEOUT"]
