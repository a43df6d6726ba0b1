"""Text-extraction and validation engine.

Public surface:
- ValidationPipeline: walk a SyntaxDocument and produce Diagnostics
- AttributeRules: which attributes carry user-visible text
- Directives / IgnoreRegionTracker: inline ignore markers
- normalize_text / is_checkable: prepare extracted text for checkers
- is_fragmented: skip text runs sliced by embedded tags or expressions
"""
from .attributes import AttributeClass, AttributeRules
from .directives import Directives, IgnoreRegion, IgnoreRegionTracker, has_ignore_directive
from .fragments import inline_content, is_fragmented
from .models import Diagnostic, Issue, SegmentOrigin, TextSegment
from .nodes import NodeKind, SyntaxDocument, SyntaxNode
from .normalizer import is_checkable, normalize_text
from .pipeline import DEFAULT_CHECKER_TIMEOUT, ValidationPipeline

__all__ = [
    "AttributeClass",
    "AttributeRules",
    "Directives",
    "IgnoreRegion",
    "IgnoreRegionTracker",
    "has_ignore_directive",
    "inline_content",
    "is_fragmented",
    "Diagnostic",
    "Issue",
    "SegmentOrigin",
    "TextSegment",
    "NodeKind",
    "SyntaxDocument",
    "SyntaxNode",
    "is_checkable",
    "normalize_text",
    "DEFAULT_CHECKER_TIMEOUT",
    "ValidationPipeline",
]
