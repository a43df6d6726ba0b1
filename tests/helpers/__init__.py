"""Test helpers for the tsx-text-lint suite.

- nodes: small builders for hand-made syntax trees
- checkers: fake checkers (recording, failing, slow)
"""
from __future__ import annotations

from helpers.checkers import FailingChecker, RecordingChecker, SlowChecker
from helpers.nodes import attr, comment, document, element, expr, text

__all__ = [
    "FailingChecker",
    "RecordingChecker",
    "SlowChecker",
    "attr",
    "comment",
    "document",
    "element",
    "expr",
    "text",
]
