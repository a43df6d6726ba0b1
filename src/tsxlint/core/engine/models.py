"""Value types flowing through the validation pipeline."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


class SegmentOrigin(str, Enum):
    ATTRIBUTE = "attribute"
    TEXT_RUN = "text-run"


@dataclass(frozen=True)
class TextSegment:
    """A piece of user-visible text extracted from one node."""

    text: str
    line: int
    origin: SegmentOrigin


@dataclass(frozen=True)
class Issue:
    """A single problem reported by a checker, without location."""

    message: str
    rule_id: str


@dataclass(frozen=True)
class Diagnostic:
    """A checker issue attributed to a 1-based source line."""

    line: int
    message: str
    rule_id: str
    checker: str = ""
    file: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["SegmentOrigin", "TextSegment", "Issue", "Diagnostic"]
