"""Exception hierarchy for tsx-text-lint.

Errors raised inside the validation engine are contained at the document
boundary; only the CLI maps them to exit codes.
"""
from __future__ import annotations


class TsxLintError(Exception):
    """Base class for all tsx-text-lint errors."""


class ParseUnavailableError(TsxLintError):
    """Raised when a source file cannot be turned into a usable syntax tree."""

    def __init__(self, file_id: str, reason: str = "") -> None:
        self.file_id = file_id
        self.reason = reason
        msg = f"Cannot parse {file_id}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class CheckerError(TsxLintError):
    """Raised by a checker that failed to evaluate a text segment."""

    def __init__(self, checker: str, message: str) -> None:
        self.checker = checker
        super().__init__(f"[{checker}] {message}")


class ConfigError(TsxLintError):
    """Raised when configuration cannot be loaded or fails schema validation."""


__all__ = [
    "TsxLintError",
    "ParseUnavailableError",
    "CheckerError",
    "ConfigError",
]
