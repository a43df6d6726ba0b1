"""Checker contract used by the validation pipeline.

A checker evaluates one normalized text segment and returns zero or more
issues. Checkers are long-lived: they are built once per run and called for
every segment, so expensive setup (dictionaries, compiled rules) belongs in
``__init__``.
"""
from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import List, Protocol, runtime_checkable

from tsxlint.core.engine.models import Issue
from tsxlint.core.errors import CheckerError


@runtime_checkable
class Checker(Protocol):
    """Anything with a ``name`` and an async ``check(text)``."""

    name: str

    async def check(self, text: str) -> List[Issue]: ...


class BlockingChecker(ABC):
    """Base class for checkers whose work is synchronous and CPU-bound.

    Subclasses implement ``check_text``; ``check`` runs it in a worker thread
    so a slow dictionary lookup does not stall other document validations.
    """

    name: str = ""

    @abstractmethod
    def check_text(self, text: str) -> List[Issue]:
        """Return issues for ``text``. Must not mutate shared state."""

    def _check_or_raise(self, text: str) -> List[Issue]:
        try:
            return self.check_text(text)
        except CheckerError:
            raise
        except Exception as exc:
            raise CheckerError(self.name or type(self).__name__, str(exc)) from exc

    async def check(self, text: str) -> List[Issue]:
        return await asyncio.to_thread(self._check_or_raise, text)


__all__ = ["Checker", "BlockingChecker"]
