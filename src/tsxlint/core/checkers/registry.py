"""Build the configured checker instances.

Checkers are looked up by name in ``checkers.enabled``; each factory receives
its own config subsection (``checkers.<name>``).
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from .base import Checker
from .prose import ProseChecker
from .spelling import SpellingChecker

logger = logging.getLogger(__name__)

CheckerFactory = Callable[[Optional[Mapping[str, Any]]], Checker]

_FACTORIES: Dict[str, CheckerFactory] = {
    "spelling": SpellingChecker.from_config,
    "prose": ProseChecker.from_config,
}


def register_checker(name: str, factory: CheckerFactory) -> None:
    """Register an additional checker factory under ``name``."""
    _FACTORIES[name] = factory


def available_checkers() -> List[str]:
    return sorted(_FACTORIES)


def build_checkers(section: Optional[Mapping[str, Any]]) -> List[Checker]:
    """Instantiate the checkers listed in ``section["enabled"]``, in order.

    Unknown names are logged and skipped rather than failing the run.
    """
    section = section if isinstance(section, Mapping) else {}
    checkers: List[Checker] = []
    for name in section.get("enabled") or []:
        factory = _FACTORIES.get(str(name))
        if factory is None:
            logger.warning("Unknown checker '%s' in configuration (available: %s)", name, ", ".join(available_checkers()))
            continue
        sub = section.get(name)
        checkers.append(factory(sub if isinstance(sub, Mapping) else None))
        logger.debug("Enabled checker '%s'", name)
    return checkers


__all__ = ["build_checkers", "register_checker", "available_checkers", "CheckerFactory"]
