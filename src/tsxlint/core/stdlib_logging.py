from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TSXLINT_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: str = "WARNING", *, log_path: Optional[Path] = None) -> None:
    """Route tsxlint logs to stderr, or to ``log_path`` when given.

    Stdout is never used so JSON output stays machine-readable. Idempotent
    per target: reconfiguring the same target only updates the level.
    """
    global _TSXLINT_HANDLER, _CONFIGURED_TARGET

    target = str(Path(log_path).resolve()) if log_path else "<stderr>"
    logger = logging.getLogger("tsxlint")
    logger.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _TSXLINT_HANDLER is not None:
        _TSXLINT_HANDLER.setLevel(_level_from_name(level))
        return

    if _TSXLINT_HANDLER is not None:
        logger.removeHandler(_TSXLINT_HANDLER)
        _TSXLINT_HANDLER.close()
        _TSXLINT_HANDLER = None

    handler: logging.Handler
    if log_path:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    _TSXLINT_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_logging_for_tests() -> None:
    """Test-only: drop the installed handler and restore propagation."""
    global _TSXLINT_HANDLER, _CONFIGURED_TARGET
    logger = logging.getLogger("tsxlint")
    if _TSXLINT_HANDLER is not None:
        logger.removeHandler(_TSXLINT_HANDLER)
        _TSXLINT_HANDLER.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _TSXLINT_HANDLER = None
    _CONFIGURED_TARGET = None


__all__ = ["configure_logging", "reset_logging_for_tests"]
