"""Shared CLI helpers."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tsxlint.core.stdlib_logging import configure_logging


def get_repo_root(args: argparse.Namespace) -> Path:
    raw = getattr(args, "repo_root", None)
    return Path(raw).expanduser().resolve() if raw else Path.cwd()


def setup_logging(args: argparse.Namespace, configured_level: str = "WARNING") -> None:
    """Configure logging from -v flags, falling back to the configured level."""
    verbose = int(getattr(args, "verbose", 0) or 0)
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    else:
        level = configured_level
    configure_logging(level)
    logging.getLogger(__name__).debug("Logging configured at %s", level)


__all__ = ["get_repo_root", "setup_logging"]
