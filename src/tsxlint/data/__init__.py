"""
Bundled resources shipped inside the tsxlint package.

Layout::

    config/     default configuration layers, merged alphabetically
    schemas/    JSON schemas (stored as YAML) for the merged configuration
    templates/  Jinja2 templates for human-readable reports
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict

import yaml

CONFIG_DIR = "config"
SCHEMAS_DIR = "schemas"
TEMPLATES_DIR = "templates"


def get_data_path(kind: str, name: str = "") -> Path:
    """
    Resolve a bundled resource directory, or a file inside it.

    Example:
        >>> get_data_path("templates", "report.txt.j2").name
        'report.txt.j2'
    """
    root = Path(str(resources.files("tsxlint.data") / kind))
    return root / name if name else root


@lru_cache(maxsize=8)
def read_schema(name: str) -> Dict[str, Any]:
    """Load a bundled schema; cached because every config load validates."""
    text = get_data_path(SCHEMAS_DIR, name).read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


@lru_cache(maxsize=8)
def read_template(name: str) -> str:
    return get_data_path(TEMPLATES_DIR, name).read_text(encoding="utf-8")


def clear_caches() -> None:
    read_schema.cache_clear()
    read_template.cache_clear()


__all__ = [
    "CONFIG_DIR",
    "SCHEMAS_DIR",
    "TEMPLATES_DIR",
    "get_data_path",
    "read_schema",
    "read_template",
    "clear_caches",
]
