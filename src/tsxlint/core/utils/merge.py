"""Layer merging for configuration files.

Mappings merge key by key. Lists from a later layer replace the earlier list,
except when the later list opens with a directive string:

- ``["+", ...]`` extends the earlier list (duplicates dropped)
- ``["=", ...]`` replaces it explicitly

An empty list replaces too, which is how a project turns a default list off.
"""
from __future__ import annotations

from typing import Any, Dict, List

APPEND = "+"
REPLACE = "="


def merge_arrays(base: List[Any], override: List[Any]) -> List[Any]:
    """
    >>> merge_arrays(["alt", "title"], ["+", "label", "alt"])
    ['alt', 'title', 'label']
    >>> merge_arrays(["alt", "title"], [])
    []
    """
    head = override[0] if override else None
    if head == APPEND:
        merged = list(base)
        merged.extend(item for item in override[1:] if item not in merged)
        return merged
    if head == REPLACE:
        return list(override[1:])
    return list(override)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` with ``override`` layered on top; inputs are untouched."""
    merged: Dict[str, Any] = dict(base)
    for key, incoming in (override or {}).items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(incoming, dict):
            merged[key] = deep_merge(current, incoming)
        elif isinstance(current, list) and isinstance(incoming, list):
            merged[key] = merge_arrays(current, incoming)
        else:
            merged[key] = incoming
    return merged


__all__ = ["deep_merge", "merge_arrays", "APPEND", "REPLACE"]
