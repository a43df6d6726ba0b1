"""
tsx-text-lint - text quality linter for JSX/TSX sources

Extracts user-visible strings from JSX/TSX syntax trees (attribute values and
text runs) and checks them for spelling and prose-style problems.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
