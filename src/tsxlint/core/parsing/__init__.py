"""Parser adapters that turn source text into ``SyntaxDocument`` trees."""
from .treesitter import TsxParser, grammar_for

__all__ = ["TsxParser", "grammar_for"]
