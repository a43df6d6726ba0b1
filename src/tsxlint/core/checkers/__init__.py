"""Checkers that evaluate normalized UI text."""
from .base import BlockingChecker, Checker
from .prose import ProseChecker
from .registry import available_checkers, build_checkers, register_checker
from .spelling import SpellingChecker

__all__ = [
    "BlockingChecker",
    "Checker",
    "ProseChecker",
    "SpellingChecker",
    "available_checkers",
    "build_checkers",
    "register_checker",
]
