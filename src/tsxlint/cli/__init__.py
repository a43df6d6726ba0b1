"""
tsx-text-lint CLI package.

Commands are auto-discovered from modules under cli/commands/; each exposes
SUMMARY, register_args(parser) and main(args) -> int.
"""
from ._args import add_json_flag, add_repo_root_flag, add_standard_flags, add_verbose_flag
from ._output import OutputFormatter
from ._utils import get_repo_root, setup_logging

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_repo_root_flag",
    "add_standard_flags",
    "add_verbose_flag",
    "get_repo_root",
    "setup_logging",
]
