"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag (where .tsxlint/config is looked up)."""
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Project root holding .tsxlint/config (default: current directory)",
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    """Add -v/--verbose flag; repeat for debug output."""
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-vv for debug)",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    add_json_flag(parser)
    add_repo_root_flag(parser)
    add_verbose_flag(parser)


__all__ = ["add_json_flag", "add_repo_root_flag", "add_verbose_flag", "add_standard_flags"]
