"""
tsxlint check command.

SUMMARY: Check user-visible text in JSX/TSX files
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tsxlint.cli import OutputFormatter, add_standard_flags, get_repo_root, setup_logging
from tsxlint.core.config import LintSettings
from tsxlint.core.errors import ConfigError
from tsxlint.core.report import render_report
from tsxlint.core.scanner import Linter

SUMMARY = "Check user-visible text in JSX/TSX files"

EXIT_CLEAN = 0
EXIT_PROBLEMS = 1
EXIT_CONFIG_ERROR = 2


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Files or directories to check (default: current directory)",
    )
    parser.add_argument(
        "--no-fail",
        action="store_true",
        help="Exit 0 even when problems are found",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Lint the given paths and print a report."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        settings = LintSettings.load(get_repo_root(args))
    except ConfigError as e:
        formatter.error(e, error_code="config_error")
        return EXIT_CONFIG_ERROR

    setup_logging(args, settings.log_level)

    linter = Linter.from_settings(settings)
    reports = linter.lint_paths_sync([Path(p) for p in args.paths])
    total = sum(len(r.diagnostics) for r in reports)

    if formatter.json_mode:
        formatter.json_output(
            {
                "files": [r.to_dict() for r in reports],
                "total": total,
            }
        )
    else:
        sys.stdout.write(render_report(reports))

    if total and not args.no_fail:
        return EXIT_PROBLEMS
    return EXIT_CLEAN


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
