"""
tsxlint show-config command.

SUMMARY: Show the merged configuration
"""

from __future__ import annotations

import argparse
import sys

import yaml

from tsxlint.cli import OutputFormatter, add_json_flag, add_repo_root_flag, get_repo_root
from tsxlint.core.config import ConfigManager
from tsxlint.core.errors import ConfigError

SUMMARY = "Show the merged configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "key",
        nargs="?",
        help="Dot-notation key to show (e.g. attributes.target)",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        manager = ConfigManager(get_repo_root(args))
        config = manager.load_config(validate=True)
    except ConfigError as e:
        formatter.error(e, error_code="config_error")
        return 2

    data = config
    if args.key:
        data = manager.get(args.key)
        if data is None:
            formatter.error(KeyError(args.key), f"Unknown config key: {args.key}", error_code="unknown_key")
            return 1

    if formatter.json_mode:
        formatter.json_output(data)
    else:
        formatter.text(yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip())
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
