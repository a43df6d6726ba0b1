"""
Entry point for the ``tsxlint`` command.

Subcommands live in ``tsxlint.cli.commands``; any public module there that
defines ``main(args) -> int`` becomes a subcommand named after the module
(underscores shown as dashes). ``SUMMARY`` and ``register_args(parser)`` are
optional.
"""

from __future__ import annotations

import argparse
import importlib
import pkgutil
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Dict, Optional

from tsxlint import __version__
from tsxlint.cli import commands as commands_pkg


@dataclass(frozen=True)
class CommandSpec:
    name: str
    summary: str
    run: Callable[[argparse.Namespace], int]
    register_args: Optional[Callable[[argparse.ArgumentParser], None]] = None

    @property
    def cli_name(self) -> str:
        return self.name.replace("_", "-")


@lru_cache(maxsize=1)
def discover_commands() -> Dict[str, CommandSpec]:
    """Import every command module and describe it, keyed by module name."""
    found: Dict[str, CommandSpec] = {}
    for info in pkgutil.iter_modules(commands_pkg.__path__):
        if info.name.startswith("_"):
            continue
        module = importlib.import_module(f"{commands_pkg.__name__}.{info.name}")
        run = getattr(module, "main", None)
        if run is None:
            continue
        found[info.name] = CommandSpec(
            name=info.name,
            summary=getattr(module, "SUMMARY", info.name),
            run=run,
            register_args=getattr(module, "register_args", None),
        )
    return found


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tsxlint",
        description="Check user-visible text in JSX/TSX sources for spelling and style problems.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", title="commands", metavar="<command>")

    for cmd in sorted(discover_commands().values(), key=lambda s: s.cli_name):
        aliases = [cmd.name] if cmd.cli_name != cmd.name else []
        cmd_parser = sub.add_parser(cmd.cli_name, aliases=aliases, help=cmd.summary)
        if cmd.register_args is not None:
            cmd.register_args(cmd_parser)
        cmd_parser.set_defaults(_run=cmd.run)
    return parser


def main(argv: Optional[list] = None) -> int:
    """Run the CLI and return its exit code.

    0 means clean, 1 means problems were found, 2 means the configuration
    could not be loaded.
    """
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    run = getattr(args, "_run", None)
    if run is None:
        parser.print_help()
        return 0
    try:
        return int(run(args))
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
