"""
Auto-discovery CLI dispatcher for rendercli.

Scans ``cli/commands`` for command modules and registers each one as a
subcommand. Adding a command = adding a .py file with ``SUMMARY``,
``register_args`` and ``main``.
"""

from __future__ import annotations

import argparse
import importlib
import sys
from collections.abc import Callable
from contextlib import nullcontext
from functools import lru_cache
from pathlib import Path
from typing import Any

from rendercli.cli._output import print_error
from rendercli.core.utils.profiling import Profiler, enable_profiler, span

PROG = "rendercli"
DESCRIPTION = "rendercli - render bundled Jinja2 templates with sample data"


@lru_cache(maxsize=1)
def discover_commands() -> dict[str, dict[str, Any]]:
    """Discover command modules under cli/commands.

    Returns:
        Dict mapping command name to command info dict
    """
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        try:
            with span("cli.discover.import", module=f"rendercli.cli.commands.{cmd_name}"):
                module = importlib.import_module(f"rendercli.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", cmd_name),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the discovered commands."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Print span timings for config loading and rendering to stderr.",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_name, cmd_info in discover_commands().items():
        primary_name = cmd_name.replace("_", "-")
        aliases = [cmd_name] if primary_name != cmd_name else []
        cmd_parser = subparsers.add_parser(
            primary_name,
            aliases=aliases,
            help=cmd_info["summary"],
            description=cmd_info["summary"],
        )
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def _get_version() -> str:
    from rendercli import __version__

    return __version__


def _strip_profile_flag(argv: list[str]) -> tuple[list[str], bool]:
    """Strip the global ``--profile`` flag when it appears before the command.

    Only occurrences ahead of the first non-flag token count, so a command
    is free to define its own ``--profile`` option.
    """
    command_index: int | None = None
    for i, a in enumerate(argv):
        if not a.startswith("-"):
            command_index = i
            break

    enabled = False
    out: list[str] = []
    for i, a in enumerate(argv):
        if a == "--profile" and (command_index is None or i < command_index):
            enabled = True
            continue
        out.append(a)
    return out, enabled


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the rendercli CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    argv, profile_enabled = _strip_profile_flag(list(argv))
    profiler = Profiler() if profile_enabled else None
    ctx = enable_profiler(profiler) if profiler is not None else nullcontext()

    with ctx:
        with span("cli.total"):
            with span("cli.parser.build"):
                parser = build_parser()
            args = parser.parse_args(argv)

            func: Callable[[argparse.Namespace], int] | None = getattr(args, "_func", None)
            if not args.command or func is None:
                parser.print_help()
                return 0 if not args.command else 1

            try:
                with span("cli.command.exec", command=args.command):
                    result = func(args)
            except KeyboardInterrupt:
                print("\nInterrupted.", file=sys.stderr)
                result = 130
            except Exception as e:
                print_error(str(e))
                result = 1

    if profiler is not None:
        print(f"\n{profiler.format_summary()}", file=sys.stderr)

    return result


if __name__ == "__main__":
    sys.exit(main())
