"""
rendercli bench command.

SUMMARY: Render a template repeatedly and report the elapsed time
"""

from __future__ import annotations

import argparse
import sys

from rendercli.cli import OutputFormatter, add_standard_flags, get_render_settings
from rendercli.core.bench import run_benchmark
from rendercli.core.context import build_render_context
from rendercli.core.exceptions import RenderCliError
from rendercli.core.renderer import TemplateRenderer

SUMMARY = "Render a template repeatedly and report the elapsed time"


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from exc
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--iterations",
        "-n",
        type=_positive_int,
        default=None,
        help="Number of renders to run (default: bench.iterations, 10000)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        settings = get_render_settings(args, iterations=getattr(args, "iterations", None))
        renderer = TemplateRenderer(settings)
        context = build_render_context()
        # Blocks are suppressed in JSON mode so stdout stays one document.
        emit = None if formatter.json_mode else formatter.text
        result = run_benchmark(renderer, context, settings.iterations, emit=emit)
    except RenderCliError as e:
        formatter.error(e)
        return 1

    if formatter.json_mode:
        formatter.json_output(result.to_dict())
    else:
        formatter.text(f"Elapsed: {result.elapsed_seconds:.6f}s")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
