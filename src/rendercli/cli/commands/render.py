"""
rendercli render command.

SUMMARY: Render a template with the built-in sample context
"""

from __future__ import annotations

import argparse
import os
import sys

from rendercli.cli import OutputFormatter, add_standard_flags, get_render_settings
from rendercli.core.context import build_render_context
from rendercli.core.exceptions import RenderCliError
from rendercli.core.renderer import TemplateRenderer

SUMMARY = "Render a template with the built-in sample context"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        settings = get_render_settings(args)
        renderer = TemplateRenderer(settings)
        output = renderer.render(build_render_context())
    except RenderCliError as e:
        formatter.error(e)
        return 1

    cwd = os.getcwd()
    if formatter.json_mode:
        formatter.json_output(
            {
                "cwd": cwd,
                "template": settings.template,
                "templates_dir": str(settings.templates_dir),
                "output": output,
            }
        )
    else:
        formatter.text(cwd)
        formatter.text(output)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
