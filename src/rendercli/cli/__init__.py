"""
rendercli CLI package.

Commands are auto-discovered from modules under ``cli/commands``. Each
command module exposes ``SUMMARY``, ``register_args(parser)`` and
``main(args) -> int``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Config and settings loading
"""
from ._output import OutputFormatter, print_error
from ._args import (
    add_json_flag,
    add_verbose_flag,
    add_config_flag,
    add_template_args,
    add_standard_flags,
)
from ._utils import get_render_settings, load_config

__all__ = [
    # Output formatting
    "OutputFormatter",
    "print_error",
    # Argument helpers
    "add_json_flag",
    "add_verbose_flag",
    "add_config_flag",
    "add_template_args",
    "add_standard_flags",
    # Utilities
    "get_render_settings",
    "load_config",
]
