"""Argument registration helpers shared by the CLI commands."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr (or the configured log file)",
    )


def add_config_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config file (default: .rendercli.yml in the working directory, if present)",
    )


def add_template_args(parser: argparse.ArgumentParser) -> None:
    """Add --template and --templates-dir overrides.

    Both default to None so the configured values apply when omitted.
    """
    parser.add_argument(
        "--template",
        "-t",
        type=str,
        default=None,
        help="Template file name to render (default: basic.html)",
    )
    parser.add_argument(
        "--templates-dir",
        type=str,
        default=None,
        help="Directory to load templates from (default: the templates bundled with rendercli)",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add the flags every render command takes.

    Adds: --template, --templates-dir, --config, --json, --verbose
    """
    add_template_args(parser)
    add_config_flag(parser)
    add_json_flag(parser)
    add_verbose_flag(parser)


__all__ = [
    "add_json_flag",
    "add_verbose_flag",
    "add_config_flag",
    "add_template_args",
    "add_standard_flags",
]
