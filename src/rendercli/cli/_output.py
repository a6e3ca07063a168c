"""CLI output formatting (text and JSON modes).

Command output goes to stdout; errors go to stderr in both modes.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Optional

from rendercli.core.exceptions import RenderCliError


class OutputFormatter:
    """Output formatter shared by the CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON; otherwise output text
            indent: JSON indentation level
        """
        self.json_mode = json_mode
        self.indent = indent

    def error(
        self,
        error: Exception,
        message: Optional[str] = None,
        *,
        error_code: Optional[str] = None,
    ) -> None:
        """Report a failure on stderr.

        Args:
            error: The exception that occurred
            message: Optional human-readable message (defaults to str(error))
            error_code: Error code for JSON output; rendercli errors carry
                their own, anything else defaults to ``"error"``
        """
        msg = message or str(error)
        if self.json_mode:
            output: dict[str, Any]
            if isinstance(error, RenderCliError):
                output = error.to_json_error()
            else:
                output = {"error": "error", "message": msg}
            output["message"] = msg
            if error_code:
                output["error"] = error_code
            print(json.dumps(output, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str) -> None:
        print(message)


def print_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


__all__ = ["OutputFormatter", "print_error"]
