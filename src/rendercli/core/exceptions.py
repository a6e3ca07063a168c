from __future__ import annotations

from typing import Any, Dict, Mapping


class RenderCliError(Exception):
    """Base exception for rendercli."""

    error_code: str = "error"
    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Shallow copy so callers can't mutate it afterwards.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "error": self.error_code,
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class TemplateNotFoundError(RenderCliError, FileNotFoundError):
    """Raised when a template cannot be found in the configured directory."""

    error_code = "template_not_found"

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        RenderCliError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class TemplateSyntaxError(RenderCliError, ValueError):
    """Raised when a template cannot be parsed."""

    error_code = "template_syntax_error"

    def __init__(
        self,
        message: str = "",
        *,
        template: str | None = None,
        lineno: int | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if template is not None:
            ctx["template"] = template
        if lineno is not None:
            ctx["lineno"] = lineno
        RenderCliError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)
        self.template = template
        self.lineno = lineno

    def __str__(self) -> str:
        base = super().__str__()
        if self.template and self.lineno is not None:
            return f"{base} ({self.template}, line {self.lineno})"
        return base


class RenderError(RenderCliError, RuntimeError):
    """Raised when substitution fails while rendering a parsed template."""

    error_code = "render_error"

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        RenderCliError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class ConfigError(RenderCliError, ValueError):
    """Raised when configuration cannot be loaded or fails validation."""

    error_code = "config_error"

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        RenderCliError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "RenderCliError",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
    "RenderError",
    "ConfigError",
]
