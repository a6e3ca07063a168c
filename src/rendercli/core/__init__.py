"""Core rendering, configuration and error types for rendercli."""

from rendercli.core.bench import BenchmarkResult, run_benchmark
from rendercli.core.config import ConfigManager, RenderSettings
from rendercli.core.context import Foo, build_render_context
from rendercli.core.exceptions import (
    ConfigError,
    RenderCliError,
    RenderError,
    TemplateNotFoundError,
    TemplateSyntaxError,
)
from rendercli.core.renderer import TemplateRenderer

__all__ = [
    "BenchmarkResult",
    "run_benchmark",
    "ConfigManager",
    "RenderSettings",
    "Foo",
    "build_render_context",
    "ConfigError",
    "RenderCliError",
    "RenderError",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
    "TemplateRenderer",
]
