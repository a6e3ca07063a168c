"""Jinja2 rendering of templates from a directory.

All Jinja2 failures leave this module as rendercli exceptions:

- missing template (including a missing ``{% extends %}`` parent) ->
  ``TemplateNotFoundError``
- unparsable template, or one that is not valid UTF-8 -> ``TemplateSyntaxError``
- unreadable template file, or failures while substituting values ->
  ``RenderError``
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

import jinja2

from rendercli.core.config import RenderSettings
from rendercli.core.exceptions import RenderError, TemplateNotFoundError, TemplateSyntaxError
from rendercli.core.utils.profiling import span

logger = logging.getLogger(__name__)

AUTOESCAPE_EXTENSIONS = ("html", "htm", "xml", "twig")

# Python errors a template expression can raise on unsupported values,
# e.g. ``{{ foo + 1 }}`` or ``{{ coll[7] }}``, plus OSError from reading an
# ``{% extends %}`` parent.
_RUNTIME_ERRORS = (TypeError, ValueError, ArithmeticError, LookupError, AttributeError, OSError)


class TemplateRenderer:
    """Render named templates from ``settings.templates_dir``.

    The loader is built once; :meth:`create_environment` builds a fresh engine
    over it, and :meth:`render` uses a new engine unless one is passed in.
    """

    def __init__(self, settings: RenderSettings) -> None:
        self.settings = settings
        self.loader = jinja2.FileSystemLoader(str(settings.templates_dir))

    @property
    def templates_dir(self) -> Path:
        return self.settings.templates_dir

    def create_environment(self) -> jinja2.Environment:
        s = self.settings
        with span("render.environment"):
            return jinja2.Environment(
                loader=self.loader,
                undefined=jinja2.StrictUndefined if s.strict_undefined else jinja2.Undefined,
                autoescape=jinja2.select_autoescape(AUTOESCAPE_EXTENSIONS) if s.autoescape else False,
                trim_blocks=s.trim_blocks,
                lstrip_blocks=s.lstrip_blocks,
            )

    def load(self, env: jinja2.Environment, name: Optional[str] = None) -> jinja2.Template:
        name = name or self.settings.template
        logger.debug("Loading template %s from %s", name, self.templates_dir)
        with span("render.load", template=name):
            try:
                return env.get_template(name)
            except jinja2.TemplateNotFound as exc:
                raise self._not_found(name, exc) from exc
            except jinja2.TemplateSyntaxError as exc:
                raise self._syntax_error(exc) from exc
            except UnicodeDecodeError as exc:
                raise TemplateSyntaxError(
                    f"Template '{name}' is not valid UTF-8: {exc.reason}",
                    template=name,
                    context={"templates_dir": str(self.templates_dir)},
                ) from exc
            except OSError as exc:
                raise RenderError(
                    f"Cannot read template '{name}': {exc}",
                    context={"template": name, "templates_dir": str(self.templates_dir)},
                ) from exc

    def render(
        self,
        context: Mapping[str, Any],
        name: Optional[str] = None,
        *,
        env: Optional[jinja2.Environment] = None,
    ) -> str:
        """Load ``name`` (default: the configured template) and render it."""
        name = name or self.settings.template
        if env is None:
            env = self.create_environment()
        template = self.load(env, name)
        with span("render.render", template=name):
            try:
                return template.render(context)
            except jinja2.TemplateNotFound as exc:
                raise self._not_found(exc.name or name, exc) from exc
            except jinja2.TemplateSyntaxError as exc:
                raise self._syntax_error(exc) from exc
            except jinja2.TemplateError as exc:
                raise RenderError(
                    f"Failed to render '{name}': {exc}",
                    context={"template": name},
                ) from exc
            except _RUNTIME_ERRORS as exc:
                raise RenderError(
                    f"Failed to render '{name}': {type(exc).__name__}: {exc}",
                    context={"template": name},
                ) from exc

    def _not_found(self, name: Any, exc: jinja2.TemplateNotFound) -> TemplateNotFoundError:
        return TemplateNotFoundError(
            f"Template '{name}' not found in {self.templates_dir}",
            context={"template": str(name), "templates_dir": str(self.templates_dir)},
        )

    def _syntax_error(self, exc: jinja2.TemplateSyntaxError) -> TemplateSyntaxError:
        return TemplateSyntaxError(
            f"Template syntax error: {exc.message}",
            template=exc.name or exc.filename,
            lineno=exc.lineno,
        )


__all__ = ["TemplateRenderer", "AUTOESCAPE_EXTENSIONS"]
