from __future__ import annotations

from rendercli.core.exceptions import (
    ConfigError,
    RenderCliError,
    RenderError,
    TemplateNotFoundError,
    TemplateSyntaxError,
)


def test_error_hierarchy() -> None:
    assert issubclass(TemplateNotFoundError, RenderCliError)
    assert issubclass(TemplateNotFoundError, FileNotFoundError)
    assert issubclass(TemplateSyntaxError, ValueError)
    assert issubclass(RenderError, RuntimeError)
    assert issubclass(ConfigError, ValueError)


def test_error_codes_are_distinct() -> None:
    codes = {cls.error_code for cls in (TemplateNotFoundError, TemplateSyntaxError, RenderError, ConfigError)}
    assert len(codes) == 4


def test_to_json_error() -> None:
    err = TemplateNotFoundError("Template 'x' not found", context={"template": "x"})
    assert err.to_json_error() == {
        "error": "template_not_found",
        "message": "Template 'x' not found",
        "code": "TemplateNotFoundError",
        "context": {"template": "x"},
    }


def test_context_is_copied() -> None:
    ctx = {"template": "x"}
    err = RenderError("boom", context=ctx)
    ctx["template"] = "y"
    assert err.context == {"template": "x"}


def test_syntax_error_message_includes_location() -> None:
    err = TemplateSyntaxError("Template syntax error: unexpected '}'", template="a.html", lineno=3)
    assert str(err) == "Template syntax error: unexpected '}' (a.html, line 3)"
    assert err.context == {"template": "a.html", "lineno": 3}
