import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'rendercli'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from rendercli.cli._dispatcher import discover_commands
from rendercli.core.stdlib_logging import reset_logging_for_tests
from rendercli.data import clear_caches


@pytest.fixture(autouse=True)
def _reset_rendercli_state(monkeypatch):
    """Fresh caches, logging and RENDERCLI_* environment for every test."""
    for key in list(os.environ):
        if key.startswith("RENDERCLI_"):
            monkeypatch.delenv(key)
    clear_caches()
    discover_commands.cache_clear()
    yield
    reset_logging_for_tests()
    clear_caches()


@pytest.fixture
def isolated_project_env(tmp_path, monkeypatch) -> Path:
    """Run the test from an empty working directory.

    Keeps a developer's own ``.rendercli.yml`` out of config loading.
    """
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def templates_dir(tmp_path) -> Path:
    """Template directory with small fixtures used across the tests."""
    views = tmp_path / "views"
    views.mkdir()
    (views / "first.txt").write_text("{{ coll[0] }}", encoding="utf-8")
    (views / "name.txt").write_text("{{ foo.name }}", encoding="utf-8")
    (views / "layout.html").write_text(
        "<main>{% block content %}{% endblock %}</main>",
        encoding="utf-8",
    )
    (views / "child.html").write_text(
        '{% extends "layout.html" %}{% block content %}{{ foo.name }}:{{ coll|join(",") }}{% endblock %}',
        encoding="utf-8",
    )
    return views


@pytest.fixture
def write_template(templates_dir):
    def _write(name: str, content: str) -> Path:
        path = templates_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
