from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from rendercli import __version__
from rendercli.cli._dispatcher import _strip_profile_flag, discover_commands, main

SRC_ROOT = Path(__file__).resolve().parents[3] / "src"


def test_discovers_render_and_bench_commands() -> None:
    commands = discover_commands()
    assert set(commands) == {"bench", "render"}
    for info in commands.values():
        assert callable(info["main"])
        assert callable(info["register_args"])
        assert info["summary"]


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "usage: rendercli" in capsys.readouterr().out


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert f"rendercli {__version__}" in capsys.readouterr().out


def test_unknown_command_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["explode"])
    assert excinfo.value.code == 2


def test_render_through_dispatcher(isolated_project_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["render"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == os.getcwd()
    assert "<h1>foo</h1>" in out


def test_missing_template_through_dispatcher(
    isolated_project_env: Path, templates_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rc = main(["render", "--templates-dir", str(templates_dir), "--template", "absent.html"])
    assert rc == 1
    assert "not found" in capsys.readouterr().err


def _install_command(monkeypatch: pytest.MonkeyPatch, name: str, func) -> None:
    commands = {name: {"module": None, "summary": name, "register_args": None, "main": func}}
    monkeypatch.setattr("rendercli.cli._dispatcher.discover_commands", lambda: commands)


def test_uncaught_command_error_exits_one(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def boom(args):
        raise RuntimeError("kaput")

    _install_command(monkeypatch, "explode", boom)

    assert main(["explode"]) == 1
    assert "Error: kaput" in capsys.readouterr().err


def test_interrupted_command_exits_130(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def interrupted(args):
        raise KeyboardInterrupt

    _install_command(monkeypatch, "wait", interrupted)

    assert main(["wait"]) == 130
    assert "Interrupted." in capsys.readouterr().err


def test_profile_summary_printed_when_command_raises(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def boom(args):
        raise RuntimeError("kaput")

    _install_command(monkeypatch, "explode", boom)

    assert main(["--profile", "explode"]) == 1
    err = capsys.readouterr().err
    assert "Error: kaput" in err
    assert "Profiling (top spans):" in err
    assert "cli.command.exec" in err


def test_profile_flag_prints_spans(
    isolated_project_env: Path, templates_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rc = main(["--profile", "render", "--templates-dir", str(templates_dir), "-t", "first.txt"])
    assert rc == 0
    err = capsys.readouterr().err
    assert "Profiling (top spans):" in err
    assert "render.render" in err
    assert "config.load" in err


def test_strip_profile_flag_only_before_command() -> None:
    assert _strip_profile_flag(["--profile", "render"]) == (["render"], True)
    assert _strip_profile_flag(["render", "--profile"]) == (["render", "--profile"], False)
    assert _strip_profile_flag(["render"]) == (["render"], False)


def test_python_dash_m_entry_point(tmp_path: Path) -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_ROOT), env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-m", "rendercli", "render"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines()[0] == os.path.realpath(tmp_path)
    assert "<h1>foo</h1>" in result.stdout


def test_python_dash_m_missing_template_exit_status(tmp_path: Path) -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_ROOT), env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-m", "rendercli", "render", "--template", "absent.html"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode != 0
    assert "Template 'absent.html' not found" in result.stderr
