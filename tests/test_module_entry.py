"""Module entry stories ensuring `python -m` mirrors the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import lib_cli_exit_tools
import pytest

from markdown_echarts import __init__conf__, entry
from markdown_echarts.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", ["markdown-echarts"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("markdown_echarts.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_maps_missing_files_to_exit_codes(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
    tmp_path: Path,
) -> None:
    monkeypatch.setattr(sys, "argv", ["markdown-echarts", "render", str(tmp_path / "absent.md")], raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("markdown_echarts.__main__", run_name="__main__")

    assert exc.value.code == cli_mod.ExitCode.FILE_NOT_FOUND
    assert "File not found" in strip_ansi(capsys.readouterr().err)


@pytest.mark.os_agnostic
def test_cli_facade_exports_all_registered_commands() -> None:
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}

    assert {"cli_config", "cli_info", "cli_render", "cli_resolve"} <= exported


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """`python -m markdown_echarts --help` works for end users."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "markdown_echarts", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        # rich-click emits Unicode that cp1252 cannot decode
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert "render" in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_renders_stdin() -> None:
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "markdown_echarts", "render", "-"],
        input="```echarts\n{\"series\": [{\"type\": \"line\"}]}\n```\n",
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert '<figure id="echarts-' in result.stdout
    assert 'const config = {"series":[{"type":"line"}]};' in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "markdown_echarts", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services for the console script."""
    monkeypatch.setattr(sys, "argv", ["markdown-echarts", "--help"])

    exit_code = entry.main()

    assert exit_code == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_entry_main_returns_nonzero_on_usage_error(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["markdown-echarts", "resolve", "--scheme", "sepia", "-"])

    exit_code = entry.main()

    assert exit_code == 2
    assert "sepia" in capsys.readouterr().err
