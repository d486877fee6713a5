"""CLI render stories: Markdown files and stdin in, HTML with chart figures out."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from markdown_echarts.adapters import cli as cli_mod
from markdown_echarts.adapters.config.settings import EchartsSettings

if TYPE_CHECKING:
    from conftest import ChartCliContext

REPORT = """\
# Monthly report

```echarts
{"xAxis": {"type": "category", "data": ["Jan", "Feb"]}, "series": [{"type": "bar", "data": [4, 7]}]}
```

Numbers are preliminary.
"""

BROKEN_REPORT = """\
```echarts
{"series": [
```
"""


@pytest.mark.os_agnostic
def test_render_writes_html_to_stdout(
    cli_runner: CliRunner,
    chart_cli_context: Callable[[dict[str, Any]], ChartCliContext],
    write_markdown: Callable[..., Path],
) -> None:
    ctx = chart_cli_context({"echarts": {}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["render", str(write_markdown(REPORT))], obj=ctx.factory)

    assert result.exit_code == 0
    assert result.stdout.startswith("<h1>Monthly report</h1>\n")
    assert '<figure id="echarts-000000000002" class="echarts">' in result.stdout
    assert "<p>Numbers are preliminary.</p>" in result.stdout


@pytest.mark.os_agnostic
def test_render_passes_configured_settings_to_the_renderer(
    cli_runner: CliRunner,
    chart_cli_context: Callable[[dict[str, Any]], ChartCliContext],
    write_markdown: Callable[..., Path],
) -> None:
    ctx = chart_cli_context(
        {"echarts": {"script_url": "/static/echarts.js", "defaults": {"title": {"left": "center"}}}}
    )

    result: Result = cli_runner.invoke(cli_mod.cli, ["render", str(write_markdown(REPORT))], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.calls == [
        {
            "text": REPORT,
            "settings": EchartsSettings(script_url="/static/echarts.js", defaults={"title": {"left": "center"}}),
        }
    ]
    assert '<script src="/static/echarts.js"></script>' in result.stdout
    assert 'return {"title":{"left":"center"}};' in result.stdout


@pytest.mark.os_agnostic
def test_render_writes_to_an_output_file(
    cli_runner: CliRunner,
    chart_cli_context: Callable[[dict[str, Any]], ChartCliContext],
    write_markdown: Callable[..., Path],
    tmp_path: Path,
) -> None:
    ctx = chart_cli_context({"echarts": {}})
    target = tmp_path / "report.html"

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["render", str(write_markdown(REPORT)), "--output", str(target)], obj=ctx.factory
    )

    assert result.exit_code == 0
    assert result.stdout == ""
    assert target.read_text(encoding="utf-8").startswith("<h1>Monthly report</h1>")


@pytest.mark.os_agnostic
def test_render_reads_stdin_for_dash(
    cli_runner: CliRunner,
    chart_cli_context: Callable[[dict[str, Any]], ChartCliContext],
) -> None:
    ctx = chart_cli_context({"echarts": {}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["render", "-"], input="*piped*\n", obj=ctx.factory)

    assert result.exit_code == 0
    assert result.stdout == "<p><em>piped</em></p>\n"


@pytest.mark.os_agnostic
def test_missing_source_exits_with_file_not_found(
    cli_runner: CliRunner,
    chart_cli_context: Callable[[dict[str, Any]], ChartCliContext],
    tmp_path: Path,
) -> None:
    ctx = chart_cli_context({"echarts": {}})
    missing = tmp_path / "absent.md"

    result: Result = cli_runner.invoke(cli_mod.cli, ["render", str(missing)], obj=ctx.factory)

    assert result.exit_code == cli_mod.ExitCode.FILE_NOT_FOUND
    assert "File not found" in result.stderr
    assert ctx.spy.calls == []


@pytest.mark.os_agnostic
def test_non_utf8_source_exits_with_invalid_argument(
    cli_runner: CliRunner,
    chart_cli_context: Callable[[dict[str, Any]], ChartCliContext],
    tmp_path: Path,
) -> None:
    ctx = chart_cli_context({"echarts": {}})
    source = tmp_path / "latin1.md"
    source.write_bytes(b"caf\xe9\n")

    result: Result = cli_runner.invoke(cli_mod.cli, ["render", str(source)], obj=ctx.factory)

    assert result.exit_code == cli_mod.ExitCode.INVALID_ARGUMENT


@pytest.mark.os_agnostic
def test_broken_chart_falls_back_to_pre_by_default(
    cli_runner: CliRunner,
    chart_cli_context: Callable[[dict[str, Any]], ChartCliContext],
    write_markdown: Callable[..., Path],
) -> None:
    ctx = chart_cli_context({"echarts": {}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["render", str(write_markdown(BROKEN_REPORT))], obj=ctx.factory)

    assert result.exit_code == 0
    assert result.stdout.startswith('<pre>{&quot;series&quot;: [</pre>')


@pytest.mark.os_agnostic
def test_strict_flag_turns_a_broken_chart_into_an_error(
    cli_runner: CliRunner,
    chart_cli_context: Callable[[dict[str, Any]], ChartCliContext],
    write_markdown: Callable[..., Path],
) -> None:
    ctx = chart_cli_context({"echarts": {}})

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["render", "--strict", str(write_markdown(BROKEN_REPORT))], obj=ctx.factory
    )

    assert result.exit_code == cli_mod.ExitCode.CHART_ERROR
    assert "not valid JSON" in result.stderr
    assert ctx.spy.calls[0]["settings"].throw_on_error is True


@pytest.mark.os_agnostic
def test_no_strict_overrides_a_configured_throw_on_error(
    cli_runner: CliRunner,
    chart_cli_context: Callable[[dict[str, Any]], ChartCliContext],
    write_markdown: Callable[..., Path],
) -> None:
    ctx = chart_cli_context({"echarts": {"throw_on_error": True}})

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["render", "--no-strict", str(write_markdown(BROKEN_REPORT))], obj=ctx.factory
    )

    assert result.exit_code == 0
    assert result.stdout.startswith("<pre>")


@pytest.mark.os_agnostic
def test_set_override_enables_throw_on_error(
    cli_runner: CliRunner,
    chart_cli_context: Callable[[dict[str, Any]], ChartCliContext],
    write_markdown: Callable[..., Path],
) -> None:
    ctx = chart_cli_context({"echarts": {}})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "echarts.throw_on_error=true", "render", str(write_markdown(BROKEN_REPORT))],
        obj=ctx.factory,
    )

    assert result.exit_code == cli_mod.ExitCode.CHART_ERROR


@pytest.mark.os_agnostic
def test_invalid_echarts_section_exits_with_config_error(
    cli_runner: CliRunner,
    chart_cli_context: Callable[[dict[str, Any]], ChartCliContext],
    write_markdown: Callable[..., Path],
) -> None:
    ctx = chart_cli_context({"echarts": {"defaults": "[1, 2]"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["render", str(write_markdown(REPORT))], obj=ctx.factory)

    assert result.exit_code == cli_mod.ExitCode.CONFIG_ERROR
    assert "Invalid [echarts] configuration" in result.stderr
    assert "config --section echarts" in result.stderr
    assert ctx.spy.calls == []
