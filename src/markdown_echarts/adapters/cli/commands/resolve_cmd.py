"""``resolve`` command - show the option ECharts would receive for a chart."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import orjson
import rich_click as click

from markdown_echarts.adapters.markup.fragment import parse_literal_definition
from markdown_echarts.domain.enums import ColorScheme
from markdown_echarts.domain.errors import StructuralMergeError, UserConfigEvaluationError
from markdown_echarts.domain.resolver import resolve_config

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import load_settings, read_source

logger = logging.getLogger(__name__)


@click.command("resolve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("config_json", metavar="CONFIG_JSON", type=click.Path(dir_okay=False, allow_dash=True))
@click.option(
    "--scheme",
    type=click.Choice([s.value for s in ColorScheme], case_sensitive=False),
    default=ColorScheme.LIGHT.value,
    help="Color scheme to resolve for",
)
@click.pass_context
def cli_resolve(ctx: click.Context, config_json: str, scheme: str) -> None:
    """Merge the chart in CONFIG_JSON (a file, or - for stdin) over the configured defaults.

    Prints the resolved configuration as indented JSON.
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_settings(cli_ctx)
    color_scheme = ColorScheme(scheme.lower())

    with lib_log_rich.runtime.bind(job_id="cli-resolve", extra={"command": "resolve", "scheme": color_scheme.value}):
        text = read_source(config_json)
        try:
            chart = parse_literal_definition(text)
        except UserConfigEvaluationError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        if chart is None:
            click.echo("\nError: CONFIG_JSON must contain a JSON object", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT)

        try:
            resolved = resolve_config(settings.defaults, chart, color_scheme)
        except StructuralMergeError as exc:
            logger.error("Chart configuration cannot be merged", extra={"error": str(exc)})
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.CHART_ERROR) from exc

        logger.info("Resolved chart configuration", extra={"keys": sorted(resolved)})
        click.echo(orjson.dumps(resolved, option=orjson.OPT_INDENT_2).decode("utf-8"))


__all__ = ["cli_resolve"]
