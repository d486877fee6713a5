"""``render`` command - Markdown in, HTML with chart figures out."""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from markdown_echarts.domain.errors import ChartError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import load_settings, read_source

logger = logging.getLogger(__name__)


@click.command("render", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.Path(dir_okay=False, allow_dash=True))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write HTML to this file instead of standard output",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on the first broken chart (overrides echarts.throw_on_error)",
)
@click.pass_context
def cli_render(ctx: click.Context, source: str, output: str | None, strict: bool | None) -> None:
    """Render SOURCE (a Markdown file, or - for stdin) to HTML.

    Every ```echarts fence becomes a responsive chart figure. Broken charts
    are shown as their source inside <pre> unless --strict is given.
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_settings(cli_ctx)
    if strict is not None:
        settings = settings.model_copy(update={"throw_on_error": strict})

    extra = {"command": "render", "source": source, "output": output, "strict": settings.throw_on_error}
    with lib_log_rich.runtime.bind(job_id="cli-render", extra=extra):
        text = read_source(source)
        logger.info("Rendering markdown", extra={"characters": len(text)})
        try:
            html = cli_ctx.services.render_markdown(text, settings=settings)
        except ChartError as exc:
            logger.error("Chart rendering failed", extra={"error": str(exc), "error_type": type(exc).__name__})
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.CHART_ERROR) from exc

        if output is None:
            click.echo(html, nl=False)
            return
        Path(output).write_text(html, encoding="utf-8")
        logger.info("Wrote rendered HTML", extra={"path": output})


__all__ = ["cli_render"]
