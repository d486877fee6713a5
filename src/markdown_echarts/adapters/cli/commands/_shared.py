"""Helpers shared by the chart commands."""

from __future__ import annotations

import logging
from pathlib import Path

import rich_click as click

from markdown_echarts import __init__conf__
from markdown_echarts.adapters.config.settings import EchartsSettings
from markdown_echarts.domain.errors import ConfigurationError

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def load_settings(cli_ctx: CLIContext) -> EchartsSettings:
    """Build plugin settings from the loaded config.

    Raises:
        SystemExit: ``CONFIG_ERROR`` when ``[echarts]`` is invalid.
    """
    try:
        return cli_ctx.services.load_echarts_settings_from_dict(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        logger.error("Invalid echarts configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        click.echo(f"See: {__init__conf__.shell_command} config --section echarts", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def read_source(source: str) -> str:
    """Read a UTF-8 text file, or standard input for ``-``.

    Raises:
        SystemExit: ``FILE_NOT_FOUND``, ``PERMISSION_DENIED`` or
            ``INVALID_ARGUMENT`` (not UTF-8 / a directory).
    """
    if source == STDIN_MARKER:
        return click.get_text_stream("stdin").read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        click.echo(f"\nError: File not found: {source}", err=True)
        raise SystemExit(ExitCode.FILE_NOT_FOUND) from exc
    except PermissionError as exc:
        click.echo(f"\nError: Permission denied: {source}", err=True)
        raise SystemExit(ExitCode.PERMISSION_DENIED) from exc
    except (IsADirectoryError, UnicodeDecodeError) as exc:
        click.echo(f"\nError: Cannot read {source}: {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["STDIN_MARKER", "load_settings", "read_source"]
