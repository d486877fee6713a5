"""Command-line interface built on rich-click.

Contents:
    * :mod:`.root` - root group with ``--traceback``, ``--profile``, ``--set``
    * :mod:`.main` - entry point wrapping error formatting and exit codes
    * :mod:`.commands` - ``info``, ``config``, ``render``, ``resolve``
"""

from __future__ import annotations

from .commands import cli_config, cli_info, cli_render, cli_resolve
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "CLIContext",
    "ExitCode",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_info",
    "cli_render",
    "cli_resolve",
    "get_cli_context",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
