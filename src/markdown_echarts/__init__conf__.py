"""Static package metadata and layered-configuration identifiers.

The ``version`` line is kept in sync with ``pyproject.toml``; the
``LAYEREDCONF_*`` values select the platform-specific configuration paths
used by :mod:`lib_layered_config`.
"""

from __future__ import annotations

name = "markdown_echarts"
title = "Render ECharts fences in Markdown into responsive chart figures"
version = "0.1.0"
homepage = "https://github.com/markdown-echarts/markdown-echarts"
author = "markdown-echarts developers"
author_email = "maintainers@markdown-echarts.dev"
shell_command = "markdown-echarts"

#: Vendor segment used for macOS/Windows configuration directories.
LAYEREDCONF_VENDOR = "markdown-echarts"
#: Application segment used for macOS/Windows configuration directories.
LAYEREDCONF_APP = "markdown-echarts"
#: Slug used for XDG directories and environment variable prefixes.
LAYEREDCONF_SLUG = "markdown-echarts"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for markdown_echarts:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
