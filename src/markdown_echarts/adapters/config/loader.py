"""Layered configuration loading for markdown-echarts.

Reads ``defaultconfig.toml`` shipped inside the package and layers the
application, host, user, ``.env`` and environment sources over it through
``lib_layered_config``. Results are cached per ``(profile, start_dir)``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from markdown_echarts import __init__conf__

_DEFAULT_CONFIG_FILE = "defaultconfig.toml"


class CachedConfigLoader(Protocol):
    """Callable config loader that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are unsafe to use as a path segment.

    Raises:
        ValueError: If the name is empty, too long, or contains separators.

    Examples:
        >>> validate_profile("print")

        >>> validate_profile("../themes")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../themes
    """
    validate_profile_name(profile, max_length=max_length or DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / _DEFAULT_CONFIG_FILE


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the merged configuration (defaults, app, host, user, dotenv, env).

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into every
            configuration path so e.g. a ``print`` profile can carry its own
            chart defaults.
        start_dir: Directory where ``.env`` discovery starts; the current
            working directory when ``None``.

    Returns:
        Immutable ``Config`` with per-key provenance.

    Example:
        >>> config = get_config()
        >>> config.get("echarts", default={}).get("throw_on_error")
        False
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


_get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config: CachedConfigLoader = cast(CachedConfigLoader, _get_config)


__all__ = [
    "CachedConfigLoader",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
