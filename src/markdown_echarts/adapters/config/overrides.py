"""``--set SECTION.KEY=VALUE`` overrides on top of the layered configuration.

Typical uses::

    --set echarts.throw_on_error=true
    --set echarts.defaults.title.left=center
    --set 'echarts.defaults={"color": ["#5470c6"]}'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import orjson
from lib_layered_config import Config

OverrideValue = str | int | float | bool | None | list[Any] | dict[str, Any]
"""Values an override can carry after coercion."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment: top-level section, nested key path, value."""

    section: str
    key_path: tuple[str, ...]
    value: OverrideValue

    @property
    def dotted_key(self) -> str:
        return ".".join((self.section, *self.key_path))


def coerce_value(raw: str) -> OverrideValue:
    """Interpret *raw* as JSON when possible, else keep it as text.

    Examples:
        >>> coerce_value("false")
        False
        >>> coerce_value("250")
        250
        >>> coerce_value('{"renderer": "svg"}')
        {'renderer': 'svg'}
        >>> coerce_value("center")
        'center'
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    The first ``=`` ends the key; dots inside the value are kept.

    Raises:
        ValueError: Missing ``=``, no section/key split, or an empty segment.

    Examples:
        >>> parse_override("echarts.defaults.title.left=center")
        ConfigOverride(section='echarts', key_path=('defaults', 'title', 'left'), value='center')
        >>> parse_override("echarts=1")
        Traceback (most recent call last):
        ...
        ValueError: Invalid override 'echarts=1': expected SECTION.KEY=VALUE
    """
    key, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: missing '='")
    section, *path = key.split(".")
    if not path:
        raise ValueError(f"Invalid override {raw!r}: expected SECTION.KEY=VALUE")
    if not section or not all(path):
        raise ValueError(f"Invalid override {raw!r}: empty key segment")
    return ConfigOverride(section=section, key_path=tuple(path), value=coerce_value(value))


def _as_nested(overrides: list[ConfigOverride]) -> dict[str, Any]:
    tree: dict[str, Any] = {}
    for override in overrides:
        node = tree.setdefault(override.section, {})
        for segment in override.key_path[:-1]:
            node = node.setdefault(segment, {})
            if not isinstance(node, dict):
                raise ValueError(f"Override {override.dotted_key!r} descends into a non-table value")
        node[override.key_path[-1]] = override.value
    return tree


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every ``--set`` assignment merged in.

    Later assignments to the same key win. With no overrides the original
    object is returned unchanged.

    Example:
        >>> cfg = Config({"echarts": {"verbose": False}}, {})
        >>> apply_overrides(cfg, ("echarts.verbose=true",))["echarts"]["verbose"]
        True
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    return config.with_overrides(_as_nested([parse_override(raw) for raw in raw_overrides]))


__all__ = [
    "ConfigOverride",
    "OverrideValue",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
