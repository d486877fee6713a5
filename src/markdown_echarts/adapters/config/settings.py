"""Plugin settings model and loader.

``EchartsSettings`` is built once from the ``[echarts]`` configuration
section and handed explicitly to every renderer; nothing reads it from a
module-level global.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Final

import orjson
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator

from markdown_echarts.domain.errors import ConfigurationError
from markdown_echarts.domain.merge import copy_tree

DEFAULT_SCRIPT_URL: Final[str] = "https://cdn.jsdelivr.net/npm/echarts/dist/echarts.min.js"
SECTION: Final[str] = "echarts"


class EchartsSettings(BaseModel):
    """Validated, immutable plugin-wide options.

    Attributes:
        script_url: Where the generated fragment loads ECharts from.
        throw_on_error: Re-raise chart failures instead of emitting a ``<pre>``
            fallback.
        verbose: Log every chart transformation at info level.
        defaults: Configuration tree layered under every chart, optionally with
            ``darkModeConfig`` and per-field ``series`` defaults.

    Example:
        >>> settings = EchartsSettings(defaults={"title": {"left": "center"}})
        >>> settings.throw_on_error
        False
        >>> settings.script_url.endswith("echarts.min.js")
        True
    """

    model_config = ConfigDict(frozen=True)

    script_url: str = DEFAULT_SCRIPT_URL
    throw_on_error: bool = False
    verbose: bool = False
    defaults: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("script_url", mode="before")
    @classmethod
    def _blank_url_means_default(cls, v: Any) -> Any:
        """Treat an empty ``script_url`` as "not configured".

        Examples:
            >>> EchartsSettings._blank_url_means_default("  ")
            'https://cdn.jsdelivr.net/npm/echarts/dist/echarts.min.js'
            >>> EchartsSettings._blank_url_means_default("/static/echarts.js")
            '/static/echarts.js'
        """
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_SCRIPT_URL
        return v.strip() if isinstance(v, str) else v

    @field_validator("defaults", mode="before")
    @classmethod
    def _parse_json_defaults(cls, v: Any) -> Any:
        """Accept ``defaults`` as a JSON object string (environment variables).

        Examples:
            >>> EchartsSettings._parse_json_defaults('{"color": ["#5470c6"]}')
            {'color': ['#5470c6']}
            >>> EchartsSettings._parse_json_defaults("")
            {}
        """
        if v is None:
            return {}
        if isinstance(v, (str, bytes)):
            if not v.strip():
                return {}
            try:
                return orjson.loads(v)
            except orjson.JSONDecodeError as exc:
                raise ValueError(f"defaults is not valid JSON: {exc}") from exc
        return v

    @field_validator("defaults", mode="after")
    @classmethod
    def _freeze_defaults(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return freeze_tree(v)

    @field_serializer("defaults")
    def _thaw_defaults(self, v: Mapping[str, Any]) -> dict[str, Any]:
        return copy_tree(v)  # type: ignore[return-value]


def freeze_tree(value: Any) -> Any:
    """Return a read-only copy of a configuration tree.

    Mappings become ``MappingProxyType`` views over fresh dicts and lists
    become tuples; the input is never shared.

    Examples:
        >>> frozen = freeze_tree({"color": ["#5470c6"], "title": {"left": "center"}})
        >>> frozen["color"]
        ('#5470c6',)
        >>> frozen["title"]["left"] = "right"
        Traceback (most recent call last):
        ...
        TypeError: 'mappingproxy' object does not support item assignment
    """
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_tree(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_tree(item) for item in value)
    return value


def load_echarts_settings_from_dict(config_dict: Mapping[str, Any]) -> EchartsSettings:
    """Build :class:`EchartsSettings` from the ``[echarts]`` section.

    A missing section yields the built-in defaults.

    Args:
        config_dict: Whole configuration mapping, typically ``Config.as_dict()``.

    Raises:
        ConfigurationError: When the section is not a table or a value fails
            validation.

    Examples:
        >>> settings = load_echarts_settings_from_dict({"echarts": {"verbose": True}})
        >>> settings.verbose
        True
        >>> dict(load_echarts_settings_from_dict({}).defaults)
        {}
        >>> load_echarts_settings_from_dict({"echarts": {"defaults": "[1]"}})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        markdown_echarts.domain.errors.ConfigurationError: Invalid [echarts] configuration: defaults: Input should be a valid dictionary
    """
    section: Any = config_dict.get(SECTION, {})
    if section is None:
        section = {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[{SECTION}] must be a table, got {type(section).__name__}")
    try:
        return EchartsSettings.model_validate(dict(section))
    except ValidationError as exc:
        details = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"Invalid [{SECTION}] configuration: {details}") from exc


__all__ = [
    "DEFAULT_SCRIPT_URL",
    "EchartsSettings",
    "freeze_tree",
    "load_echarts_settings_from_dict",
]
