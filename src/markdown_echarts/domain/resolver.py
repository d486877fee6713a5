"""Chart configuration resolution.

Combines the plugin-wide defaults, an optional dark-mode layer and a chart's
own configuration into the option object handed to ECharts. Resolution is
recomputed on every call (initial render and each re-render) and never
mutates its inputs; identical inputs always yield equal results.

Contents:
    * :func:`resolve_config` - defaults + user config + color scheme -> option.
    * :func:`split_render_options` - strip the renderer-only keys into a frame.
    * :class:`ChartFrame` - what the drawing consumer receives per render.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final

from .enums import ColorScheme, NodeKind
from .merge import ConfigTree, classify, copy_tree, deep_merge, merge_value

DARK_MODE_KEY: Final[str] = "darkModeConfig"
SERIES_KEY: Final[str] = "series"
RENDER_OPTIONS_KEY: Final[str] = "renderOptions"
FIGCAPTION_KEY: Final[str] = "figcaption"


def _effective_layers(
    defaults: Mapping[str, Any], user_config: Mapping[str, Any], color_scheme: ColorScheme
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Copy both trees and apply their dark-mode layers when appropriate.

    The chart's own dark layer only applies when the defaults carry one too.
    """
    effective_defaults: dict[str, Any] = deep_merge({}, defaults)  # type: ignore[assignment]
    effective_user: dict[str, Any] = deep_merge({}, user_config)  # type: ignore[assignment]
    if color_scheme is ColorScheme.DARK and defaults.get(DARK_MODE_KEY) is not None:
        deep_merge(effective_defaults, defaults[DARK_MODE_KEY])
        deep_merge(effective_user, user_config.get(DARK_MODE_KEY))
    effective_defaults.pop(DARK_MODE_KEY, None)
    effective_user.pop(DARK_MODE_KEY, None)
    return effective_defaults, effective_user


def _layer_series_defaults(series_defaults: ConfigTree, series: ConfigTree) -> None:
    """Merge each series-field default into every entry of *series* in place.

    Every default field applies to every entry regardless of its ``type``.
    """
    if classify(series_defaults) is not NodeKind.MAPPING or classify(series) is not NodeKind.SEQUENCE:
        return
    for field_name, field_default in series_defaults.items():
        for entry in series:
            if classify(entry) is not NodeKind.MAPPING:
                continue
            entry[field_name] = merge_value(field_default, entry.get(field_name))


def resolve_config(
    defaults: Mapping[str, Any],
    user_config: Mapping[str, Any],
    color_scheme: ColorScheme,
) -> dict[str, Any]:
    """Resolve the final chart option for the current color scheme.

    Steps:
        1. In dark mode, when the defaults carry ``darkModeConfig``, layer it
           over the defaults and the chart's own ``darkModeConfig`` over the
           chart config.
        2. Drop ``darkModeConfig`` from both trees.
        3. Merge every field of the defaults' ``series`` mapping into each
           entry of the chart's ``series`` list (the chart's values win).
        4. Drop ``series`` from the defaults so the final merge cannot replace
           the chart's per-entry list.
        5. Merge the chart config over the defaults.

    Args:
        defaults: Plugin-wide defaults, optionally with ``darkModeConfig`` and a
            ``series`` mapping of per-field series defaults.
        user_config: The chart's configuration.
        color_scheme: Scheme sampled from the viewing environment.

    Returns:
        A fresh dictionary without ``darkModeConfig``.

    Raises:
        StructuralMergeError: If a tree that must be a mapping is not one.

    Example:
        >>> defaults = {"series": {"label": {"show": True}}}
        >>> chart = {"series": [{"type": "line", "label": {"color": "red"}}]}
        >>> resolve_config(defaults, chart, ColorScheme.LIGHT)
        {'series': [{'type': 'line', 'label': {'show': True, 'color': 'red'}}]}
    """
    effective_defaults, effective_user = _effective_layers(defaults, user_config, color_scheme)
    _layer_series_defaults(effective_defaults.get(SERIES_KEY), effective_user.get(SERIES_KEY))
    effective_defaults.pop(SERIES_KEY, None)
    return deep_merge(effective_defaults, effective_user)  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class ChartFrame:
    """One render's worth of input for the drawing consumer.

    Attributes:
        option: Resolved configuration without ``figcaption``/``renderOptions``.
        render_options: Renderer settings (``renderer``, ``debounceMillis``...).
        figcaption: Caption markup to show under the chart, if any.
        series_types: ``type`` of each series entry, used as container classes.
    """

    option: dict[str, Any]
    render_options: dict[str, Any] = field(default_factory=dict)
    figcaption: str | None = None
    series_types: tuple[str, ...] = ()


def split_render_options(resolved: Mapping[str, Any]) -> ChartFrame:
    """Separate the renderer-only keys from a resolved configuration.

    Example:
        >>> frame = split_render_options(
        ...     {"figcaption": "Sales", "renderOptions": {"renderer": "svg"}, "series": [{"type": "bar"}]}
        ... )
        >>> frame.figcaption, frame.render_options, frame.series_types
        ('Sales', {'renderer': 'svg'}, ('bar',))
        >>> frame.option
        {'series': [{'type': 'bar'}]}
    """
    option: dict[str, Any] = copy_tree(resolved)
    figcaption = option.pop(FIGCAPTION_KEY, None)
    render_options = option.pop(RENDER_OPTIONS_KEY, None)
    series = option.get(SERIES_KEY)
    series_types: tuple[str, ...] = ()
    if classify(series) is NodeKind.SEQUENCE:
        series_types = tuple(
            str(entry["type"]) for entry in series if classify(entry) is NodeKind.MAPPING and entry.get("type")
        )
    return ChartFrame(
        option=option,
        render_options=dict(render_options) if classify(render_options) is NodeKind.MAPPING else {},
        figcaption=str(figcaption) if figcaption else None,
        series_types=series_types,
    )


__all__ = [
    "DARK_MODE_KEY",
    "FIGCAPTION_KEY",
    "RENDER_OPTIONS_KEY",
    "SERIES_KEY",
    "ChartFrame",
    "resolve_config",
    "split_render_options",
]
