"""Turn one chart definition into a self-contained ``<figure>`` fragment.

The fragment loads ECharts, embeds the plugin-wide defaults as JSON and
carries a small browser runtime that resolves the chart configuration the
same way :func:`~markdown_echarts.domain.resolver.resolve_config` does,
re-rendering on container resize and on color-scheme change.

Chart definitions come in two forms:

* literal: a JSON object. It is parsed and resolved here under both color
  schemes, so structural mistakes are reported at build time.
* script: JavaScript declaring ``const config = ...``. It is embedded as-is
  and evaluated by the browser with ``container``, ``containerWidth``,
  ``containerHeight`` and ``isDarkMode`` in scope.
"""

from __future__ import annotations

import html
import logging
import re
from collections.abc import Callable, Mapping
from functools import lru_cache
from pathlib import Path
from string import Template
from typing import Any

import orjson

from markdown_echarts.adapters.config.settings import EchartsSettings
from markdown_echarts.application.render_loop import DEFAULT_DEBOUNCE_MILLIS
from markdown_echarts.domain.enums import ColorScheme
from markdown_echarts.domain.errors import UserConfigEvaluationError
from markdown_echarts.domain.resolver import resolve_config

from .identifiers import new_element_id

logger = logging.getLogger(__name__)

_TEMPLATE_FILE = Path(__file__).with_name("fragment_template.html")
_BLANK_RUN = re.compile(r"\n\s*\n")


@lru_cache(maxsize=1)
def _fragment_template() -> Template:
    return Template(_TEMPLATE_FILE.read_text(encoding="utf-8"))


def remove_empty_lines(text: str) -> str:
    r"""Drop carriage returns and collapse runs of blank lines.

    Examples:
        >>> remove_empty_lines("a\r\n\n   \nb\n")
        'a\nb\n'
        >>> remove_empty_lines("<pre>x</pre>")
        '<pre>x</pre>'
    """
    return _BLANK_RUN.sub("\n", text.replace("\r", ""))


def to_script_json(value: Any) -> str:
    r"""Serialise *value* as JSON that is safe inside a ``<script>`` element.

    Example:
        >>> to_script_json({"text": "</script>"})
        '{"text":"<\\/script>"}'
    """
    return orjson.dumps(value, default=_mapping_as_dict).decode("utf-8").replace("</", "<\\/")


def _mapping_as_dict(value: Any) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")


def parse_literal_definition(definition: str) -> dict[str, Any] | None:
    """Return the parsed JSON object, or ``None`` for a script definition.

    Raises:
        UserConfigEvaluationError: The body looks like a JSON object but is
            not valid JSON.

    Examples:
        >>> parse_literal_definition('{"xAxis": {"type": "category"}}')
        {'xAxis': {'type': 'category'}}
        >>> parse_literal_definition("const config = {};") is None
        True
    """
    if not definition.lstrip().startswith("{"):
        return None
    try:
        parsed = orjson.loads(definition)
    except orjson.JSONDecodeError as exc:
        raise UserConfigEvaluationError(f"chart definition is not valid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise UserConfigEvaluationError(f"chart definition must be a JSON object, got {type(parsed).__name__}")
    return parsed


class ChartRenderer:
    """Render chart definitions with one set of plugin settings.

    Each :meth:`render` call is independent: a broken chart yields its own
    fallback and never affects another chart.

    Example:
        >>> ids = iter(["echarts-c", "echarts-f"])
        >>> renderer = ChartRenderer(EchartsSettings(), id_factory=lambda: next(ids))
        >>> fragment = renderer.render('{"series": [{"type": "pie"}]}')
        >>> fragment.startswith('<figure id="echarts-f" class="echarts">')
        True
    """

    def __init__(self, settings: EchartsSettings, *, id_factory: Callable[[], str] = new_element_id) -> None:
        self._settings = settings
        self._id_factory = id_factory

    @property
    def settings(self) -> EchartsSettings:
        return self._settings

    def prepare(self, definition: str) -> str:
        """Build the fragment for *definition*; errors propagate."""
        literal = parse_literal_definition(definition)
        if literal is None:
            chart_code = definition
        else:
            for scheme in ColorScheme:
                resolve_config(self._settings.defaults, literal, scheme)
            chart_code = f"const config = {to_script_json(literal)};"
        container_id = self._id_factory()
        figure_id = self._id_factory()
        fragment = _fragment_template().substitute(
            figure_id=figure_id,
            container_id=container_id,
            script_url=html.escape(self._settings.script_url, quote=True),
            defaults_json=to_script_json(self._settings.defaults),
            chart_definition=chart_code,
            default_debounce_millis=f"{DEFAULT_DEBOUNCE_MILLIS:g}",
        )
        return remove_empty_lines(fragment)

    def render(self, definition: str) -> str:
        """Build the fragment, falling back to ``<pre>`` on failure.

        Raises:
            Exception: Whatever :meth:`prepare` raised, when
                ``throw_on_error`` is set.
        """
        if self._settings.verbose:
            logger.info("Transforming chart", extra={"definition_length": len(definition)})
        try:
            return self.prepare(definition)
        except Exception as exc:
            logger.error(
                "Failure rendering chart",
                extra={"definition": definition, "error": str(exc), "error_type": type(exc).__name__},
            )
            if self._settings.throw_on_error:
                raise
            return remove_empty_lines(f"<pre>{html.escape(definition)}</pre>")


__all__ = [
    "ChartRenderer",
    "parse_literal_definition",
    "remove_empty_lines",
    "to_script_json",
]
