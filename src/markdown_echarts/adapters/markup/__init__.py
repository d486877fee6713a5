"""Markup adapter - chart fragment generation.

Contents:
    * :mod:`.fragment` - ``ChartRenderer`` and the fragment helpers
    * :mod:`.identifiers` - Random element ids
"""

from __future__ import annotations

from .fragment import ChartRenderer, parse_literal_definition, remove_empty_lines, to_script_json
from .identifiers import new_element_id

__all__ = [
    "ChartRenderer",
    "new_element_id",
    "parse_literal_definition",
    "remove_empty_lines",
    "to_script_json",
]
