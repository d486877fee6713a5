"""Configuration adapter - layered loading, overrides, settings, and display.

Contents:
    * :mod:`.loader` - Cached lib_layered_config loading of ``defaultconfig.toml``
    * :mod:`.overrides` - CLI ``--set`` parsing and application
    * :mod:`.settings` - ``EchartsSettings`` model built from ``[echarts]``
    * :mod:`.display` - Human/JSON configuration display
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import EchartsSettings, load_echarts_settings_from_dict

__all__ = [
    "EchartsSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_echarts_settings_from_dict",
]
