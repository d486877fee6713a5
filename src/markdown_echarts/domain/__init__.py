"""Domain layer - pure configuration logic with no I/O or framework dependencies.

Contents:
    * :mod:`.merge` - Deep merge of configuration trees
    * :mod:`.resolver` - Color-scheme and series-aware chart config resolution
    * :mod:`.enums` - Domain enumerations (ColorScheme, NodeKind, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import ColorScheme, NodeKind, OutputFormat
from .errors import ChartError, ConfigurationError, StructuralMergeError, UserConfigEvaluationError
from .merge import classify, copy_tree, deep_merge, merge_value
from .resolver import ChartFrame, resolve_config, split_render_options

__all__ = [
    # Merge
    "classify",
    "copy_tree",
    "deep_merge",
    "merge_value",
    # Resolver
    "ChartFrame",
    "resolve_config",
    "split_render_options",
    # Enums
    "ColorScheme",
    "NodeKind",
    "OutputFormat",
    # Errors
    "ChartError",
    "ConfigurationError",
    "StructuralMergeError",
    "UserConfigEvaluationError",
]
