"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ChartError(Exception):
    """Base class for failures while producing or resolving a chart.

    The fragment renderer catches this family (and anything else raised for a
    single chart) to substitute the fallback presentation.
    """


class StructuralMergeError(ChartError, TypeError):
    """A configuration tree has a shape the merge rules cannot combine.

    Raised when a merge target or source is not a mapping, for example a
    chart definition whose top level is a list or a ``darkModeConfig`` that
    is a plain string. Treated as an input error; never recovered inside the
    resolver.

    Example:
        >>> err = StructuralMergeError("merge source must be a mapping, got list")
        >>> isinstance(err, TypeError)
        True
    """


class UserConfigEvaluationError(ChartError, ValueError):
    """The author-supplied chart definition could not be turned into a config.

    Example:
        >>> err = UserConfigEvaluationError("unexpected character at line 1")
        >>> str(err)
        'unexpected character at line 1'
        >>> isinstance(err, ValueError)
        True
    """


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent plugin configuration.

    Raised when the ``[echarts]`` configuration section cannot be turned into
    valid settings. Caught at the CLI boundary.

    Example:
        >>> str(ConfigurationError("echarts.defaults must be a table"))
        'echarts.defaults must be a table'
    """


__all__ = [
    "ChartError",
    "ConfigurationError",
    "StructuralMergeError",
    "UserConfigEvaluationError",
]
