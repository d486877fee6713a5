"""Type-safe domain enums for color schemes, tree nodes, and output formats."""

from __future__ import annotations

from enum import Enum


class ColorScheme(str, Enum):
    """Color scheme reported by the viewing environment.

    Sampled afresh every time a chart configuration is resolved; never
    persisted. Inherits from str so CLI choices compare directly.

    Attributes:
        LIGHT: Light appearance; no dark-mode layer is applied.
        DARK: Dark appearance; ``darkModeConfig`` layers are applied.

    Example:
        >>> ColorScheme.DARK.value
        'dark'
        >>> ColorScheme.LIGHT == "light"
        True
    """

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_dark_flag(cls, is_dark: bool) -> ColorScheme:
        """Map a ``prefers-color-scheme: dark`` match result to a scheme.

        Example:
            >>> ColorScheme.from_dark_flag(True)
            <ColorScheme.DARK: 'dark'>
        """
        return cls.DARK if is_dark else cls.LIGHT


class NodeKind(Enum):
    """Variant tag of a configuration tree node.

    The merge algorithm dispatches on this tag instead of sniffing types at
    every call site.

    Example:
        >>> NodeKind.MAPPING.name
        'MAPPING'
    """

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "ColorScheme",
    "NodeKind",
    "OutputFormat",
]
