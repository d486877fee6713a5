"""Console script entry point with production wiring.

Wires production services from the composition layer before invoking the
CLI, so the adapters layer never imports the composition root directly.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Console script entry point with production services wired.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
