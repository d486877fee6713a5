"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Layered configuration, overrides, plugin settings, display
    * :mod:`.logging` - lib_log_rich setup
    * :mod:`.markup` - Chart fragment generation
    * :mod:`.markdown` - markdown-it-py plugin
    * :mod:`.runtime` - Host event sources for the re-render loop
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - rich-click command line
"""

from __future__ import annotations

__all__: list[str] = []
