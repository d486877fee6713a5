"""Element identifiers for generated chart fragments."""

from __future__ import annotations

import secrets
import string
from typing import Final

ID_PREFIX: Final[str] = "echarts-"
ID_LENGTH: Final[int] = 12


def new_element_id() -> str:
    """Return a fresh ``echarts-`` id with 12 random lowercase letters.

    Example:
        >>> element_id = new_element_id()
        >>> element_id.startswith("echarts-"), len(element_id)
        (True, 20)
    """
    return ID_PREFIX + "".join(secrets.choice(string.ascii_lowercase) for _ in range(ID_LENGTH))


__all__ = ["ID_LENGTH", "ID_PREFIX", "new_element_id"]
