"""Vertex records, colour packing and debug logging."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger("moteur")


@dataclass
class CustomVertex:
    """A position with a packed diffuse colour."""

    x: float
    y: float
    z: float
    color: int = 0xFFFFFFFF


def xrgb(r: int, g: int, b: int) -> int:
    """Pack an opaque 32-bit ARGB colour from 8-bit channels."""
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"colour channel out of range: {channel}")
    return 0xFF000000 | (r << 16) | (g << 8) | b


def debug_log(message: str | int) -> str:
    """Write one line to the debug log and return the text written."""
    if isinstance(message, bool) or not isinstance(message, (str, int)):
        raise TypeError(f"cannot log a {type(message).__name__}")
    text = f"{message}\n" if isinstance(message, str) else f"{message:d}\n"
    logger.debug(text.rstrip("\n"))
    return text