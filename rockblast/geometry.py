"""Axis-aligned box helpers.

Anything with ``x``, ``y``, ``width`` and ``height`` attributes is a box.
pygame.Rect truncates to ints, so collision uses these float helpers.
"""

from __future__ import annotations

from typing import Protocol, Tuple


class Box(Protocol):
    x: float
    y: float
    width: float
    height: float


def overlaps(a: Box, b: Box) -> bool:
    """Strict overlap test; boxes that only touch edges do not collide."""
    return a.x < b.x + b.width and a.x + a.width > b.x and a.y < b.y + b.height and a.y + a.height > b.y


def center(a: Box) -> Tuple[float, float]:
    return a.x + a.width / 2, a.y + a.height / 2


__all__ = ["Box", "overlaps", "center"]
