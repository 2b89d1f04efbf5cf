"""Conversion of geometry values into pygame native types."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from adam.api.geometry import Point, Rectangle
from adam.runtime.errors import require_non_negative_extent

# pygame stores rect fields as C ints and wraps anything wider.
PYGAME_INT_MIN = -(2**31)
PYGAME_INT_MAX = 2**31 - 1


def rect_to_pygame(rect: Rectangle) -> pygame.Rect:
    """Truncate each field toward zero into a pygame.Rect.

    Negative extents raise InvalidGeometryError before any conversion. Values
    outside pygame's int range saturate at its bounds, so extents never wrap.
    """
    require_non_negative_extent(rect.width, rect.height)
    return pygame.Rect(
        _saturate(int(rect.x)),
        _saturate(int(rect.y)),
        _saturate(int(rect.width), low=0),
        _saturate(int(rect.height), low=0),
    )


def point_to_pygame(point: Point) -> tuple[int, int]:
    """Truncate both coordinates toward zero into a pygame position pair."""
    return _saturate(int(point.x)), _saturate(int(point.y))


def _saturate(value: int, *, low: int = PYGAME_INT_MIN) -> int:
    return max(low, min(PYGAME_INT_MAX, value))


__all__ = ["PYGAME_INT_MAX", "PYGAME_INT_MIN", "point_to_pygame", "rect_to_pygame"]
