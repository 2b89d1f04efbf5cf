"""Floating-point 2D geometry value types with pygame conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame


@dataclass(frozen=True, slots=True)
class Point:
    """A coordinate point with x and y values."""

    x: float
    y: float

    def to_pygame(self) -> tuple[int, int]:
        """Return a pygame-compatible integer point equal to this point."""
        from adam.host.pygame_types import point_to_pygame

        return point_to_pygame(self)


@dataclass(frozen=True, slots=True)
class Size:
    """A width/height pair."""

    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Vector:
    """A displacement with delta x and delta y values."""

    dx: float
    dy: float


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle anchored at its top-left origin.

    Every operation returns a new value. Extents may be negative while a
    rectangle is being computed; they are validated only when converted to a
    host graphics type.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def new(cls, origin: Point, size: Size) -> Rectangle:
        """Create a rectangle starting from `origin` with extent `size`."""
        return cls(x=origin.x, y=origin.y, width=size.width, height=size.height)

    @classmethod
    def with_size(cls, size: Size) -> Rectangle:
        """Return a rectangle of the given size with a (0, 0) origin."""
        return cls(x=0.0, y=0.0, width=size.width, height=size.height)

    @classmethod
    def from_xywh(cls, x: float, y: float, w: float, h: float) -> Rectangle:
        """Create a rectangle from the short `w`/`h` field convention."""
        return cls(x=x, y=y, width=w, height=h)

    @property
    def w(self) -> float:
        return self.width

    @property
    def h(self) -> float:
        return self.height

    def center(self) -> Point:
        """Return the center point."""
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def size(self) -> Size:
        """Return the extent."""
        return Size(self.width, self.height)

    def centered_at(self, center: Point | tuple[float, float]) -> Rectangle:
        """Return a copy with the same extent whose center is `center`."""
        cx, cy = _coords(center)
        return Rectangle(
            x=cx - self.width / 2.0,
            y=cy - self.height / 2.0,
            width=self.width,
            height=self.height,
        )

    def contains(self, other: Rectangle) -> bool:
        """Return whether `other` lies completely inside, edges included."""
        xmin = other.x
        xmax = xmin + other.width
        ymin = other.y
        ymax = ymin + other.height
        right = self.x + self.width
        bottom = self.y + self.height
        return (
            self.x <= xmin <= right
            and self.x <= xmax <= right
            and self.y <= ymin <= bottom
            and self.y <= ymax <= bottom
        )

    def overlaps(self, other: Rectangle) -> bool:
        """Return whether the two rectangles share a positive-area region.

        Rectangles that only touch along an edge do not overlap.
        """
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def moved_inside(self, parent: Rectangle) -> Rectangle | None:
        """Return a copy translated just enough to fit inside `parent`.

        Returns None when the rectangle is wider or taller than `parent`, since
        no translation can make it fit. Each axis is clamped independently and
        the extent never changes.
        """
        if self.width > parent.width or self.height > parent.height:
            return None
        return Rectangle(
            x=_clamp_axis(self.x, self.width, parent.x, parent.width),
            y=_clamp_axis(self.y, self.height, parent.y, parent.height),
            width=self.width,
            height=self.height,
        )

    def to_pygame(self) -> pygame.Rect:
        """Return a pygame rectangle with every field truncated toward zero.

        Raises InvalidGeometryError when width or height is negative.
        """
        from adam.host.pygame_types import rect_to_pygame

        return rect_to_pygame(self)


def _clamp_axis(origin: float, extent: float, parent_origin: float, parent_extent: float) -> float:
    if origin < parent_origin:
        return parent_origin
    if origin + extent >= parent_origin + parent_extent:
        return parent_origin + parent_extent - extent
    return origin


def _coords(value: Point | tuple[float, float]) -> tuple[float, float]:
    if isinstance(value, Point):
        return value.x, value.y
    x, y = value
    return x, y


__all__ = ["Point", "Rectangle", "Size", "Vector"]
