"""Geometry primitives for 2D games with pygame interop."""

from adam.api.geometry import Point, Rectangle, Size, Vector
from adam.runtime.errors import InvalidGeometryError

__all__ = ["InvalidGeometryError", "Point", "Rectangle", "Size", "Vector"]
