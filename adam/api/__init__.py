"""Public geometry API contracts."""

from adam.api.geometry import Point, Rectangle, Size, Vector
from adam.api.logging import GeometryLoggingConfig, LoggerPort

__all__ = [
    "GeometryLoggingConfig",
    "LoggerPort",
    "Point",
    "Rectangle",
    "Size",
    "Vector",
]
