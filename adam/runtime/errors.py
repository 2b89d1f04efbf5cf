"""Geometry contract violations."""

from __future__ import annotations

from adam.api.logging import LoggerPort
from adam.runtime.logging import get_logger

_LOG = get_logger(__name__)


class InvalidGeometryError(AssertionError):
    """Raised when a value breaks a geometry precondition.

    This marks a caller bug rather than a recoverable condition, so it derives
    from AssertionError and is raised explicitly to survive `python -O`.
    """


def require_non_negative_extent(
    width: float,
    height: float,
    *,
    logger: LoggerPort = _LOG,
) -> None:
    """Fail loudly unless both extents are non-negative (NaN fails too)."""
    if width >= 0.0 and height >= 0.0:
        return
    logger.error(
        "geometry.negative_extent width=%s height=%s",
        width,
        height,
        extra={"width": width, "height": height},
    )
    raise InvalidGeometryError(f"extent must be non-negative, got width={width!r} height={height!r}")


__all__ = ["InvalidGeometryError", "require_non_negative_extent"]
