#!/usr/bin/env python3
"""Walk through the rectangle helpers and their pygame conversion."""

from __future__ import annotations

import argparse

from adam.api.geometry import Point, Rectangle, Size
from adam.runtime.logging import get_logger, setup_logging, shutdown_logging

_LOG = get_logger("adam.demo")


def main() -> int:
    parser = argparse.ArgumentParser(description="Print rectangle helper results.")
    parser.add_argument("--width", type=float, default=200.0)
    parser.add_argument("--height", type=float, default=100.0)
    parser.add_argument("--center", type=float, nargs=2, default=(500.0, 500.0), metavar=("X", "Y"))
    args = parser.parse_args()

    setup_logging()
    try:
        rect = Rectangle(x=0.0, y=0.0, width=args.width, height=args.height)
        centered = rect.centered_at(Point(*args.center))
        _LOG.info("Simple rectangle: %r", rect)
        _LOG.info("Center of that rectangle: %r", rect.center())
        _LOG.info("Centered version of that rectangle: %r", centered)
        _LOG.info("pygame instance of that rectangle: %r", centered.to_pygame())

        square = Rectangle.with_size(Size(100.0, 100.0))
        _LOG.info("Square rectangle: %r", square)
        _LOG.info("Rectangle moved inside square: %r", rect.moved_inside(square))
    finally:
        shutdown_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
