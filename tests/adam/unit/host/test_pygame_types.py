from __future__ import annotations

import logging
import math

import pygame
import pytest

from adam.api.geometry import Point, Rectangle, Size
from adam.host.pygame_types import (
    PYGAME_INT_MAX,
    PYGAME_INT_MIN,
    point_to_pygame,
    rect_to_pygame,
)
from adam.runtime.errors import InvalidGeometryError


def test_rect_to_pygame_integral_values_roundtrip() -> None:
    rect = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0).to_pygame()
    assert isinstance(rect, pygame.Rect)
    assert rect == pygame.Rect(0, 0, 10, 10)


def test_rect_to_pygame_preserves_all_four_fields() -> None:
    rect = rect_to_pygame(Rectangle(-7.0, 12.0, 300.0, 45.0))
    assert (rect.x, rect.y, rect.w, rect.h) == (-7, 12, 300, 45)


def test_rect_to_pygame_truncates_toward_zero() -> None:
    rect = Rectangle(3.9, -3.9, 10.99, 0.5).to_pygame()
    assert (rect.x, rect.y, rect.w, rect.h) == (3, -3, 10, 0)


def test_rect_to_pygame_accepts_zero_extent() -> None:
    rect = Rectangle.with_size(Size(0.0, 0.0)).to_pygame()
    assert rect == pygame.Rect(0, 0, 0, 0)


def test_rect_to_pygame_rejects_negative_width() -> None:
    with pytest.raises(InvalidGeometryError):
        Rectangle(0.0, 0.0, -1.0, 10.0).to_pygame()


def test_rect_to_pygame_rejects_negative_height() -> None:
    with pytest.raises(InvalidGeometryError):
        rect_to_pygame(Rectangle(0.0, 0.0, 10.0, -0.25))


def test_rect_to_pygame_rejects_nan_extent() -> None:
    with pytest.raises(InvalidGeometryError):
        Rectangle(0.0, 0.0, math.nan, 10.0).to_pygame()


def test_invalid_geometry_is_an_assertion_failure() -> None:
    with pytest.raises(AssertionError):
        Rectangle(0.0, 0.0, -5.0, -5.0).to_pygame()


def test_negative_extent_is_logged_before_raising(caplog) -> None:
    caplog.set_level(logging.ERROR, logger="adam.runtime.errors")
    with pytest.raises(InvalidGeometryError):
        Rectangle(1.0, 2.0, -3.0, 4.0).to_pygame()
    records = [record for record in caplog.records if record.name == "adam.runtime.errors"]
    assert len(records) == 1
    assert records[0].width == -3.0
    assert records[0].height == 4.0


def test_point_to_pygame_truncates_toward_zero() -> None:
    assert Point(3.9, -3.9).to_pygame() == (3, -3)
    assert point_to_pygame(Point(-0.5, 200.0)) == (0, 200)


def test_centered_rect_converts_to_expected_pygame_rect() -> None:
    centered = Rectangle(0.0, 0.0, 200.0, 100.0).centered_at(Point(500.0, 500.0))
    assert centered.to_pygame() == pygame.Rect(400, 450, 200, 100)


def test_rect_to_pygame_saturates_oversized_extent() -> None:
    rect = Rectangle(0.0, 0.0, 3e9, 10.0).to_pygame()
    assert rect.w == PYGAME_INT_MAX
    assert rect.h == 10
    assert rect.w >= 0


def test_rect_to_pygame_saturates_out_of_range_origin() -> None:
    rect = Rectangle(-5e9, 5e9, 1.0, 2.0).to_pygame()
    assert (rect.x, rect.y, rect.w, rect.h) == (PYGAME_INT_MIN, PYGAME_INT_MAX, 1, 2)


def test_rect_to_pygame_keeps_largest_representable_extent() -> None:
    rect = rect_to_pygame(Rectangle(0.0, 0.0, float(PYGAME_INT_MAX), float(PYGAME_INT_MAX)))
    assert (rect.w, rect.h) == (PYGAME_INT_MAX, PYGAME_INT_MAX)


def test_point_to_pygame_saturates_out_of_range_coordinates() -> None:
    assert Point(1e12, -1e12).to_pygame() == (PYGAME_INT_MAX, PYGAME_INT_MIN)
