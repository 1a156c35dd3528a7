"""
Unit tests for Rect, Point and Dimensions.
"""

import pygame
import pytest

from asesheet.errors import MissingRequiredField, TypeMismatch
from asesheet.geometry import Dimensions, Point, Rect


class TestRect:

    def test_from_mapping(self):
        rect = Rect.from_mapping({"x": 1, "y": 2, "w": 3, "h": 4})
        assert rect == Rect(1, 2, 3, 4)
        assert rect.to_mapping() == {"x": 1, "y": 2, "w": 3, "h": 4}

    def test_missing_field_reports_path(self):
        with pytest.raises(MissingRequiredField) as excinfo:
            Rect.from_mapping({"x": 1, "y": 2, "w": 3}, "frames[0].frame")
        assert excinfo.value.path == "frames[0].frame.h"

    @pytest.mark.parametrize("bad", [-1, 1.5, "3", True, None, 2**32])
    def test_rejects_non_u32(self, bad):
        with pytest.raises(TypeMismatch) as excinfo:
            Rect.from_mapping({"x": bad, "y": 0, "w": 1, "h": 1}, "r")
        assert excinfo.value.path == "r.x"
        assert excinfo.value.value == bad

    def test_rejects_non_object(self):
        with pytest.raises(TypeMismatch):
            Rect.from_mapping([1, 2, 3, 4])

    def test_ignores_unknown_keys(self):
        assert Rect.from_mapping({"x": 0, "y": 0, "w": 1, "h": 1, "z": 9}) == Rect(0, 0, 1, 1)

    def test_to_rect(self):
        rect = Rect(5, 6, 7, 8).to_rect()
        assert isinstance(rect, pygame.Rect)
        assert (rect.x, rect.y, rect.w, rect.h) == (5, 6, 7, 8)

    def test_scaled(self):
        assert Rect(1, 2, 3, 4).scaled(2) == Rect(2, 4, 6, 8)
        assert Rect(1, 2, 3, 4).scaled(1) == Rect(1, 2, 3, 4)


class TestPointAndDimensions:

    def test_point(self):
        point = Point.from_mapping({"x": 4, "y": 8})
        assert point == Point(4, 8)
        assert point.to_mapping() == {"x": 4, "y": 8}

    def test_dimensions(self):
        size = Dimensions.from_mapping({"w": 39, "h": 20})
        assert size == Dimensions(39, 20)
        assert size.to_mapping() == {"w": 39, "h": 20}

    def test_dimensions_missing_height(self):
        with pytest.raises(MissingRequiredField) as excinfo:
            Dimensions.from_mapping({"w": 39}, "meta.size")
        assert excinfo.value.path == "meta.size.h"
