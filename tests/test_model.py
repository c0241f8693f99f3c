"""Tests for the link data model."""

from __future__ import annotations

import math

import pytest

from link_path.model import LineType, Point, resolve_line_type


class TestResolveLineType:
    def test_member_passes_through(self):
        assert resolve_line_type(LineType.CURVE_FULL) is LineType.CURVE_FULL

    def test_exact_name(self):
        assert resolve_line_type("CURVE_SMOOTH") is LineType.CURVE_SMOOTH

    @pytest.mark.parametrize("value", ["Curve_Smooth", "curve_full", " STRAIGHT", None, 1.5])
    def test_fallback_is_straight(self, value):
        assert resolve_line_type(value) is LineType.STRAIGHT

    def test_values_are_names(self):
        for member in LineType:
            assert member.value == member.name


class TestPointCoerce:
    def test_point_is_returned_unchanged(self):
        p = Point(1.0, 2.0)
        assert Point.coerce(p) is p

    def test_mapping(self):
        assert Point.coerce({"x": 3, "y": -4}) == Point(3.0, -4.0)

    def test_tuple(self):
        assert Point.coerce((5, 6)) == Point(5.0, 6.0)

    def test_none_is_undefined(self):
        p = Point.coerce(None)
        assert math.isnan(p.x) and math.isnan(p.y)

    def test_mapping_missing_key_is_undefined(self):
        p = Point.coerce({"x": 1})
        assert p.x == 1.0
        assert math.isnan(p.y)

    def test_point_is_frozen(self):
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 5.0  # type: ignore[misc]

    def test_wrong_length_sequence(self):
        with pytest.raises(ValueError, match="length 3"):
            Point.coerce((1, 2, 3))

    @pytest.mark.parametrize("value", [5, "1,2", object()])
    def test_unsupported_values(self, value):
        with pytest.raises(ValueError, match="Cannot interpret"):
            Point.coerce(value)
