"""Tests for the 2D geometry primitives."""

import math

import pytest

from basesite.geometry import Rect, Vec2


class TestVec2:
    def test_arithmetic(self):
        assert Vec2(1, 2) + Vec2(3, 4) == Vec2(4, 6)
        assert Vec2(1, 2) - Vec2(3, 4) == Vec2(-2, -2)
        assert Vec2(5, 5) / 2.0 == Vec2(2.5, 2.5)

    def test_floor_and_ceil(self):
        assert Vec2(-4.5, 4.5).floor() == Vec2(-5.0, 4.0)
        assert Vec2(-4.5, 4.5).ceil() == Vec2(-4.0, 5.0)
        assert Vec2(3.0, -2.0).floor() == Vec2(3.0, -2.0)

    def test_distance(self):
        assert Vec2(0, 0).distance(Vec2(3, 4)) == pytest.approx(5.0)
        assert Vec2(0, 0).distance_squared(Vec2(3, 4)) == pytest.approx(25.0)

    def test_from_xyz_drops_height(self):
        assert Vec2.from_xyz(1.5, 2.5, 11.0) == Vec2(1.5, 2.5)

    def test_unpacks(self):
        x, y = Vec2(7.0, 8.0)
        assert (x, y) == (7.0, 8.0)

    def test_hashable(self):
        assert len({Vec2(1, 1), Vec2(1, 1), Vec2(2, 1)}) == 2


class TestRect:
    def test_from_center(self):
        r = Rect.from_center(Vec2(0, 0), Vec2(2, 1))
        assert r.min == Vec2(-1.0, -0.5)
        assert r.max == Vec2(1.0, 0.5)
        assert r.center() == Vec2(0, 0)
        assert r.size() == Vec2(2, 1)

    def test_from_center_rejects_negative_size(self):
        with pytest.raises(ValueError):
            Rect.from_center(Vec2(0, 0), Vec2(-1, 1))

    def test_from_corners_normalises(self):
        r = Rect.from_corners(Vec2(4, -1), Vec2(-2, 3))
        assert r.min == Vec2(-2, -1)
        assert r.max == Vec2(4, 3)

    def test_bounding_points(self):
        r = Rect.bounding_points([Vec2(1, 2), Vec2(-3, 5), Vec2(0, 0)])
        assert r == Rect(Vec2(-3, 0), Vec2(1, 5))

    def test_bounding_single_point_has_zero_size(self):
        r = Rect.bounding_points([Vec2(2, 2)])
        assert r.size() == Vec2(0, 0)

    def test_bounding_no_points(self):
        assert Rect.bounding_points([]) is None

    def test_contains_is_inclusive(self):
        r = Rect(Vec2(0, 0), Vec2(2, 2))
        assert r.contains(Vec2(0, 0))
        assert r.contains(Vec2(2, 2))
        assert not r.contains(Vec2(2.01, 1))

    def test_is_empty(self):
        assert not Rect(Vec2(0, 0), Vec2(0, 0)).is_empty()
        assert Rect(Vec2(1, 0), Vec2(0, 1)).is_empty()

    def test_overlaps(self):
        a = Rect(Vec2(0, 0), Vec2(2, 2))
        assert a.overlaps(Rect(Vec2(1, 1), Vec2(3, 3)))
        assert not a.overlaps(Rect(Vec2(2, 0), Vec2(3, 2)))  # touching edge


class TestMinDistance:
    def test_separated_on_both_axes(self):
        a = Rect(Vec2(0, 0), Vec2(1, 1))
        b = Rect(Vec2(4, 5), Vec2(6, 6))
        assert a.min_distance_squared(b) == pytest.approx(25.0)
        assert b.min_distance_squared(a) == pytest.approx(25.0)
        assert a.min_distance(b) == pytest.approx(5.0)

    def test_separated_on_one_axis(self):
        a = Rect(Vec2(0, 0), Vec2(1, 1))
        b = Rect(Vec2(0.5, 3), Vec2(2, 4))
        assert a.min_distance_squared(b) == pytest.approx(4.0)

    def test_overlapping_is_zero(self):
        a = Rect(Vec2(0, 0), Vec2(2, 2))
        b = Rect(Vec2(1, 1), Vec2(3, 3))
        assert a.min_distance_squared(b) == 0.0

    def test_touching_is_zero(self):
        a = Rect(Vec2(0, 0), Vec2(1, 1))
        b = Rect(Vec2(1, 1), Vec2(2, 2))
        assert a.min_distance_squared(b) == 0.0

    def test_contained_is_zero(self):
        outer = Rect(Vec2(-5, -5), Vec2(5, 5))
        inner = Rect(Vec2(-1, -1), Vec2(1, 1))
        assert outer.min_distance_squared(inner) == 0.0
        assert math.isclose(inner.min_distance(outer), 0.0)
