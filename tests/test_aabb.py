"""Unit tests for axis-aligned bounding boxes."""

import math

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


def unit_box():
    return AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))


class TestSurroundingBox:
    """Tests for box union."""

    def test_union_contains_both_and_is_minimal(self, rng):
        for _ in range(200):
            a_min = rng.random_vector(-10, 10)
            b_min = rng.random_vector(-10, 10)
            a = AABB(a_min, a_min + rng.random_vector(0, 5))
            b = AABB(b_min, b_min + rng.random_vector(0, 5))
            box = AABB.surrounding_box(a, b)
            assert box.contains(a)
            assert box.contains(b)
            for axis in range(3):
                assert box.minimum[axis] == min(a.minimum[axis], b.minimum[axis])
                assert box.maximum[axis] == max(a.maximum[axis], b.maximum[axis])

    def test_empty_is_identity(self):
        box = unit_box()
        union = AABB.surrounding_box(AABB.empty(), box)
        assert union.minimum == box.minimum
        assert union.maximum == box.maximum


class TestSlabHit:
    """Tests for the slab intersection test."""

    def test_hit_head_on(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert unit_box().hit(ray, 0.001, math.inf)

    def test_miss(self):
        ray = Ray(Vector3(5, 5, 5), Vector3(0, 0, -1))
        assert not unit_box().hit(ray, 0.001, math.inf)

    def test_pointing_away(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, 1))
        assert not unit_box().hit(ray, 0.001, math.inf)

    def test_window_before_box(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert not unit_box().hit(ray, 0.001, 3.0)

    def test_zero_direction_components(self):
        inside = Ray(Vector3(0.5, 0.5, 5), Vector3(0, 0, -1))
        outside = Ray(Vector3(2.0, 0.5, 5), Vector3(0, 0, -1))
        negative_zero = Ray(Vector3(0.5, 0.5, 5), Vector3(-0.0, -0.0, -1))
        assert unit_box().hit(inside, 0.001, math.inf)
        assert not unit_box().hit(outside, 0.001, math.inf)
        assert unit_box().hit(negative_zero, 0.001, math.inf)

    def test_origin_on_slab_boundary(self):
        # (min - origin) * inf is NaN here and must not reject the ray.
        ray = Ray(Vector3(1.0, 0.0, 5), Vector3(0, 0, -1))
        assert unit_box().hit(ray, 0.001, math.inf)
