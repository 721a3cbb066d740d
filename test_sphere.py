# -*- coding: utf-8 -*-
from cullkit.math import Affine3, Quat
from cullkit.primitives import Aabb, Sphere


def test_intersects_obb_separated_and_overlapping():
    sphere = Sphere((0, 0, 0), 1.0)
    identity = Affine3.identity()
    assert not sphere.intersects_obb(Aabb((3, 0, 0), (1, 1, 1)), identity)
    assert sphere.intersects_obb(Aabb((3, 0, 0), (2.5, 1, 1)), identity)


def test_intersects_obb_touching_counts_as_outside():
    sphere = Sphere((0, 0, 0), 1.0)
    identity = Affine3.identity()
    # расстояние 3 == радиус 1 + полуширина 2
    assert not sphere.intersects_obb(Aabb((3, 0, 0), (2, 1, 1)), identity)
    assert sphere.intersects_obb(Aabb((3, 0, 0), (2.25, 1, 1)), identity)


def test_intersects_obb_uses_world_transform():
    sphere = Sphere((0, 0, 0), 1.0)
    bb = Aabb((0, 0, 0), (0.5, 3, 0.5))
    # бокс отнесён на x=3: вдоль X его полуширина 0.5, не достаёт
    far_away = Affine3.from_translation((3, 0, 0))
    assert not sphere.intersects_obb(bb, far_away)
    # повёрнут длинной стороной к сфере – достаёт
    rotated = Affine3.from_rotation_translation(Quat.from_axis_angle((0, 0, 1), 90), (3, 0, 0))
    assert sphere.intersects_obb(bb, rotated)


def test_intersects_obb_coincident_centers():
    sphere = Sphere((1, 2, 3), 0.1)
    assert sphere.intersects_obb(Aabb((0, 0, 0), (1, 1, 1)), Affine3.from_translation((1, 2, 3)))


def test_equality():
    assert Sphere((1, 2, 3), 2.0) == Sphere((1, 2, 3), 2.0)
    assert Sphere((1, 2, 3), 2.0) != Sphere((1, 2, 3), 2.5)
