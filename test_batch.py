# -*- coding: utf-8 -*-
import numpy as np
import pytest

from cullkit.culling import obbs_in_frustum, spheres_in_frustum
from cullkit.math import Affine3, Quat
from cullkit.primitives import Aabb, Sphere


def test_spheres_match_scalar_test(big_frustum, offset_frustum):
    rng = np.random.default_rng(5)
    centers = rng.uniform(-60.0, 60.0, size=(500, 3)).astype(np.float32)
    centers[:, 2] -= 50.0
    radii = rng.uniform(0.1, 8.0, size=500).astype(np.float32)
    for frustum in (big_frustum, offset_frustum):
        for intersect_far in (True, False):
            mask = spheres_in_frustum(frustum, centers, radii, intersect_far)
            expected = [frustum.intersects_sphere(Sphere(c, r), intersect_far)
                        for c, r in zip(centers, radii)]
            assert mask.tolist() == expected


def test_spheres_fixture_cases(big_frustum):
    mask = spheres_in_frustum(big_frustum,
                              [[0.9167, 0.0, 0.0], [7.9288, 0.0, 2.9728]],
                              [0.75, 2.0])
    assert mask.tolist() == [False, True]


def test_obbs_match_scalar_test(offset_frustum):
    rng = np.random.default_rng(9)
    n = 300
    centers = rng.uniform(-1.0, 1.0, size=(n, 3)).astype(np.float32)
    half_extents = rng.uniform(0.1, 6.0, size=(n, 3)).astype(np.float32)
    transforms = [
        Affine3.from_rotation_translation(
            Quat.from_axis_angle(rng.normal(size=3), rng.uniform(0, 360)),
            rng.uniform((-80, -80, -130), (80, 80, 10)),
        )
        for _ in range(n)
    ]
    matrices3 = np.stack([t.matrix3 for t in transforms])
    translations = np.stack([t.translation for t in transforms])

    for near, far in ((True, True), (False, True), (True, False)):
        mask = obbs_in_frustum(offset_frustum, centers, half_extents, matrices3, translations,
                               intersect_near=near, intersect_far=far)
        expected = [offset_frustum.intersects_obb(Aabb(c, h), t, near, far)
                    for c, h, t in zip(centers, half_extents, transforms)]
        assert mask.tolist() == expected
    assert 0 < mask.sum() < n


def test_shape_mismatch_raises(offset_frustum):
    with pytest.raises(ValueError):
        spheres_in_frustum(offset_frustum, np.zeros((3, 3)), np.ones(2))
    with pytest.raises(ValueError):
        obbs_in_frustum(offset_frustum, np.zeros((2, 3)), np.ones((2, 3)),
                        np.zeros((2, 3)), np.zeros((2, 3)))


def test_empty_batch(offset_frustum):
    assert spheres_in_frustum(offset_frustum, np.empty((0, 3)), np.empty(0)).shape == (0,)
