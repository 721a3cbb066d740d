# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: заранее посчитанные frustum‑ы
и frustum‑ы, построенные из перспективной проекции.
"""

import math

import pytest

from cullkit.math import Mat4
from cullkit.primitives import Frustum, HalfSpace
from cullkit.utils import Config


@pytest.fixture(autouse=True)
def _fresh_config():
    Config.reset()
    yield
    Config.reset()


# ----------------------------------------------------------------------
# Frustum‑ы, заданные плоскостями
# ----------------------------------------------------------------------
@pytest.fixture
def big_frustum():
    """Большой frustum со смещением."""
    return Frustum([
        HalfSpace((-0.9701, -0.2425, -0.0000, 7.7611)),
        HalfSpace((-0.0000, 1.0000, -0.0000, 4.0000)),
        HalfSpace((-0.0000, -0.2425, -0.9701, 2.9104)),
        HalfSpace((-0.0000, -1.0000, -0.0000, 4.0000)),
        HalfSpace((-0.0000, -0.2425, 0.9701, 2.9104)),
        HalfSpace((0.9701, -0.2425, -0.0000, -1.9403)),
    ])


@pytest.fixture
def small_frustum():
    return Frustum([
        HalfSpace((-0.9701, -0.2425, -0.0000, 0.7276)),
        HalfSpace((-0.0000, 1.0000, -0.0000, 1.0000)),
        HalfSpace((-0.0000, -0.2425, -0.9701, 0.7276)),
        HalfSpace((-0.0000, -1.0000, -0.0000, 1.0000)),
        HalfSpace((-0.0000, -0.2425, 0.9701, 0.7276)),
        HalfSpace((0.9701, -0.2425, -0.0000, 0.7276)),
    ])


@pytest.fixture
def long_frustum():
    return Frustum([
        HalfSpace((-0.9998, -0.0222, -0.0000, -1.9543)),
        HalfSpace((-0.0000, 1.0000, -0.0000, 45.1249)),
        HalfSpace((-0.0000, -0.0168, -0.9999, 2.2718)),
        HalfSpace((-0.0000, -1.0000, -0.0000, 45.1249)),
        HalfSpace((-0.0000, -0.0168, 0.9999, 2.2718)),
        HalfSpace((0.9998, -0.0222, -0.0000, 7.9528)),
    ])


@pytest.fixture
def unit_cube_frustum():
    """Куб [-1, 1]^3 в том же порядке плоскостей."""
    return Frustum([
        HalfSpace((1, 0, 0, 1)),
        HalfSpace((-1, 0, 0, 1)),
        HalfSpace((0, 1, 0, 1)),
        HalfSpace((0, -1, 0, 1)),
        HalfSpace((0, 0, -1, 1)),
        HalfSpace((0, 0, 1, 1)),
    ])


# ----------------------------------------------------------------------
# Frustum‑ы из проекции (камера смотрит в −Z)
# ----------------------------------------------------------------------
def perspective_frustum(fov_deg, near, far, camera=None):
    projection = Mat4.perspective(fov_deg, 1.0, near, far)
    view = camera.inverse() if camera is not None else Mat4.identity()
    return Frustum.from_clip_from_world(projection @ view)


@pytest.fixture
def offset_frustum():
    """90°, near=1, far=100, камера в (2, 2, 0)."""
    return perspective_frustum(90.0, 1.0, 100.0, Mat4.translate(2.0, 2.0, 0.0))


@pytest.fixture
def tight_frustum():
    """Frustum, в который повёрнутый на 45° бокс входит почти впритык."""
    half_extent_world = math.sqrt((49.5 * 49.5) * 0.5) + math.sqrt(0.5)
    near = 50.5 - half_extent_world
    far = near + 2.0 * half_extent_world
    fov = 2.0 * math.atan(half_extent_world / near)
    return perspective_frustum(math.degrees(fov), near, far)


@pytest.fixture
def make_perspective_frustum():
    return perspective_frustum
