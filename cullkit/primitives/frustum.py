# cullkit/primitives/frustum.py
"""
Frustum – пересечение шести полупространств.

Порядок плоскостей фиксирован: left, right, top, bottom, near, far
(индексы 0..5). Нормали смотрят внутрь. На этот порядок опираются все
тесты: near и far адресуются по индексу.

Обычно пересобирается каждый кадр из clip_from_world камеры
(projection @ view) и дальше только читается.
"""

from __future__ import annotations

from typing import Iterator, Sequence

import numpy as np

from cullkit.math import Affine3, Mat4, as_np
from cullkit.primitives.aabb import Aabb
from cullkit.primitives.half_space import HalfSpace
from cullkit.primitives.sphere import Sphere

LEFT, RIGHT, TOP, BOTTOM, NEAR, FAR = range(6)

_ONE = np.float32(1.0)


def _matrix(clip_from_world) -> np.ndarray:
    if isinstance(clip_from_world, Mat4):
        return clip_from_world.m
    m = np.asarray(clip_from_world, dtype=np.float32)
    if m.shape != (4, 4):
        raise ValueError(f"clip_from_world must be 4x4, got {m.shape}")
    return m


class Frustum:
    """Шесть упорядоченных HalfSpace; неизменяем после сборки."""

    __slots__ = ("half_spaces",)

    def __init__(self, half_spaces: Sequence[HalfSpace]):
        half_spaces = tuple(half_spaces)
        if len(half_spaces) != 6:
            raise ValueError(f"Frustum needs exactly 6 half-spaces, got {len(half_spaces)}")
        self.half_spaces = half_spaces

    # -----------------------------------------------------------------
    # построение из матрицы
    # -----------------------------------------------------------------
    @staticmethod
    def from_clip_from_world(clip_from_world) -> "Frustum":
        """Плоскости по методу Gribb–Hartmann, включая far = row3 − row2."""
        m = _matrix(clip_from_world)
        return Frustum(Frustum._planes_no_far(m) + [HalfSpace(m[3] - m[2])])

    @staticmethod
    def from_clip_from_world_custom_far(clip_from_world, view_translation,
                                        view_backward, far: float) -> "Frustum":
        """
        Как from_clip_from_world, но дальняя плоскость строится явно:
        нормаль `view_backward`, проходит через
        view_translation − far · view_backward.

        Нужна, когда у проекции нет «своей» дальней плоскости
        (infinite far) или дистанция culling‑а должна быть другой.
        """
        m = _matrix(clip_from_world)
        backward = as_np(view_backward, 3)
        far_center = as_np(view_translation, 3) - np.float32(far) * backward
        far_plane = HalfSpace(np.append(backward, -backward.dot(far_center)))
        return Frustum(Frustum._planes_no_far(m) + [far_plane])

    @staticmethod
    def _planes_no_far(m: np.ndarray) -> list:
        # row3 ± row0 (left/right), row3 ± row1 (top/bottom), row3 + row2 (near)
        row3 = m[3]
        planes = []
        for i in range(5):
            row = m[i // 2]
            planes.append(HalfSpace(row3 + row if i % 2 == 0 else row3 - row))
        return planes

    # -----------------------------------------------------------------
    # тесты
    # -----------------------------------------------------------------
    def intersects_sphere(self, sphere: Sphere, intersect_far: bool = True) -> bool:
        """
        Консервативный тест «пересекает или внутри».

        Каждая плоскость проверяется независимо, поэтому сфера возле
        угла frustum‑а может дать True, находясь снаружи.
        """
        sphere_center = np.append(sphere.center, _ONE)
        count = 6 if intersect_far else 5
        for half_space in self.half_spaces[:count]:
            if half_space.normal_d.dot(sphere_center) + sphere.radius <= 0.0:
                return False
        return True

    def intersects_obb(self, aabb: Aabb, world_from_local: Affine3,
                       intersect_near: bool = True, intersect_far: bool = True) -> bool:
        """Пересекается ли ориентированный бокс (aabb + world_from_local) с frustum‑ом."""
        aabb_center_world = np.append(world_from_local.transform_point(aabb.center), _ONE)
        for idx, half_space in enumerate(self.half_spaces):
            if idx == NEAR and not intersect_near:
                continue
            if idx == FAR and not intersect_far:
                continue
            relative_radius = aabb.relative_radius(half_space.normal, world_from_local.matrix3)
            if half_space.normal_d.dot(aabb_center_world) + relative_radius <= 0.0:
                return False
        return True

    def contains_aabb(self, aabb: Aabb, world_from_local: Affine3) -> bool:
        """Бокс целиком внутри всех шести плоскостей (касание не считается)."""
        for half_space in self.half_spaces:
            if not aabb.is_in_half_space(half_space, world_from_local):
                return False
        return True

    # -----------------------------------------------------------------
    # служебное
    # -----------------------------------------------------------------
    def planes_array(self) -> np.ndarray:
        """(6, 4) float32 – вход для пакетных ядер."""
        return np.stack([hs.normal_d for hs in self.half_spaces]).astype(np.float32)

    def __len__(self) -> int:
        return 6

    def __getitem__(self, index: int) -> HalfSpace:
        return self.half_spaces[index]

    def __iter__(self) -> Iterator[HalfSpace]:
        return iter(self.half_spaces)

    def __eq__(self, other):
        if not isinstance(other, Frustum):
            return NotImplemented
        return self.half_spaces == other.half_spaces

    __hash__ = None

    def __repr__(self):
        return "Frustum(" + ", ".join(repr(hs) for hs in self.half_spaces) + ")"
