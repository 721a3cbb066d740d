# cullkit/primitives/aabb.py
"""
Axis‑aligned bounding box: центр и полуразмеры вдоль осей.

Обычно задаётся в локальном пространстве объекта и тестируется
против Frustum вместе с преобразованием world_from_local.
Сам по себе не обновляется при изменении геометрии.
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from cullkit.math import Affine3, as_np
from cullkit.primitives.half_space import HalfSpace


class Aabb:
    __slots__ = ("center", "half_extents")

    def __init__(self, center=(0.0, 0.0, 0.0), half_extents=(0.0, 0.0, 0.0)):
        self.center = as_np(center, 3)
        self.half_extents = as_np(half_extents, 3)

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @staticmethod
    def from_min_max(minimum, maximum) -> "Aabb":
        """min <= max по каждой оси – на совести вызывающего."""
        minimum = as_np(minimum, 3)
        maximum = as_np(maximum, 3)
        half = np.float32(0.5)
        return Aabb(half * (maximum + minimum), half * (maximum - minimum))

    @staticmethod
    def enclosing(points: Iterable) -> Optional["Aabb"]:
        """
        Минимальный бокс, содержащий все точки. Один проход по любому
        iterable (включая генераторы).

        Возвращает None, если точек нет.
        """
        it = iter(points)
        first = next(it, None)
        if first is None:
            return None
        lo = as_np(first, 3)
        hi = lo.copy()
        for p in it:
            p = as_np(p, 3)
            np.minimum(lo, p, out=lo)
            np.maximum(hi, p, out=hi)
        return Aabb.from_min_max(lo, hi)

    @staticmethod
    def from_sphere(sphere) -> "Aabb":
        """Куб со стороной 2·radius вокруг центра сферы."""
        return Aabb(sphere.center, np.full(3, sphere.radius, dtype=np.float32))

    # -----------------------------------------------------------------
    # углы
    # -----------------------------------------------------------------
    def min(self) -> np.ndarray:
        return self.center - self.half_extents

    def max(self) -> np.ndarray:
        return self.center + self.half_extents

    # -----------------------------------------------------------------
    # проекции и тесты
    # -----------------------------------------------------------------
    def relative_radius(self, p_normal, matrix3) -> np.float32:
        """
        «Радиус» бокса вдоль нормали плоскости после линейного
        преобразования matrix3 (без переноса):
            |(n·c0, n·c1, n·c2)| · half_extents, где c_i – столбцы.
        """
        axes = np.asarray(p_normal, dtype=np.float32) @ matrix3
        return np.abs(axes).dot(self.half_extents)

    def is_in_half_space(self, half_space: HalfSpace, world_from_local: Affine3) -> bool:
        """
        True, если бокс (в мире) целиком лежит по внутреннюю сторону
        плоскости. Касание или пересечение плоскости – False.
        """
        # полуразмеры в мировом пространстве
        half_extents_world = np.abs(world_from_local.matrix3) @ np.abs(self.half_extents)
        # проекция на нормаль
        p_normal = half_space.normal
        r = half_extents_world.dot(np.abs(p_normal))
        center_world = world_from_local.transform_point(self.center)
        signed_distance = p_normal.dot(center_world) + half_space.distance
        return bool(signed_distance > r)

    def transformed(self, world_from_local: Affine3) -> "Aabb":
        """Мировой AABB, охватывающий повёрнутый бокс."""
        return Aabb(
            world_from_local.transform_point(self.center),
            np.abs(world_from_local.matrix3) @ np.abs(self.half_extents),
        )

    def __eq__(self, other):
        if not isinstance(other, Aabb):
            return NotImplemented
        return bool(np.array_equal(self.center, other.center)
                    and np.array_equal(self.half_extents, other.half_extents))

    __hash__ = None

    def __repr__(self):
        return f"Aabb(center={self.center.tolist()}, half_extents={self.half_extents.tolist()})"
