# cullkit/primitives/half_space.py
"""
Полупространство – открытая область по одну сторону секущей плоскости.

Хранится одним float32‑вектором (nx, ny, nz, d):
    * (nx, ny, nz) – единичная нормаль, направленная «внутрь»;
    * d            – знаковое расстояние вдоль нормали от плоскости до начала координат.

Точка p лежит внутри, если dot(normal, p) + d > 0. Сама плоскость
в полупространство не входит.

Пример: все точки с z <= 8 – это HalfSpace((0, 0, -1, 8)).
"""

import numpy as np

from cullkit.math import as_np


class HalfSpace:
    """Неизменяемое полупространство (используется в Frustum)."""

    __slots__ = ("_normal_d",)

    def __init__(self, normal_d):
        """
        normal_d – 4 компоненты (a, b, c, d). Нормаль (a, b, c) нормализуется,
        d масштабируется тем же множителем.

        Нулевая нормаль не проверяется: получаем inf/NaN, а не исключение.
        """
        v = as_np(normal_d, 4)
        with np.errstate(divide="ignore", invalid="ignore"):
            v = v * (np.float32(1.0) / np.linalg.norm(v[:3]))
        v.setflags(write=False)
        self._normal_d = v

    @property
    def normal(self) -> np.ndarray:
        """Единичная нормаль секущей плоскости (3,)."""
        return self._normal_d[:3]

    @property
    def distance(self) -> np.float32:
        """Знаковое расстояние от плоскости до начала координат вдоль нормали."""
        return self._normal_d[3]

    @property
    def normal_d(self) -> np.ndarray:
        """Нормаль и расстояние одним (4,)‑массивом."""
        return self._normal_d

    def signed_distance(self, point) -> np.float32:
        """dot(normal, p) + d – положительно для точек внутри."""
        return np.dot(self._normal_d, np.append(as_np(point, 3), np.float32(1.0)))

    def __eq__(self, other):
        if not isinstance(other, HalfSpace):
            return NotImplemented
        return bool(np.array_equal(self._normal_d, other._normal_d))

    __hash__ = None

    def __repr__(self):
        nx, ny, nz, d = self._normal_d.tolist()
        return f"HalfSpace(normal=({nx:.4f}, {ny:.4f}, {nz:.4f}), d={d:.4f})"
