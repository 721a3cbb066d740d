# cullkit/math/vec4.py
"""
4‑мерный вектор (float32). В culling‑коде – упакованная плоскость
(nx, ny, nz, d) или однородная точка (x, y, z, 1).
"""

import numpy as np
from typing import Tuple


class Vec4:
    """Короткий вектор‑4 (float32), только для чтения."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = np.array([x, y, z, w], dtype=np.float32)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    @property
    def w(self) -> float:
        return float(self._v[3])

    def dot(self, other: "Vec4") -> float:
        """Скалярное произведение (например, плоскость · однородная точка)."""
        return float(np.dot(self._v, other._v))

    def xyz(self):
        """Первые три компоненты как Vec3."""
        from cullkit.math.vec3 import Vec3
        return Vec3(self.x, self.y, self.z)

    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float32)."""
        return self._v.copy()

    def __repr__(self) -> str:
        return f"Vec4({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())
