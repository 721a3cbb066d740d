# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float32).
"""
import numpy as np


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other):
        return Vec3(*(self._v + other._v))

    def __sub__(self, other):
        return Vec3(*(self._v - other._v))

    def __mul__(self, scalar):
        return Vec3(*(self._v * scalar))

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    def extend(self, w: float):
        """Дополнить до Vec4 четвёртой компонентой `w`."""
        from cullkit.math.vec4 import Vec4
        return Vec4(self.x, self.y, self.z, w)

    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float32."""
        return self._v.copy()

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
