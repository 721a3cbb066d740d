# cullkit/math/quat.py
# ---------------------------------------------------------------
# Кватернион (x, y, z, w) из оси/угла и его матрица вращения 3×3.
# Используется для построения Affine3 (rotation + translation).
# ---------------------------------------------------------------

import numpy as np
from math import sin, cos, radians

from cullkit.math.convert import as_np


class Quat:
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @staticmethod
    def from_axis_angle(axis, angle_deg):
        """axis – 3‑элементный iterable (или Vec3), angle – в градусах."""
        a = radians(angle_deg) / 2.0
        s = sin(a)
        ax = as_np(axis, 3)
        ax = ax / np.linalg.norm(ax)
        return Quat(ax[0] * s, ax[1] * s, ax[2] * s, cos(a))

    def to_mat3(self) -> np.ndarray:
        """Матрица вращения 3×3 (float32)."""
        x, y, z, w = self.x, self.y, self.z, self.w
        xx, yy, zz = x*x, y*y, z*z
        xy, xz, yz = x*y, x*z, y*z
        wx, wy, wz = w*x, w*y, w*z

        m = np.empty((3, 3), dtype=np.float32)
        m[0, 0] = 1 - 2*(yy + zz)
        m[0, 1] = 2*(xy - wz)
        m[0, 2] = 2*(xz + wy)

        m[1, 0] = 2*(xy + wz)
        m[1, 1] = 1 - 2*(xx + zz)
        m[1, 2] = 2*(yz - wx)

        m[2, 0] = 2*(xz - wy)
        m[2, 1] = 2*(yz + wx)
        m[2, 2] = 1 - 2*(xx + yy)
        return m

    def __repr__(self):
        return f"Quat({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"
