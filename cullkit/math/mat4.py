# cullkit/math/mat4.py
"""
Матрица 4×4 (float32, row‑major, векторы‑столбцы: p' = M @ p).

Строки такой матрицы – именно то, из чего Frustum извлекает плоскости.
"""
import numpy as np
from math import radians, tan


class Mat4:
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float32)
        else:
            self.m = np.array(array, dtype=np.float32).reshape((4, 4))

    @staticmethod
    def identity():
        return Mat4(np.identity(4, dtype=np.float32))

    @staticmethod
    def translate(x: float, y: float, z: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return Mat4(m)

    @staticmethod
    def scale(sx: float, sy: float, sz: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return Mat4(m)

    @staticmethod
    def perspective(fov_deg: float, aspect: float,
                    z_near: float, z_far: float):
        """OpenGL‑перспектива: NDC z ∈ [-1, 1], камера смотрит в −Z."""
        f = 1.0 / tan(radians(fov_deg) / 2.0)
        m = np.zeros((4, 4), dtype=np.float32)
        m[0, 0] = f / aspect
        m[1, 1] = f
        m[2, 2] = (z_far + z_near) / (z_near - z_far)
        m[2, 3] = (2.0 * z_far * z_near) / (z_near - z_far)
        m[3, 2] = -1.0
        return Mat4(m)

    @staticmethod
    def orthographic(left: float, right: float, bottom: float, top: float,
                     z_near: float, z_far: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = 2.0 / (right - left)
        m[1, 1] = 2.0 / (top - bottom)
        m[2, 2] = -2.0 / (z_far - z_near)
        m[0, 3] = -(right + left) / (right - left)
        m[1, 3] = -(top + bottom) / (top - bottom)
        m[2, 3] = -(z_far + z_near) / (z_far - z_near)
        return Mat4(m)

    def inverse(self) -> "Mat4":
        return Mat4(np.linalg.inv(self.m))

    def transform_point(self, p) -> np.ndarray:
        """Однородное преобразование точки с делением на w."""
        h = self.m @ np.append(np.asarray(p, dtype=np.float32), np.float32(1.0))
        return (h[:3] / h[3]).astype(np.float32)

    def __matmul__(self, other: "Mat4") -> "Mat4":
        return Mat4(np.dot(self.m, other.m))

    def __repr__(self):
        return f"Mat4({self.m})"

    def to_np(self) -> np.ndarray:
        return self.m.copy()
