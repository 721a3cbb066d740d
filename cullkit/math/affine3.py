# cullkit/math/affine3.py
"""
Аффинное преобразование world_from_local: линейная часть 3×3
(rotation + scale) и перенос.

Столбец `i` матрицы `matrix3` – образ локальной оси `i` в мире,
поэтому Aabb.relative_radius берёт именно столбцы.
"""

from __future__ import annotations

import numpy as np

from cullkit.math.convert import as_np
from cullkit.math.mat4 import Mat4


class Affine3:
    __slots__ = ("matrix3", "translation")

    def __init__(self, matrix3=None, translation=None):
        if matrix3 is None:
            self.matrix3 = np.identity(3, dtype=np.float32)
        else:
            self.matrix3 = np.array(matrix3, dtype=np.float32).reshape((3, 3))
        if translation is None:
            self.translation = np.zeros(3, dtype=np.float32)
        else:
            self.translation = np.array(translation, dtype=np.float32).reshape(3)

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @staticmethod
    def identity() -> "Affine3":
        return Affine3()

    @staticmethod
    def from_translation(translation) -> "Affine3":
        return Affine3(translation=_vec3(translation))

    @staticmethod
    def from_scale(scale) -> "Affine3":
        return Affine3(matrix3=np.diag(_vec3(scale)))

    @staticmethod
    def from_rotation_translation(rotation, translation) -> "Affine3":
        """rotation – Quat (или готовая 3×3 матрица)."""
        m3 = rotation.to_mat3() if hasattr(rotation, "to_mat3") else rotation
        return Affine3(matrix3=m3, translation=_vec3(translation))

    @staticmethod
    def from_mat4(mat) -> "Affine3":
        """Отбрасывает проективную строку; ожидается аффинная матрица."""
        m = mat.m if isinstance(mat, Mat4) else np.asarray(mat, dtype=np.float32)
        return Affine3(matrix3=m[:3, :3], translation=m[:3, 3])

    # -----------------------------------------------------------------
    # применение
    # -----------------------------------------------------------------
    def transform_point(self, p) -> np.ndarray:
        return (self.matrix3 @ _vec3(p) + self.translation).astype(np.float32)

    def transform_vector(self, v) -> np.ndarray:
        return (self.matrix3 @ _vec3(v)).astype(np.float32)

    def inverse(self) -> "Affine3":
        inv = np.linalg.inv(self.matrix3).astype(np.float32)
        return Affine3(matrix3=inv, translation=-(inv @ self.translation))

    def to_mat4(self) -> Mat4:
        m = np.identity(4, dtype=np.float32)
        m[:3, :3] = self.matrix3
        m[:3, 3] = self.translation
        return Mat4(m)

    def __matmul__(self, other: "Affine3") -> "Affine3":
        return Affine3(
            matrix3=self.matrix3 @ other.matrix3,
            translation=self.matrix3 @ other.translation + self.translation,
        )

    def __repr__(self):
        return f"Affine3(matrix3={self.matrix3.tolist()}, translation={self.translation.tolist()})"


def _vec3(v) -> np.ndarray:
    return as_np(v, 3)
