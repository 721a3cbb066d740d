# -*- coding: utf-8 -*-
"""
cullkit/culling/batch.py

Пакетные тесты видимости: тысячи сфер / боксов против одного Frustum
за один вызов. Ядра компилируются Numba (njit) и повторяют семантику
Frustum.intersects_sphere / Frustum.intersects_obb поэлементно:
тот же порядок плоскостей, те же строгие сравнения.

API:
    spheres_in_frustum(frustum, centers, radii, intersect_far=True) -> bool[N]
    obbs_in_frustum(frustum, centers, half_extents, matrices3, translations,
                    intersect_near=True, intersect_far=True) -> bool[N]
"""

from __future__ import annotations

import numpy as np
from numba import njit


# ----------------------------------------------------------------------
# ядра
# ----------------------------------------------------------------------
@njit(cache=False)
def _spheres_kernel(planes, centers, radii, plane_count, out):
    for i in range(centers.shape[0]):
        visible = True
        for p in range(plane_count):
            dist = (planes[p, 0] * centers[i, 0] +
                    planes[p, 1] * centers[i, 1] +
                    planes[p, 2] * centers[i, 2] +
                    planes[p, 3])
            if dist + radii[i] <= 0.0:
                visible = False
                break
        out[i] = visible


@njit(cache=False)
def _obbs_kernel(planes, centers, half_extents, matrices3, translations,
                 intersect_near, intersect_far, out):
    for i in range(centers.shape[0]):
        m = matrices3[i]
        # центр бокса в мире
        cx = m[0, 0] * centers[i, 0] + m[0, 1] * centers[i, 1] + m[0, 2] * centers[i, 2] + translations[i, 0]
        cy = m[1, 0] * centers[i, 0] + m[1, 1] * centers[i, 1] + m[1, 2] * centers[i, 2] + translations[i, 1]
        cz = m[2, 0] * centers[i, 0] + m[2, 1] * centers[i, 1] + m[2, 2] * centers[i, 2] + translations[i, 2]

        visible = True
        for p in range(6):
            if p == 4 and not intersect_near:
                continue
            if p == 5 and not intersect_far:
                continue
            nx = planes[p, 0]
            ny = planes[p, 1]
            nz = planes[p, 2]
            r = np.float32(0.0)
            for axis in range(3):
                proj = nx * m[0, axis] + ny * m[1, axis] + nz * m[2, axis]
                r += abs(proj) * half_extents[i, axis]
            if nx * cx + ny * cy + nz * cz + planes[p, 3] + r <= 0.0:
                visible = False
                break
        out[i] = visible


# ----------------------------------------------------------------------
# публичные обёртки
# ----------------------------------------------------------------------
def _rows(name: str, arr, n: int, tail: tuple) -> np.ndarray:
    arr = np.ascontiguousarray(arr, dtype=np.float32)
    if arr.shape != (n,) + tail:
        raise ValueError(f"{name}: expected shape {(n,) + tail}, got {arr.shape}")
    return arr


def spheres_in_frustum(frustum, centers, radii, intersect_far: bool = True) -> np.ndarray:
    """Маска сфер, не отсечённых ни одной из проверяемых плоскостей."""
    centers = np.ascontiguousarray(centers, dtype=np.float32).reshape((-1, 3))
    n = centers.shape[0]
    radii = _rows("radii", radii, n, ())
    out = np.empty(n, dtype=np.bool_)
    _spheres_kernel(frustum.planes_array(), centers, radii, 6 if intersect_far else 5, out)
    return out


def obbs_in_frustum(frustum, centers, half_extents, matrices3, translations,
                    intersect_near: bool = True, intersect_far: bool = True) -> np.ndarray:
    """
    centers, half_extents, translations – (N, 3); matrices3 – (N, 3, 3)
    (линейные части world_from_local каждого объекта).
    """
    centers = np.ascontiguousarray(centers, dtype=np.float32).reshape((-1, 3))
    n = centers.shape[0]
    half_extents = _rows("half_extents", half_extents, n, (3,))
    matrices3 = _rows("matrices3", matrices3, n, (3, 3))
    translations = _rows("translations", translations, n, (3,))
    out = np.empty(n, dtype=np.bool_)
    _obbs_kernel(frustum.planes_array(), centers, half_extents, matrices3, translations,
                 bool(intersect_near), bool(intersect_far), out)
    return out
