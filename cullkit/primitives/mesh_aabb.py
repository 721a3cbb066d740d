# cullkit/primitives/mesh_aabb.py
"""
AABB по вершинам меша (позиции в модельном пространстве).
"""

from typing import Optional

import numpy as np

from cullkit.primitives.aabb import Aabb


def compute_aabb(vertices) -> Optional[Aabb]:
    """
    vertices – (N, 3), плоский массив длины 3N или объект с атрибутом
    `vertices` (например, меш). Нет вершин – None.
    """
    if hasattr(vertices, "vertices"):
        vertices = vertices.vertices
    verts = np.asarray(vertices, dtype=np.float32)
    if verts.ndim == 1:
        if verts.shape[0] % 3 != 0:
            raise ValueError(f"flat vertex array length {verts.shape[0]} is not a multiple of 3")
        verts = verts.reshape((-1, 3))
    if verts.ndim != 2 or verts.shape[1] != 3:
        raise ValueError(f"expected (N, 3) vertex positions, got {verts.shape}")
    if verts.shape[0] == 0:
        return None
    return Aabb.from_min_max(verts.min(axis=0), verts.max(axis=0))
