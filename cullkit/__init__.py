"""
cullkit – геометрия для frustum‑culling в реальном времени.

HalfSpace, Aabb, Sphere, Frustum и тесты пересечения/вложенности
между ними, плюс пакетные ядра, Octree и проход видимости.
"""

from cullkit.utils import logger
from cullkit.math import Vec3, Vec4, Mat4, Quat, Affine3
from cullkit.primitives import (
    HalfSpace, Aabb, Sphere, Frustum, CubemapFrusta, CascadesFrusta, compute_aabb,
)
from cullkit.culling import (
    Octree, Renderable, CullingSettings, VisibilityPass,
    spheres_in_frustum, obbs_in_frustum,
)

__version__ = "1.0.0"

__all__ = [
    "Vec3",
    "Vec4",
    "Mat4",
    "Quat",
    "Affine3",
    "HalfSpace",
    "Aabb",
    "Sphere",
    "Frustum",
    "CubemapFrusta",
    "CascadesFrusta",
    "compute_aabb",
    "Octree",
    "Renderable",
    "CullingSettings",
    "VisibilityPass",
    "spheres_in_frustum",
    "obbs_in_frustum",
]
