"""
Пакет primitives – HalfSpace, Aabb, Sphere, Frustum и их агрегаты.
"""

from cullkit.primitives.half_space import HalfSpace
from cullkit.primitives.aabb import Aabb
from cullkit.primitives.sphere import Sphere
from cullkit.primitives.frustum import Frustum, LEFT, RIGHT, TOP, BOTTOM, NEAR, FAR
from cullkit.primitives.frusta import CubemapFrusta, CascadesFrusta
from cullkit.primitives.mesh_aabb import compute_aabb

__all__ = [
    "HalfSpace", "Aabb", "Sphere", "Frustum",
    "LEFT", "RIGHT", "TOP", "BOTTOM", "NEAR", "FAR",
    "CubemapFrusta", "CascadesFrusta", "compute_aabb",
]
