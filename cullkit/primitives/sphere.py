# cullkit/primitives/sphere.py
"""
Ограничивающая сфера – самый дешёвый bounding volume.
"""

import numpy as np

from cullkit.math import Affine3, as_np


class Sphere:
    __slots__ = ("center", "radius")

    def __init__(self, center=(0.0, 0.0, 0.0), radius: float = 0.0):
        self.center = as_np(center, 3)
        self.radius = np.float32(radius)

    def intersects_obb(self, aabb, world_from_local: Affine3) -> bool:
        """Пересекается ли сфера с боксом `aabb`, перенесённым в мир."""
        aabb_center_world = world_from_local.transform_point(aabb.center)
        v = aabb_center_world - self.center
        d = np.linalg.norm(v)
        if d == 0.0:
            # центр сферы совпадает с центром бокса
            return True
        relative_radius = aabb.relative_radius(v / d, world_from_local.matrix3)
        return bool(d < self.radius + relative_radius)

    def __eq__(self, other):
        if not isinstance(other, Sphere):
            return NotImplemented
        return bool(np.array_equal(self.center, other.center) and self.radius == other.radius)

    __hash__ = None

    def __repr__(self):
        return f"Sphere(center={self.center.tolist()}, radius={float(self.radius):.4f})"
