"""
Octree для ускорения frustum‑culling.

Объекты должны иметь:
    * world_aabb        – Aabb в мировых координатах (раскладка по узлам);
    * aabb, world_from_local – локальный бокс и его преобразование (точный тест).
Renderable из cullkit.culling.visibility подходит как есть.
"""

from __future__ import annotations

import numpy as np
from typing import Tuple, List

from cullkit.math import Affine3
from cullkit.primitives import Aabb
from cullkit.utils.logger import logger

_IDENTITY = Affine3.identity()


class OctreeNode:
    """Узел Octree – хранит объекты и (при необходимости) 8 дочерних узлов."""
    def __init__(self,
                 bounds: Tuple[Tuple[float, float, float], Tuple[float, float, float]],
                 depth: int = 0,
                 max_depth: int = 6,
                 max_objects: int = 8):
        self.bounds = (np.array(bounds[0], dtype=np.float32),
                       np.array(bounds[1], dtype=np.float32))
        self.box = Aabb.from_min_max(*self.bounds)
        self.depth = depth
        self.max_depth = max_depth
        self.max_objects = max_objects
        self.objects: List[object] = []
        self.children: List[OctreeNode] = []

    def insert(self, obj) -> None:
        if self.children:
            idx = self._get_child_index(obj)
            if idx is not None:
                self.children[idx].insert(obj)
                return

        self.objects.append(obj)

        if len(self.objects) > self.max_objects and self.depth < self.max_depth and not self.children:
            self.subdivide()
            remaining = []
            for o in self.objects:
                idx = self._get_child_index(o)
                if idx is not None:
                    self.children[idx].insert(o)
                else:
                    remaining.append(o)
            self.objects = remaining

    def _get_child_index(self, obj) -> int | None:
        box = obj.world_aabb
        centre = box.center
        minb, maxb = self.bounds
        mid = (minb + maxb) * 0.5

        index = 0
        if centre[0] > mid[0]:
            index |= 1
        if centre[1] > mid[1]:
            index |= 2
        if centre[2] > mid[2]:
            index |= 4

        cmin, cmax = self._child_bounds(index)
        if np.all(box.min() >= cmin) and np.all(box.max() <= cmax):
            return index
        return None

    def _child_bounds(self, index: int) -> Tuple[np.ndarray, np.ndarray]:
        minb, maxb = self.bounds
        mid = (minb + maxb) * 0.5
        lo = np.where([index & 1, index & 2, index & 4], mid, minb)
        hi = np.where([index & 1, index & 2, index & 4], maxb, mid)
        return lo.astype(np.float32), hi.astype(np.float32)

    def subdivide(self) -> None:
        for i in range(8):
            child_min, child_max = self._child_bounds(i)
            child = OctreeNode((child_min, child_max),
                               depth=self.depth + 1,
                               max_depth=self.max_depth,
                               max_objects=self.max_objects)
            self.children.append(child)

    def collect(self, result: List[object]) -> None:
        """Все объекты поддерева без проверок."""
        result.extend(self.objects)
        for child in self.children:
            child.collect(result)

    def query(self, frustum, result: List[object]) -> None:
        # корень хранит и объекты, выходящие за его границы
        if self.depth > 0:
            if not frustum.intersects_obb(self.box, _IDENTITY):
                return
            if frustum.contains_aabb(self.box, _IDENTITY):
                self.collect(result)
                return

        for obj in self.objects:
            if frustum.intersects_obb(obj.aabb, obj.world_from_local):
                result.append(obj)

        for child in self.children:
            child.query(frustum, result)


class Octree:
    """Публичный API – создаём один объект Octree и работаем с ним."""
    def __init__(self,
                 bounds: Tuple[Tuple[float, float, float], Tuple[float, float, float]],
                 max_depth: int = 6,
                 max_objects: int = 8):
        self.root = OctreeNode(bounds, depth=0,
                               max_depth=max_depth,
                               max_objects=max_objects)

    @classmethod
    def from_config(cls, config) -> "Octree":
        section = config.section("octree")
        return cls(tuple(tuple(b) for b in section["bounds"]),
                   max_depth=section["max_depth"],
                   max_objects=section["max_objects"])

    def insert(self, obj) -> None:
        self.root.insert(obj)

    def clear(self) -> None:
        bounds = self.root.bounds
        self.root = OctreeNode(bounds, depth=0,
                               max_depth=self.root.max_depth,
                               max_objects=self.root.max_objects)

    def rebuild(self, objects) -> None:
        self.clear()
        count = 0
        for obj in objects:
            self.insert(obj)
            count += 1
        logger.debug(f"[Octree] Rebuilt with {count} objects.")

    def query(self, frustum) -> List[object]:
        """Объекты, пересекающие frustum (None – все объекты)."""
        result: List[object] = []
        if frustum is None:
            self.root.collect(result)
        else:
            self.root.query(frustum, result)
        return result
