# cullkit/culling/visibility.py
"""
Проход видимости: какие объекты из списка может увидеть камера.

Для каждого объекта (порядок как у проверки видимости в движке):
    1. дешёвый тест мировой сферы против frustum‑а (опционально);
    2. тест ориентированного бокса (Aabb + world_from_local).

Что делать с результатом – решает вызывающий; проход только
возвращает видимые объекты в исходном порядке.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List

import numpy as np

from cullkit.math import Affine3
from cullkit.multithread import TaskPool
from cullkit.primitives import Aabb, Frustum, Sphere
from cullkit.utils.logger import logger
from cullkit.utils.profiler import Profiler


@dataclass(eq=False)
class Renderable:
    """Объект для culling‑а: локальный бокс + его мировое преобразование."""
    aabb: Aabb
    world_from_local: Affine3 = field(default_factory=Affine3.identity)
    payload: Any = None

    @property
    def world_aabb(self) -> Aabb:
        return self.aabb.transformed(self.world_from_local)

    @property
    def world_sphere(self) -> Sphere:
        box = self.world_aabb
        return Sphere(box.center, np.linalg.norm(box.half_extents))


@dataclass
class CullingSettings:
    intersect_near: bool = True
    intersect_far: bool = True
    sphere_prepass: bool = True
    workers: int = 0
    chunk_size: int = 256

    @classmethod
    def from_config(cls, config) -> "CullingSettings":
        section = config.section("culling")
        return cls(
            intersect_near=bool(section["intersect_near"]),
            intersect_far=bool(section["intersect_far"]),
            sphere_prepass=bool(section["sphere_prepass"]),
            workers=int(section["workers"]),
            chunk_size=max(1, int(section["chunk_size"])),
        )


class VisibilityPass:
    """Frustum‑culling списка Renderable; при workers > 0 – по чанкам в пуле потоков."""

    def __init__(self, settings: CullingSettings = None):
        self.settings = settings or CullingSettings()
        self._pool = TaskPool(max_workers=self.settings.workers) if self.settings.workers > 0 else None
        self.last_visible = 0
        self.last_total = 0

    def is_visible(self, frustum: Frustum, renderable: Renderable) -> bool:
        s = self.settings
        # сферный тест всегда проверяет near, поэтому без near он не применим
        if (s.sphere_prepass and s.intersect_near
                and not frustum.intersects_sphere(renderable.world_sphere, s.intersect_far)):
            return False
        return frustum.intersects_obb(renderable.aabb, renderable.world_from_local,
                                      s.intersect_near, s.intersect_far)

    def _cull_chunk(self, frustum: Frustum, chunk: List[Renderable]) -> List[bool]:
        return [self.is_visible(frustum, r) for r in chunk]

    def run(self, frustum: Frustum, renderables: Iterable[Renderable]) -> List[Renderable]:
        renderables = list(renderables)
        size = self.settings.chunk_size
        with Profiler("visibility"):
            if self._pool is None or len(renderables) <= size:
                mask = self._cull_chunk(frustum, renderables)
            else:
                chunks = [renderables[i:i + size] for i in range(0, len(renderables), size)]
                mask = []
                for part in self._pool.map(lambda c: self._cull_chunk(frustum, c), chunks):
                    mask.extend(part)
        visible = [r for r, keep in zip(renderables, mask) if keep]
        self.last_visible = len(visible)
        self.last_total = len(renderables)
        logger.debug(f"[Visibility] {self.last_visible}/{self.last_total} visible")
        return visible

    def close(self) -> None:
        if self._pool is not None:
            self._pool.shutdown()
            self._pool = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
