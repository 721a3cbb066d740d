# cullkit/primitives/frusta.py
"""
Агрегаты Frustum‑ов: 6 граней кубической карты и каскады теней.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Dict, Hashable, Iterator, List, Optional, Sequence, Tuple

from cullkit.math import Mat4
from cullkit.primitives.frustum import Frustum
from cullkit.utils.logger import logger


def _default_frustum() -> Frustum:
    return Frustum.from_clip_from_world(Mat4.identity())


class CubemapFrusta:
    """Ровно шесть Frustum‑ов, по одному на грань."""

    __slots__ = ("_frusta",)

    def __init__(self, frusta: Optional[Sequence[Frustum]] = None):
        if frusta is None:
            frusta = [_default_frustum() for _ in range(6)]
        self.frusta = frusta

    @property
    def frusta(self) -> Tuple[Frustum, ...]:
        return tuple(self._frusta)

    @frusta.setter
    def frusta(self, frusta: Sequence[Frustum]) -> None:
        frusta = list(frusta)
        if len(frusta) != 6:
            raise ValueError(f"CubemapFrusta needs exactly 6 frusta, got {len(frusta)}")
        self._frusta = frusta

    def __iter__(self) -> Iterator[Frustum]:
        return iter(self._frusta)

    def __reversed__(self) -> Iterator[Frustum]:
        return reversed(self._frusta)

    def __len__(self) -> int:
        return len(self._frusta)

    def __getitem__(self, face: int) -> Frustum:
        return self._frusta[face]

    def __setitem__(self, face: int, frustum: Frustum) -> None:
        self._frusta[face] = frustum


class CascadesFrusta(MutableMapping):
    """entity → список Frustum‑ов (по одному на каскад)."""

    def __init__(self, frusta: Optional[Dict[Hashable, List[Frustum]]] = None):
        self._frusta: Dict[Hashable, List[Frustum]] = dict(frusta or {})

    def __getitem__(self, entity) -> List[Frustum]:
        return self._frusta[entity]

    def __setitem__(self, entity, cascades) -> None:
        cascades = list(cascades)
        logger.debug(f"[Cascades] {entity!r}: {len(cascades)} cascade(s)")
        self._frusta[entity] = cascades

    def __delitem__(self, entity) -> None:
        del self._frusta[entity]
        logger.debug(f"[Cascades] {entity!r} removed")

    def __iter__(self):
        return iter(self._frusta)

    def __len__(self) -> int:
        return len(self._frusta)

    def frusta(self) -> Iterator[Frustum]:
        """Все Frustum‑ы всех сущностей подряд."""
        for cascades in self._frusta.values():
            yield from cascades

    def __repr__(self):
        return f"CascadesFrusta({self._frusta!r})"
