"""
Пакет culling – пакетные ядра, Octree и проход видимости.
"""

from cullkit.culling.batch import spheres_in_frustum, obbs_in_frustum
from cullkit.culling.octree import Octree
from cullkit.culling.visibility import Renderable, CullingSettings, VisibilityPass

__all__ = ["spheres_in_frustum", "obbs_in_frustum", "Octree",
           "Renderable", "CullingSettings", "VisibilityPass"]
