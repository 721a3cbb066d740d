"""
Математический суб‑пакет: Vec3, Vec4, Mat4, Quat, Affine3.
"""

from cullkit.math.convert import as_np
from cullkit.math.vec3 import Vec3
from cullkit.math.vec4 import Vec4
from cullkit.math.mat4 import Mat4
from cullkit.math.quat import Quat
from cullkit.math.affine3 import Affine3

__all__ = ["Vec3", "Vec4", "Mat4", "Quat", "Affine3", "as_np"]
