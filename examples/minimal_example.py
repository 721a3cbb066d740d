import cullkit as ck
from cullkit.utils import logger
import numpy as np


def create_simple_cube():
    """Вершины куба 1×1×1 (плоский массив, как у меша)"""
    return np.array([
        -0.5, -0.5, 0.5,
        0.5, -0.5, 0.5,
        0.5, 0.5, 0.5,
        -0.5, 0.5, 0.5,
        -0.5, -0.5, -0.5,
        0.5, -0.5, -0.5,
        0.5, 0.5, -0.5,
        -0.5, 0.5, -0.5,
    ], dtype=np.float32)


def main():
    cube_aabb = ck.compute_aabb(create_simple_cube())

    # ряд кубов вдоль −Z, часть уходит за дальнюю плоскость
    renderables = [
        ck.Renderable(cube_aabb, ck.Affine3.from_translation((0.0, 0.0, -z)), payload=f"cube_{z}")
        for z in range(0, 60, 5)
    ]

    camera = ck.Mat4.translate(0.0, 1.0, 0.0)
    projection = ck.Mat4.perspective(60.0, 16.0 / 9.0, 0.1, 40.0)
    frustum = ck.Frustum.from_clip_from_world(projection @ camera.inverse())

    with ck.VisibilityPass() as visibility:
        visible = visibility.run(frustum, renderables)

    logger.info(f"Visible: {[r.payload for r in visible]}")


if __name__ == "__main__":
    main()
