# cullkit/math/convert.py
import numpy as np


def as_np(value, size: int) -> np.ndarray:
    """
    Копия Vec3/Vec4/кортежа/ndarray как плоский float32‑массив длины `size`.
    Бросает ValueError при несовпадении длины.
    """
    if hasattr(value, "as_np"):
        value = value.as_np()
    arr = np.array(value, dtype=np.float32).reshape(-1)
    if arr.shape[0] != size:
        raise ValueError(f"expected {size} components, got {arr.shape[0]}")
    return arr
