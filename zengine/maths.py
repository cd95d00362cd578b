"""Vector, matrix and quaternion helpers.

Matrices are 4x4 numpy arrays acting on column vectors (``m @ v``);
quaternions are arrays ``[w, x, y, z]``. Projections follow the
right-handed, [-1, 1] depth convention.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

__all__ = [
    "radians",
    "clamp",
    "normalize",
    "perspective",
    "ortho",
    "look_at",
    "translate",
    "rotate",
    "angle_axis",
    "quat_multiply",
    "quat_rotate",
]

ArrayLike = Sequence[float] | np.ndarray


def _vec(values: ArrayLike, size: int) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.shape != (size,):
        raise ValueError(f"expected a vector of {size} components, got shape {arr.shape}")
    return arr


def _mat4(matrix: ArrayLike) -> np.ndarray:
    arr = np.asarray(matrix, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    return arr


def radians(degrees: float) -> float:
    """Convert an angle from degrees to radians."""
    return math.radians(degrees)


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the closed range ``[low, high]``."""
    if low > high:
        raise ValueError(f"empty range: low {low} is greater than high {high}")
    return min(max(value, low), high)


def normalize(vector: ArrayLike) -> np.ndarray:
    """Return ``vector`` scaled to unit length."""
    arr = np.asarray(vector, dtype=float)
    norm = float(np.linalg.norm(arr))
    if norm == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / norm


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection from a vertical field of view in radians."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must not be zero")
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


def ortho(
    left: float,
    right: float,
    bottom: float,
    top: float,
    z_near: float = -1.0,
    z_far: float = 1.0,
) -> np.ndarray:
    """Orthographic projection of the given box."""
    if left == right or bottom == top or z_near == z_far:
        raise ValueError("orthographic box must have non-zero extent")
    result = np.identity(4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (z_far - z_near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(z_far + z_near) / (z_far - z_near)
    return result


def look_at(eye: ArrayLike, center: ArrayLike, up: ArrayLike) -> np.ndarray:
    """View matrix looking from ``eye`` towards ``center``."""
    eye_v = _vec(eye, 3)
    forward = normalize(_vec(center, 3) - eye_v)
    side = normalize(np.cross(forward, _vec(up, 3)))
    upward = np.cross(side, forward)
    result = np.identity(4)
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -float(np.dot(side, eye_v))
    result[1, 3] = -float(np.dot(upward, eye_v))
    result[2, 3] = float(np.dot(forward, eye_v))
    return result


def translate(matrix: ArrayLike, offset: ArrayLike) -> np.ndarray:
    """Return ``matrix`` followed by a translation by ``offset``."""
    translation = np.identity(4)
    translation[:3, 3] = _vec(offset, 3)
    return _mat4(matrix) @ translation


def rotate(matrix: ArrayLike, angle: float, axis: ArrayLike) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = normalize(_vec(axis, 3))
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    rotation = np.identity(4)
    rotation[:3, :3] = [
        [c + t * x * x, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, c + t * y * y, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, c + t * z * z],
    ]
    return _mat4(matrix) @ rotation


def angle_axis(angle: float, axis: ArrayLike) -> np.ndarray:
    """Quaternion for a rotation of ``angle`` radians about ``axis``."""
    half = angle / 2.0
    return np.concatenate(([math.cos(half)], _vec(axis, 3) * math.sin(half)))


def quat_multiply(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Hamilton product ``a * b``: apply ``b`` first, then ``a``."""
    aw, ax, ay, az = _vec(a, 4)
    bw, bx, by, bz = _vec(b, 4)
    return np.array(
        [
            aw * bw - ax * bx - ay * by - az * bz,
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
        ]
    )


def quat_rotate(quaternion: ArrayLike, vector: ArrayLike) -> np.ndarray:
    """Rotate a 3-vector by a unit quaternion."""
    q = _vec(quaternion, 4)
    v = _vec(vector, 3)
    w, qv = q[0], q[1:]
    uv = np.cross(qv, v)
    uuv = np.cross(qv, uv)
    return v + 2.0 * (w * uv + uuv)