"""
projection.py — Cube-face pixel → direction → equirectangular UV.

Cube faces, indexed 0..5, each looking down one axis (z is up):

    0  +Y        3  -Z (down)
    1  -Y        4  +X
    2  +Z (up)   5  -X

Both mappers accept scalars or numpy arrays of matching shape.
"""

import numpy as np

from .vectors import UV, Direction3, Scalar

FACE_COUNT = 6


def _filled(like: Scalar, value: float) -> Scalar:
    if isinstance(like, np.ndarray):
        return np.full_like(like, value, dtype=np.float64)
    return value


# ── Face → direction ──────────────────────────────────────────────────────────

def face_to_direction(i: Scalar, j: Scalar, face_index: int,
                      face_size: int) -> Direction3:
    """
    Direction through output pixel (i, j) of one cube face (not normalised).

    Args:
        i:          output column, 0 ≤ i < face_size
        j:          output row,    0 ≤ j < face_size
        face_index: 0..5; anything else gives the zero direction
        face_size:  output face side length in pixels

    Returns:
        Direction3 with components in [-1, 1]
    """
    a = 2.0 * i / face_size   # [0, 2)
    b = 2.0 * j / face_size
    one = _filled(a, 1.0)

    if face_index == 0:
        return Direction3(1.0 - a, one, 1.0 - b)
    if face_index == 1:
        return Direction3(a - 1.0, -one, 1.0 - b)
    if face_index == 2:
        return Direction3(b - 1.0, a - 1.0, one)
    if face_index == 3:
        return Direction3(1.0 - b, a - 1.0, -one)
    if face_index == 4:
        return Direction3(one, a - 1.0, 1.0 - b)
    if face_index == 5:
        return Direction3(-one, 1.0 - a, 1.0 - b)

    zero = _filled(a, 0.0)
    return Direction3(zero, zero, zero)


# ── Direction → UV ────────────────────────────────────────────────────────────

def direction_to_uv(direction: Direction3) -> UV:
    """
    Longitude/latitude projection of a direction onto the panorama.

    u = (θ + π) / π    θ = atan2(y, x)        → u ∈ [0, 2]
    v = (π/2 − φ) / π  φ = atan2(z, |xy|)     → v ∈ [0, 1], 0 at the north pole

    u is not wrapped here; the sampler wraps it.
    """
    x, y, z = direction
    theta = np.arctan2(y, x)
    phi = np.arctan2(z, np.hypot(x, y))

    u = (theta + np.pi) / np.pi
    v = (np.pi / 2 - phi) / np.pi
    return UV(u, v)
