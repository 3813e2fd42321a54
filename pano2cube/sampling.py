"""
sampling.py — Bilinear lookup into an equirectangular pixel grid.

The grid is an (H, W, C) uint8 array (C ≥ 3; only RGB is read).
Columns wrap around (the panorama is a closed 360° band), rows clamp at the
poles.

Both texture axes are scaled by the grid *height*.  That is only
geometrically right for a 2:1 panorama (u spans [0, 2)); other aspect ratios
are sampled stretched, not rejected.
"""

import numpy as np

from .vectors import Color3, Scalar, clamp


def sample(grid: np.ndarray, u: Scalar, v: Scalar) -> Color3:
    """
    Bilinear sample of *grid* at texture coordinate (u, v).

    Accepts scalars or same-shaped arrays for u and v.

    Returns:
        Color3 with channels clamped to [0, 255]
    """
    H, W = grid.shape[:2]

    xf = np.asarray(u, dtype=np.float64) * H
    yf = np.asarray(v, dtype=np.float64) * H

    x = np.floor(xf).astype(np.int64)
    y = np.floor(yf).astype(np.int64)
    diffx = np.asarray(xf - x)[..., np.newaxis]
    diffy = np.asarray(yf - y)[..., np.newaxis]

    # x wraps, x + 1 clamps at the right edge; rows always clamp
    x1 = x % W
    x2 = np.clip(x + 1, 0, W - 1)
    y1 = np.clip(y, 0, H - 1)
    y2 = np.clip(y + 1, 0, H - 1)

    rgb = grid[..., :3]
    c_a = rgb[y1, x1].astype(np.float64)
    c_b = rgb[y1, x2].astype(np.float64)
    c_c = rgb[y2, x1].astype(np.float64)
    c_d = rgb[y2, x2].astype(np.float64)

    # A(1−dx)(1−dy) + B·dx(1−dy) + C(1−dx)dy + D·dx·dy, as two lerps
    top = c_a + (c_b - c_a) * diffx
    bottom = c_c + (c_d - c_c) * diffx
    value = clamp(top + (bottom - top) * diffy, 0.0, 255.0)

    return Color3(value[..., 0], value[..., 1], value[..., 2])
