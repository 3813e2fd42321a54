"""
vectors.py — Small value types for directions, texture coordinates and colours.

Each type is a named tuple whose components are either plain floats or numpy
arrays of one shape, so the same helpers work for a single pixel and for a
whole band of pixels at once.

    Direction3  (x, y, z)  unbounded, cube space
    UV          (u, v)     texture coordinates on the panorama
    Color3      (r, g, b)  channel values, 0..255
"""

from typing import NamedTuple, TypeVar, Union

import numpy as np

from .errors import ZeroVectorError

Scalar = Union[float, np.ndarray]


class Direction3(NamedTuple):
    x: Scalar
    y: Scalar
    z: Scalar


class UV(NamedTuple):
    u: Scalar
    v: Scalar


class Color3(NamedTuple):
    r: Scalar
    g: Scalar
    b: Scalar


Vec = TypeVar('Vec', Direction3, UV, Color3)


# ── Arithmetic ────────────────────────────────────────────────────────────────

def length(vec: Vec) -> Scalar:
    return np.sqrt(sum(c * c for c in vec))


def normalize(vec: Vec) -> Vec:
    """Scale *vec* to unit length. Raises ZeroVectorError for a zero vector."""
    n = length(vec)
    if np.any(n == 0):
        raise ZeroVectorError(f"cannot normalize zero-length {type(vec).__name__}")
    return type(vec)(*(c / n for c in vec))


def multiply(a: Vec, b: Vec) -> Vec:
    return type(a)(*(ca * cb for ca, cb in zip(a, b)))


def add(a: Vec, b: Vec) -> Vec:
    return type(a)(*(ca + cb for ca, cb in zip(a, b)))


def add_scalar(vec: Vec, f: Scalar) -> Vec:
    return type(vec)(*(c + f for c in vec))


def clamp(value: Scalar, lo: float, hi: float) -> Scalar:
    """min(max(value, lo), hi); element-wise for arrays."""
    if isinstance(value, np.ndarray):
        return np.minimum(np.maximum(value, lo), hi)
    return min(max(value, lo), hi)


# ── Colour output ─────────────────────────────────────────────────────────────

def to_color(color: Color3) -> np.ndarray:
    """
    Truncate each channel to 8 bits and append a fully opaque alpha.

    Returns a (..., 4) uint8 RGBA array; a scalar colour gives shape (4,).
    """
    rgb = np.stack([np.asarray(c, dtype=np.float64) for c in color], axis=-1)
    rgb = np.trunc(clamp(rgb, 0.0, 255.0)).astype(np.uint8)
    alpha = np.full(rgb.shape[:-1] + (1,), 255, dtype=np.uint8)
    return np.concatenate([rgb, alpha], axis=-1)
