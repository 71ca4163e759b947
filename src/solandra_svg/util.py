"""
util.py
-------

Scalar and lattice helpers for laying things out in drawing space.

Factory functions (``scaler``, ``scaler2d``, ``iso_transform``,
``hex_transform``, ``tri_transform``) return plain callables so they can be
passed straight into ``Path.map`` or a loop body.
"""

from __future__ import annotations

__all__ = [
    "clamp", "scaler", "scaler2d", "iso_transform", "centroid",
    "hex_transform", "tri_transform", "TriangleCell",
]

import math
from typing import Callable, NamedTuple, Sequence

import numpy as np

from .vectors import Point2D, PointLike

COS_PI_6 = math.cos(math.pi / 6)


def clamp(n: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, n))


def scaler(min_domain: float, max_domain: float,
           min_range: float, max_range: float) -> Callable[[float], float]:
    """Linear map from ``[min_domain, max_domain]`` onto ``[min_range, max_range]``."""
    range_span = max_range - min_range
    domain_span = max_domain - min_domain
    return lambda n: min_range + (range_span * (n - min_domain)) / domain_span


def scaler2d(x_scale: Sequence[float], y_scale: Sequence[float]) -> Callable[[PointLike], Point2D]:
    """Per-axis ``scaler``; each argument is ``(min_domain, max_domain, min_range, max_range)``."""
    sx = scaler(*x_scale)
    sy = scaler(*y_scale)
    return lambda p: (sx(p[0]), sy(p[1]))


def iso_transform(height: float) -> Callable[[Sequence[float]], Point2D]:
    """Map ``(x, y, z)`` onto an isometric grid whose vertical edges are ``height`` long."""
    w = (height * math.sqrt(3)) / 2
    return lambda p: (-w * (p[2] - p[0]), -height * (p[0] / 2 + p[1] + p[2] / 2))


def centroid(points: Sequence[PointLike]) -> Point2D:
    """Mean of ``points``; a repeated closing point is counted once."""
    n = len(points)
    if n == 0:
        raise ValueError("centroid must have at least one point")
    if n == 1:
        return (points[0][0], points[0][1])
    closed = points[0][0] == points[-1][0] and points[0][1] == points[-1][1]
    arr = np.asarray(points[: n - 1] if closed else points, dtype=float)
    x, y = arr.mean(axis=0)
    return (float(x), float(y))


def hex_transform(r: float, vertical: bool = True) -> Callable[[Sequence[int]], Point2D]:
    """Integer grid coordinates to hexagon centres of radius ``r``.

    ``vertical`` hexagons have a vertex at the top and offset odd rows;
    otherwise odd columns are offset.
    """
    def transform(p: Sequence[int]) -> Point2D:
        x, y = p[0], p[1]
        if vertical:
            return (2 * r * COS_PI_6 * x if y % 2 == 0 else (2 * x - 1) * r * COS_PI_6, 1.5 * y * r)
        return (r * 1.5 * x, 2 * r * COS_PI_6 * y if x % 2 == 0 else (2 * y - 1) * r * COS_PI_6)

    return transform


class TriangleCell(NamedTuple):
    at: Point2D
    flipped: bool


def tri_transform(side: float) -> Callable[[Sequence[int]], TriangleCell]:
    """Integer grid coordinates to centres of alternating up/down triangles."""
    r = side / (2 * math.sin(math.pi / 3))
    h = (side * 0.5) / math.tan(math.pi / 3)

    def transform(p: Sequence[int]) -> TriangleCell:
        x, y = p[0], p[1]
        if (x + y) % 2 == 0:
            return TriangleCell((0.5 * side * x, (h + r) * y), False)
        return TriangleCell((0.5 * side * x, (h + r) * y + h - r), True)

    return transform
