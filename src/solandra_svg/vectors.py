"""
vectors.py
----------

Stateless 2D point/vector helpers.

Points and vectors share one representation, a ``(x, y)`` tuple. Every
function accepts any two-item sequence and returns a tuple. Rotation is
counter-clockwise-positive in the mathematical sense, which appears
clockwise on a y-down SVG canvas.
"""

from __future__ import annotations

__all__ = [
    "Point2D", "Vector2D",
    "add", "subtract", "scale", "magnitude", "distance", "rotate",
    "normalise", "dot", "polar_to_cartesian", "point_along",
]

import math
from typing import Sequence, TypeAlias, Union

numeric: TypeAlias = Union[int, float]
Point2D: TypeAlias = tuple[numeric, numeric]
Vector2D: TypeAlias = tuple[numeric, numeric]
PointLike: TypeAlias = Sequence[numeric]


def add(a: PointLike, b: PointLike) -> Point2D:
    return (a[0] + b[0], a[1] + b[1])


def subtract(a: PointLike, b: PointLike) -> Point2D:
    return (a[0] - b[0], a[1] - b[1])


def scale(p: PointLike, factor: numeric) -> Point2D:
    return (factor * p[0], factor * p[1])


def magnitude(p: PointLike) -> float:
    return math.sqrt(p[0] ** 2 + p[1] ** 2)


def distance(a: PointLike, b: PointLike) -> float:
    return magnitude(subtract(a, b))


def rotate(p: PointLike, angle: float) -> Point2D:
    """Rotate ``p`` about the origin by ``angle`` radians."""
    x, y = p[0], p[1]
    c, s = math.cos(angle), math.sin(angle)
    return (x * c - y * s, x * s + y * c)


def normalise(p: PointLike) -> Point2D:
    """Unit vector along ``p``; the zero vector yields ``(nan, nan)``."""
    m = magnitude(p)
    if m == 0:
        return (math.nan, math.nan)
    return (p[0] / m, p[1] / m)


def dot(a: PointLike, b: PointLike) -> float:
    return a[0] * b[0] + a[1] * b[1]


def polar_to_cartesian(center: PointLike, radius: numeric, angle: float) -> Point2D:
    return (center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))


def point_along(a: PointLike, b: PointLike, proportion: float = 0.5) -> Point2D:
    """Affine interpolation from ``a`` to ``b``.

    Proportions outside ``[0, 1]`` extrapolate along the same line.
    """
    return add(a, scale(subtract(b, a), proportion))
