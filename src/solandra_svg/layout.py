"""
layout.py
---------

Pure iteration geometry over the normalized canvas (x in ``[0, 1]``,
y in ``[0, 1 / aspect_ratio]``). Each generator yields cells or points in a
fixed order; the canvas wraps them in callback form.
"""

from __future__ import annotations

__all__ = [
    "Cell", "tiles", "horizontal", "vertical", "grid", "circle_points",
    "TILING_TYPES", "TILING_ORDERS",
]

import math
from typing import Iterator, NamedTuple, Optional

from .vectors import Point2D, PointLike

TILING_TYPES = ("proportionate", "square")
TILING_ORDERS = ("columnFirst", "rowFirst")


class Cell(NamedTuple):
    """One layout cell: top-left corner, per-axis size, centre, visit index."""
    point: Point2D
    delta: Point2D
    center: Point2D
    index: int


def _check(value: str, allowed: tuple[str, ...], what: str) -> None:
    if value not in allowed:
        raise ValueError(f"Invalid {what}: {value!r}; expected one of {allowed}")


def tiles(aspect_ratio: float, n: int, kind: str = "proportionate",
          margin: float = 0.0, order: str = "columnFirst") -> Iterator[Cell]:
    """Grid of ``n`` columns.

    ``"square"`` derives the row count from the aspect ratio so cells are
    square and vertically centred; ``"proportionate"`` uses ``n`` rows that
    stretch to fill the height. ``"columnFirst"`` walks down each column
    before moving right.
    """
    _check(kind, TILING_TYPES, "tiling type")
    _check(order, TILING_ORDERS, "tiling order")
    n_y = math.floor(n * (1 / aspect_ratio)) if kind == "square" else n
    delta_x = (1 - margin * 2) / n
    h_y = delta_x * n_y if kind == "square" else 1 / aspect_ratio - 2 * margin
    delta_y = h_y / n_y if n_y else 0.0
    s_x = margin
    s_y = (1 / aspect_ratio - h_y) / 2

    if order == "columnFirst":
        indices = ((i, j) for i in range(n) for j in range(n_y))
    else:
        indices = ((i, j) for j in range(n_y) for i in range(n))

    for k, (i, j) in enumerate(indices):
        yield Cell(
            (s_x + i * delta_x, s_y + j * delta_y),
            (delta_x, delta_y),
            (s_x + i * delta_x + delta_x / 2, s_y + j * delta_y + delta_y / 2),
            k,
        )


def horizontal(aspect_ratio: float, n: int, margin: float = 0.0) -> Iterator[Cell]:
    """``n`` full-height vertical bands, left to right."""
    s_x, e_x, s_y = margin, 1 - margin, margin
    d_y = 1 / aspect_ratio - 2 * margin
    d_x = (e_x - s_x) / n
    for i in range(n):
        yield Cell(
            (s_x + i * d_x, s_y), (d_x, d_y), (s_x + i * d_x + d_x / 2, s_y + d_y / 2), i
        )


def vertical(aspect_ratio: float, n: int, margin: float = 0.0) -> Iterator[Cell]:
    """``n`` full-width horizontal bands, top to bottom."""
    s_x, s_y = margin, margin
    e_y = 1 / aspect_ratio - margin
    d_x = 1 - 2 * margin
    d_y = (e_y - s_y) / n
    for i in range(n):
        yield Cell(
            (s_x, s_y + i * d_y), (d_x, d_y), (s_x + d_x / 2, s_y + i * d_y + d_y / 2), i
        )


def grid(min_x: int, max_x: int, min_y: int, max_y: int,
         order: str = "columnFirst") -> Iterator[tuple[Point2D, int]]:
    """Integer lattice points, bounds inclusive."""
    _check(order, TILING_ORDERS, "grid order")
    if order == "columnFirst":
        points = ((i, j) for i in range(min_x, max_x + 1) for j in range(min_y, max_y + 1))
    else:
        points = ((i, j) for j in range(min_y, max_y + 1) for i in range(min_x, max_x + 1))
    for k, point in enumerate(points):
        yield point, k


def circle_points(center: PointLike, radius: float, n: int,
                  start_angle: Optional[float] = None) -> Iterator[tuple[Point2D, int]]:
    """``n`` equally spaced points from 12 o'clock, clockwise on screen."""
    cx, cy = center[0], center[1]
    da = (math.pi * 2) / n
    a = -math.pi * 0.5 if start_angle is None else start_angle
    for i in range(n):
        yield (cx + radius * math.cos(a), cy + radius * math.sin(a)), i
        a += da
