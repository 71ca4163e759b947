"""
mpl_path.py
-----------

Bridges ``Path`` to Matplotlib for previews and geometric queries.

Cubic curves keep their exact control points (``CURVE4``). Matplotlib has no
elliptical-arc code, so arcs are flattened into ``LINETO`` runs after the SVG
endpoint-to-centre conversion. Arcs use the same pinned sweep flag as the
SVG output, so previews and SVG agree.

Core API:

    to_mpl_path(path: Path) -> matplotlib.path.Path
    path_extents(path: Path) -> tuple[float, float, float, float]
    as_patch(path: Path, **style) -> matplotlib.patches.PathPatch
"""

from __future__ import annotations

__all__ = ["to_mpl_path", "path_extents", "as_patch", "approximate_arc"]

import math
from typing import Any

import numpy as np
from matplotlib.patches import PathPatch
from matplotlib.path import Path as mplPath

from .curves import cubic_control_points
from .path import Arc, Close, CubicCurve, InvalidPathError, Line, Move, Path
from .vectors import Point2D

ARC_STEP = math.pi / 8


def approximate_arc(start: Point2D, end: Point2D, rx: float, ry: float,
                    rotation: float, large_arc: bool, sweep: bool) -> list[Point2D]:
    """Sample an SVG elliptical arc, ``start`` and ``end`` included.

    Radii too small to span the endpoints are scaled up as SVG renderers do.
    Zero radii or coincident endpoints degrade to a straight segment.
    """
    x1, y1 = start
    x2, y2 = end
    if rx == 0 or ry == 0 or (x1 == x2 and y1 == y2):
        return [(x1, y1), (x2, y2)]

    cos_phi = math.cos(math.radians(rotation))
    sin_phi = math.sin(math.radians(rotation))

    dx = (x1 - x2) / 2
    dy = (y1 - y2) / 2
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    rx, ry = abs(rx), abs(ry)
    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1:
        rx *= math.sqrt(lam)
        ry *= math.sqrt(lam)

    num = rx * rx * ry * ry - rx * rx * y1p * y1p - ry * ry * x1p * x1p
    den = rx * rx * y1p * y1p + ry * ry * x1p * x1p
    factor = math.sqrt(max(0.0, num / den))
    if large_arc == sweep:
        factor = -factor

    cxp = factor * rx * y1p / ry
    cyp = -factor * ry * x1p / rx
    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2

    theta1 = math.atan2((y1p - cyp) / ry, (x1p - cxp) / rx)
    dtheta = math.atan2((-y1p - cyp) / ry, (-x1p - cxp) / rx) - theta1
    if sweep and dtheta < 0:
        dtheta += 2 * math.pi
    elif not sweep and dtheta > 0:
        dtheta -= 2 * math.pi

    steps = max(4, int(abs(dtheta) / ARC_STEP) + 1)
    theta = theta1 + dtheta * np.linspace(0.0, 1.0, steps + 1)
    xs = cx + rx * np.cos(theta) * cos_phi - ry * np.sin(theta) * sin_phi
    ys = cy + rx * np.cos(theta) * sin_phi + ry * np.sin(theta) * cos_phi
    points = [(float(x), float(y)) for x, y in zip(xs, ys)]
    # Pin the exact endpoints against accumulated rounding.
    points[0], points[-1] = (x1, y1), (x2, y2)
    return points


def to_mpl_path(path: Path) -> mplPath:
    """Convert a ``Path`` into a Matplotlib path with matching geometry."""
    if not isinstance(path, Path):
        raise TypeError(f"Expected a Path, got {type(path).__name__}.")
    if not path.segments:
        raise InvalidPathError("Must add to path")
    if not isinstance(path.segments[0], Move):
        raise InvalidPathError("Must start path with move to initial position")

    verts: list[Point2D] = []
    codes: list[int] = []
    current: Point2D = path.segments[0].to
    subpath_start: Point2D = current

    for segment in path.segments:
        if isinstance(segment, Move):
            verts.append(segment.to)
            codes.append(mplPath.MOVETO)
            current = subpath_start = segment.to
        elif isinstance(segment, Line):
            verts.append(segment.to)
            codes.append(mplPath.LINETO)
            current = segment.to
        elif isinstance(segment, CubicCurve):
            c1, c2 = cubic_control_points(current, segment.to, segment.config)
            verts.extend([c1, c2, segment.to])
            codes.extend([mplPath.CURVE4] * 3)
            current = segment.to
        elif isinstance(segment, Arc):
            c = segment.config
            points = approximate_arc(current, segment.to, c.radius_x, c.radius_y,
                                     c.x_axis_rotation, c.large_arc, True)
            verts.extend(points[1:])
            codes.extend([mplPath.LINETO] * (len(points) - 1))
            current = segment.to
        elif isinstance(segment, Close):
            verts.append(subpath_start)
            codes.append(mplPath.CLOSEPOLY)
            current = subpath_start
        else:
            raise TypeError(f"Unsupported segment type: {type(segment).__name__}")

    return mplPath(np.asarray(verts, dtype=float), codes)


def path_extents(path: Path) -> tuple[float, float, float, float]:
    """Bounding box ``(x0, y0, x1, y1)`` of the drawn geometry."""
    bbox = to_mpl_path(path).get_extents()
    return (float(bbox.x0), float(bbox.y0), float(bbox.x1), float(bbox.y1))


def as_patch(path: Path, **style: Any) -> PathPatch:
    """Wrap ``path`` in a ``PathPatch``; ``style`` goes to the patch as-is."""
    style.setdefault("facecolor", "none")
    return PathPatch(to_mpl_path(path), **style)
