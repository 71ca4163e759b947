"""
curves.py
---------

Turns a declarative "curve to this point" description into the two control
points of an exact cubic Bezier.

The description has five independent knobs:

    curve_size   How far the curve bulges, relative to the chord length.
    polarity     Which side of the chord it bulges toward (1 or -1).
    bulbousness  Separation of the two control points ("shoulder" width).
    curve_angle  Rotation of the bulge direction away from the chord normal.
    twist        Rotation of the control-point separation axis.

Core API:

    cubic_control_points(start, end, config) -> tuple[Point2D, Point2D]
    convert_to_svg_cubic_spec(start, end, config) -> str
"""

from __future__ import annotations

__all__ = ["CurveConfig", "cubic_control_points", "convert_to_svg_cubic_spec"]

import math
from dataclasses import dataclass

from . import vectors as v
from .text_utils import fmt_point
from .vectors import Point2D, PointLike


@dataclass(frozen=True)
class CurveConfig:
    """Fully resolved curve parameters (angles in radians)."""
    curve_size: float = 1.0
    polarity: int = 1
    bulbousness: float = 1.0
    curve_angle: float = 0.0
    twist: float = 0.0


def cubic_control_points(start: PointLike, end: PointLike,
                         config: CurveConfig = CurveConfig()) -> tuple[Point2D, Point2D]:
    """Compute both control points of the cubic from ``start`` to ``end``.

    Coincident endpoints have no chord to bulge from; both control points
    then collapse onto ``end``.
    """
    u = v.subtract(end, start)
    d = v.magnitude(u)
    if d == 0:
        return tuple(end), tuple(end)

    m = v.add(start, v.scale(u, 0.5))
    perp = v.normalise(v.rotate(u, -math.pi / 2))
    rotated_perp = v.rotate(perp, config.curve_angle)
    control_mid = v.add(
        m, v.scale(rotated_perp, config.curve_size * config.polarity * d * 0.5)
    )
    perp_of_rot = v.normalise(v.rotate(rotated_perp, -math.pi / 2 - config.twist))
    control1 = v.add(control_mid, v.scale(perp_of_rot, (config.bulbousness * d) / 2))
    control2 = v.add(control_mid, v.scale(perp_of_rot, (-config.bulbousness * d) / 2))
    return control1, control2


def convert_to_svg_cubic_spec(start: PointLike, end: PointLike,
                              config: CurveConfig = CurveConfig()) -> str:
    """Render the curve as an SVG ``C x1 y1, x2 y2, x y`` command."""
    control1, control2 = cubic_control_points(start, end, config)
    return f"C {fmt_point(control1)}, {fmt_point(control2)}, {fmt_point(end)}"
