"""
transforms.py
-------------

Fluent builder for the SVG ``transform`` attribute. Angles are given in
radians and written in degrees.
"""

from __future__ import annotations

__all__ = ["Transform"]

import math
from typing import Optional, Sequence, Union

from .text_utils import fmt_number

numeric = Union[int, float]
PairOrNumber = Union[numeric, Sequence[numeric]]


def _pair(x: PairOrNumber, y: Optional[numeric], uniform: bool) -> tuple[numeric, numeric]:
    if isinstance(x, (int, float)):
        if y is None:
            if not uniform:
                raise TypeError("Missing y component")
            return x, x
        return x, y
    if y is not None:
        raise TypeError("Pass either a point or separate x, y values")
    return x[0], x[1]


class Transform:
    """Ordered list of SVG transform operations."""

    __slots__ = ("_ops",)

    def __init__(self) -> None:
        self._ops: list[str] = []

    def translate(self, x: PairOrNumber, y: Optional[numeric] = None) -> Transform:
        tx, ty = _pair(x, y, uniform=False)
        self._ops.append(f"translate({fmt_number(tx)}, {fmt_number(ty)})")
        return self

    def scale(self, x: PairOrNumber, y: Optional[numeric] = None) -> Transform:
        sx, sy = _pair(x, y, uniform=True)
        self._ops.append(f"scale({fmt_number(sx)}, {fmt_number(sy)})")
        return self

    def rotate(self, angle: float, cx: Optional[numeric] = None,
               cy: Optional[numeric] = None) -> Transform:
        degrees = fmt_number((180 * angle) / math.pi)
        if cx is None or cy is None:
            self._ops.append(f"rotate({degrees})")
        else:
            self._ops.append(f"rotate({degrees}, {fmt_number(cx)}, {fmt_number(cy)})")
        return self

    def skew_x(self, x: numeric) -> Transform:
        self._ops.append(f"skewX({fmt_number(x)})")
        return self

    def skew_y(self, y: numeric) -> Transform:
        self._ops.append(f"skewY({fmt_number(y)})")
        return self

    @classmethod
    def of(cls,
           translate: Optional[Sequence[numeric]] = None,
           scale: Optional[PairOrNumber] = None,
           rotate: Union[float, tuple[float, Sequence[numeric]], None] = None,
           skew_x: Optional[numeric] = None,
           skew_y: Optional[numeric] = None) -> Transform:
        """Build a transform from keyword options, applied in a fixed order.

        ``rotate`` is either an angle or ``(angle, (cx, cy))``.
        """
        t = cls()
        if translate is not None:
            t.translate(translate)
        if scale is not None:
            t.scale(scale)
        if rotate is not None:
            if isinstance(rotate, (int, float)):
                t.rotate(rotate)
            else:
                angle, (cx, cy) = rotate
                t.rotate(angle, cx, cy)
        if skew_x is not None:
            t.skew_x(skew_x)
        if skew_y is not None:
            t.skew_y(skew_y)
        return t

    @property
    def string(self) -> str:
        return " ".join(self._ops)

    def copy(self) -> Transform:
        t = Transform()
        t._ops = list(self._ops)
        return t

    def __str__(self) -> str:
        return self.string

    def __repr__(self) -> str:
        return f"<Transform {self.string!r}>"
