"""
path.py
-------

Mutable SVG path model: an ordered list of drawing segments plus the
attributes of the resulting ``<path>`` element.

Segments never store the point they start from. Curves and arcs recover it
positionally at serialization time from the segment in front of them, so
builder calls do not validate eagerly; ``Path.string()`` does.

Segment kinds:

    Move(to)                 must come first
    Line(to)
    CubicCurve(to, config)   control points derived by ``curves``
    Arc(to, config)
    Close()                  back to the start of the current subpath

Builder API (all return the same ``Path`` for chaining):

    move_to, line_to, curve_to, arc_to, close,
    rect, regular_polygon, ellipse, chaikin, map, configure_attributes
"""

from __future__ import annotations

__all__ = [
    "Path", "Segment", "Move", "Line", "CubicCurve", "Arc", "Close",
    "ArcConfig", "InvalidPathError",
]

import copy
import math
import logging
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Optional, Union

from . import vectors as v
from .attributes import Attributes
from .curves import CurveConfig, convert_to_svg_cubic_spec
from .logging_utils import LOGGER_NAME
from .text_utils import fmt_number, fmt_point, indent
from .vectors import Point2D, PointLike

ALIGNMENTS = ("center", "topLeft")


class InvalidPathError(ValueError):
    """Raised when a path cannot be serialized in its current state."""


# =============================================================================
# Segments
# =============================================================================
@dataclass(frozen=True)
class ArcConfig:
    """Resolved SVG elliptical arc parameters (rotation in degrees)."""
    radius_x: float
    radius_y: float
    x_axis_rotation: float = 0.0
    large_arc: bool = False


@dataclass(frozen=True)
class Move:
    to: Point2D
    kind: ClassVar[str] = "move"


@dataclass(frozen=True)
class Line:
    to: Point2D
    kind: ClassVar[str] = "line"


@dataclass(frozen=True)
class CubicCurve:
    to: Point2D
    config: CurveConfig = field(default_factory=CurveConfig)
    kind: ClassVar[str] = "cubicCurve"


@dataclass(frozen=True)
class Arc:
    to: Point2D
    config: ArcConfig
    kind: ClassVar[str] = "arc"


@dataclass(frozen=True)
class Close:
    kind: ClassVar[str] = "close"


Segment = Union[Move, Line, CubicCurve, Arc, Close]
SegmentMapper = Callable[[Segment, int], Segment]


def _point(p: PointLike) -> Point2D:
    return (p[0], p[1])


def _arc_to_string(segment: Arc) -> str:
    c = segment.config
    large = 1 if c.large_arc else 0
    # Sweep is always 1, whatever the large-arc flag.
    sweep = 1
    return (
        f"A {fmt_number(c.radius_x)} {fmt_number(c.radius_y)} "
        f"{fmt_number(c.x_axis_rotation)} {large} {sweep} {fmt_point(segment.to)}"
    )


def segment_to_string(segment: Segment, previous: Optional[Point2D]) -> str:
    if isinstance(segment, Move):
        return f"M {fmt_point(segment.to)}"
    if isinstance(segment, Line):
        return f"L {fmt_point(segment.to)}"
    if isinstance(segment, Close):
        return "Z"
    if previous is None:
        raise InvalidPathError(f"{segment.kind} segment has no previous point")
    if isinstance(segment, CubicCurve):
        return convert_to_svg_cubic_spec(previous, segment.to, segment.config)
    if isinstance(segment, Arc):
        return _arc_to_string(segment)
    raise TypeError(f"Unsupported segment type: {type(segment).__name__}")


# =============================================================================
# Path
# =============================================================================
class Path:
    """Ordered drawing segments plus the attributes of one ``<path>``."""

    __slots__ = ("segments", "attributes")

    def __init__(self, attributes: Optional[Attributes] = None) -> None:
        self.segments: list[Segment] = []
        self.attributes: Attributes = attributes if attributes is not None else Attributes()

    # -------------------------------------------------------------------------
    # Primitive segments
    # -------------------------------------------------------------------------
    def move_to(self, point: PointLike) -> Path:
        self.segments.append(Move(_point(point)))
        return self

    def line_to(self, point: PointLike) -> Path:
        self.segments.append(Line(_point(point)))
        return self

    def curve_to(self,
                 point: PointLike,
                 config: Optional[CurveConfig] = None,
                 *,
                 curve_size: Optional[float] = None,
                 polarity: Optional[int] = None,
                 bulbousness: Optional[float] = None,
                 curve_angle: Optional[float] = None,
                 twist: Optional[float] = None) -> Path:
        """Append a cubic curve described by the five curve knobs.

        Keyword values override ``config``; anything left unset takes the
        ``CurveConfig`` default, so the stored segment is always fully resolved.
        """
        base = config or CurveConfig()
        resolved = CurveConfig(
            curve_size=base.curve_size if curve_size is None else curve_size,
            polarity=base.polarity if polarity is None else polarity,
            bulbousness=base.bulbousness if bulbousness is None else bulbousness,
            curve_angle=base.curve_angle if curve_angle is None else curve_angle,
            twist=base.twist if twist is None else twist,
        )
        self.segments.append(CubicCurve(_point(point), resolved))
        return self

    def arc_to(self,
               point: PointLike,
               radius_x: Optional[float] = None,
               radius_y: Optional[float] = None,
               x_axis_rotation: float = 0.0,
               large_arc: bool = False) -> Path:
        """Append an elliptical arc from the previous point to ``point``.

        Radii default to the absolute x/y displacement from the previous
        point. Without a previous point the call is logged and ignored.
        """
        previous = self.current_point()
        if previous is None:
            logger = logging.getLogger(LOGGER_NAME)
            logger.error(f"arc_to({point}) ignored: path has no previous point.")
            return self

        to = _point(point)
        config = ArcConfig(
            radius_x=abs(to[0] - previous[0]) if radius_x is None else radius_x,
            radius_y=abs(to[1] - previous[1]) if radius_y is None else radius_y,
            x_axis_rotation=x_axis_rotation,
            large_arc=large_arc,
        )
        self.segments.append(Arc(to, config))
        return self

    def close(self) -> Path:
        self.segments.append(Close())
        return self

    # -------------------------------------------------------------------------
    # Shapes
    # -------------------------------------------------------------------------
    def rect(self, at: PointLike, width: float, height: float,
             align: str = "center") -> Path:
        """Rectangle as Move + 4 Lines, ending back on its start corner."""
        _check_align(align)
        start = _point(at) if align == "topLeft" else v.subtract(at, (width / 2, height / 2))
        self.segments.append(Move(start))
        self.segments.append(Line(v.add(start, (width, 0))))
        self.segments.append(Line(v.add(start, (width, height))))
        self.segments.append(Line(v.add(start, (0, height))))
        self.segments.append(Line(start))
        return self

    def regular_polygon(self, at: PointLike, sides: int, radius: float,
                        rotation: float = 0.0, align: str = "center") -> Path:
        """Regular polygon closed by repeating the first vertex.

        With ``align="topLeft"`` the polygon's bounding circle has its top-left
        corner at ``at``.
        """
        _check_align(align)
        if sides < 3:
            raise ValueError(f"A polygon needs at least 3 sides, got {sides}")
        center = _point(at) if align == "center" else v.add(at, (radius, radius))
        da = (2 * math.pi) / sides
        first = v.polar_to_cartesian(center, radius, rotation)
        self.segments.append(Move(first))
        for i in range(1, sides):
            self.segments.append(Line(v.polar_to_cartesian(center, radius, rotation + i * da)))
        self.segments.append(Line(first))
        return self

    def ellipse(self, at: PointLike, width: float, height: Optional[float] = None,
                align: str = "center") -> Path:
        """Ellipse as four quadrant arcs, starting at 12 o'clock."""
        _check_align(align)
        height = width if height is None else height
        cx, cy = _point(at) if align == "center" else v.add(at, (width / 2, height / 2))
        rx, ry = width / 2, height / 2
        config = ArcConfig(radius_x=rx, radius_y=ry)
        self.segments.append(Move((cx, cy - ry)))
        for to in ((cx + rx, cy), (cx, cy + ry), (cx - rx, cy), (cx, cy - ry)):
            self.segments.append(Arc(to, config))
        return self

    # -------------------------------------------------------------------------
    # Transforms
    # -------------------------------------------------------------------------
    def chaikin(self, iterations: int = 2) -> Path:
        """Chaikin corner cutting over straight-line runs.

        Each interior Line whose neighbours are straight-line vertices
        (Move/Line before, Line after) is replaced by two Lines at 75% along
        the incoming edge and 25% along the outgoing edge. The first and last
        segments are kept, and every other segment passes through unchanged.
        """
        logger = logging.getLogger(LOGGER_NAME)
        if len(self.segments) < 3:
            logger.debug(f"chaikin() skipped: only {len(self.segments)} segments.")
            return self

        for _ in range(iterations):
            segments = self.segments
            smoothed: list[Segment] = [segments[0]]
            for a, b, c in zip(segments, segments[1:], segments[2:]):
                if (isinstance(a, (Move, Line)) and isinstance(b, Line)
                        and isinstance(c, Line)):
                    smoothed.append(Line(v.point_along(a.to, b.to, 0.75)))
                    smoothed.append(Line(v.point_along(b.to, c.to, 0.25)))
                else:
                    smoothed.append(b)
            smoothed.append(segments[-1])
            self.segments = smoothed
        return self

    def map(self, fn: SegmentMapper) -> Path:
        """Replace every segment with ``fn(segment, index)``."""
        self.segments = [fn(segment, i) for i, segment in enumerate(self.segments)]
        return self

    def configure_attributes(self, configure: Callable[[Attributes], object]) -> Path:
        configure(self.attributes)
        return self

    def clone(self, attributes: Optional[Attributes] = None) -> Path:
        """Deep copy; ``attributes`` replaces the cloned attributes if given."""
        if attributes is not None and not isinstance(attributes, Attributes):
            raise TypeError(f"attributes must be Attributes, not {type(attributes).__name__}")
        path = Path(attributes if attributes is not None else self.attributes.clone())
        path.segments = copy.deepcopy(self.segments)
        return path

    # -------------------------------------------------------------------------
    # Geometry queries
    # -------------------------------------------------------------------------
    def current_point(self) -> Optional[Point2D]:
        """Point the next segment would start from, if any."""
        return self._point_before(len(self.segments))

    def _point_before(self, index: int) -> Optional[Point2D]:
        for i in range(index - 1, -1, -1):
            segment = self.segments[i]
            if not isinstance(segment, Close):
                return segment.to
            for j in range(i - 1, -1, -1):
                if isinstance(self.segments[j], Move):
                    return self.segments[j].to
            return None
        return None

    def points(self) -> list[Point2D]:
        """End points of every segment that has one, in order."""
        return [s.to for s in self.segments if not isinstance(s, Close)]

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------
    @property
    def d(self) -> str:
        if not self.segments:
            raise InvalidPathError("Must add to path")
        if not isinstance(self.segments[0], Move):
            raise InvalidPathError("Must start path with move to initial position")
        return " ".join(
            segment_to_string(s, self._point_before(i) if i > 0 else None)
            for i, s in enumerate(self.segments)
        )

    def string(self, depth: int = 0) -> str:
        return indent(f'<path{self.attributes.string} d="{self.d}" />', depth)

    def __str__(self) -> str:
        return self.string(0)

    def __len__(self) -> int:
        return len(self.segments)

    def __repr__(self) -> str:
        return f"<Path segments={len(self.segments)}{self.attributes.string}>"


def _check_align(align: str) -> None:
    if align not in ALIGNMENTS:
        raise ValueError(f"Invalid align: {align!r}; expected one of {ALIGNMENTS}")
