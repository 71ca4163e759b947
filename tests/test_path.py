"""
test_path.py
------------

Unit tests for path.py: segment builders, shapes, Chaikin smoothing,
map/clone and serialization errors.
"""

import dataclasses
import logging
import math

import numpy as np
import pytest

from solandra_svg import vectors as v
from solandra_svg.attributes import Attributes
from solandra_svg.curves import CurveConfig, convert_to_svg_cubic_spec
from solandra_svg.path import (
    Arc, ArcConfig, Close, CubicCurve, InvalidPathError, Line, Move, Path,
)


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def turning_angles(points):
    """Absolute turning angle at every interior vertex of a polyline."""
    pts = np.asarray(points, dtype=float)
    d = np.diff(pts, axis=0)
    headings = np.arctan2(d[:, 1], d[:, 0])
    turns = np.diff(headings)
    turns = (turns + np.pi) % (2 * np.pi) - np.pi
    return np.abs(turns)


# ---------------------------------------------------------------------
# 1. Primitive segments
# ---------------------------------------------------------------------
def test_move_line_serialization():
    p = Path().move_to((0, 0)).line_to((0.5, 0.25))
    assert p.d == "M 0 0 L 0.5 0.25"
    assert [s.kind for s in p.segments] == ["move", "line"]


def test_builders_chain_and_return_same_path(empty_path):
    assert empty_path.move_to((0, 0)) is empty_path
    assert empty_path.line_to((1, 0)) is empty_path
    assert empty_path.curve_to((1, 1)) is empty_path
    assert empty_path.arc_to((0, 1)) is empty_path
    assert empty_path.close() is empty_path
    assert len(empty_path) == 5


def test_curve_to_resolves_config():
    p = Path().move_to((0, 0)).curve_to((1, 0), polarity=-1, curve_size=0.5)
    seg = p.segments[-1]
    assert isinstance(seg, CubicCurve)
    assert seg.config == CurveConfig(curve_size=0.5, polarity=-1)


def test_curve_to_keywords_override_config():
    base = CurveConfig(curve_size=2, twist=0.3)
    p = Path().move_to((0, 0)).curve_to((1, 0), base, twist=0.1)
    assert p.segments[-1].config == CurveConfig(curve_size=2, twist=0.1)


def test_curve_serialization_uses_previous_point():
    p = Path().move_to((0.1, 0.1)).line_to((0.2, 0.3)).curve_to((0.6, 0.4))
    expected = convert_to_svg_cubic_spec((0.2, 0.3), (0.6, 0.4), CurveConfig())
    assert p.d == f"M 0.1 0.1 L 0.2 0.3 {expected}"


def test_arc_default_radii_from_displacement():
    p = Path().move_to((0, 0)).arc_to((1, 0.5))
    seg = p.segments[-1]
    assert isinstance(seg, Arc)
    assert seg.config == ArcConfig(radius_x=1, radius_y=0.5)
    assert p.d == "M 0 0 A 1 0.5 0 0 1 1 0.5"


def test_arc_sweep_flag_always_one():
    p = Path().move_to((0, 0)).arc_to((1, 1), 2, 2, x_axis_rotation=30, large_arc=True)
    assert p.d.endswith("A 2 2 30 1 1 1 1")


def test_arc_without_previous_point_is_logged_and_ignored(caplog):
    p = Path()
    with caplog.at_level(logging.ERROR, logger="solandra_svg"):
        result = p.arc_to((1, 1))
    assert result is p
    assert len(p) == 0
    assert "no previous point" in caplog.text


def test_close_serializes_as_z():
    p = Path().move_to((0, 0)).line_to((1, 0)).line_to((1, 1)).close()
    assert p.d == "M 0 0 L 1 0 L 1 1 Z"


def test_segment_after_close_starts_at_subpath_start():
    p = (
        Path().move_to((0, 0)).line_to((1, 0)).line_to((1, 1)).close()
        .curve_to((2, 2))
    )
    assert p.current_point() == (2, 2)
    expected = convert_to_svg_cubic_spec((0, 0), (2, 2))
    assert p.d.endswith(f"Z {expected}")


def test_points_skip_close():
    p = Path().move_to((0, 0)).line_to((1, 0)).close()
    assert p.points() == [(0, 0), (1, 0)]


# ---------------------------------------------------------------------
# 2. Shapes
# ---------------------------------------------------------------------
def test_rect_centered():
    p = Path().rect((0.5, 0.5), 0.5, 0.5)
    assert p.d == "M 0.25 0.25 L 0.75 0.25 L 0.75 0.75 L 0.25 0.75 L 0.25 0.25"


def test_rect_top_left():
    p = Path().rect((0, 0), 1, 2, align="topLeft")
    assert p.d == "M 0 0 L 1 0 L 1 2 L 0 2 L 0 0"


def test_rect_invalid_align():
    with pytest.raises(ValueError):
        Path().rect((0, 0), 1, 1, align="bottomRight")


def test_regular_polygon_vertices():
    p = Path().regular_polygon((0, 0), 6, 1)
    assert len(p) == 7
    assert isinstance(p.segments[0], Move)
    assert all(isinstance(s, Line) for s in p.segments[1:])
    assert p.segments[-1].to == p.segments[0].to
    for s in p.segments:
        assert v.magnitude(s.to) == pytest.approx(1)


def test_regular_polygon_rotation_and_top_left():
    p = Path().regular_polygon((0, 0), 4, 1, rotation=math.pi / 2, align="topLeft")
    assert p.segments[0].to == pytest.approx((1, 2))


def test_regular_polygon_needs_three_sides():
    with pytest.raises(ValueError):
        Path().regular_polygon((0, 0), 2, 1)


def test_ellipse_is_four_arcs():
    p = Path().ellipse((0.5, 0.5), 0.2)
    assert [s.kind for s in p.segments] == ["move", "arc", "arc", "arc", "arc"]
    assert p.d == (
        "M 0.5 0.4 A 0.1 0.1 0 0 1 0.6 0.5 A 0.1 0.1 0 0 1 0.5 0.6 "
        "A 0.1 0.1 0 0 1 0.4 0.5 A 0.1 0.1 0 0 1 0.5 0.4"
    )


def test_ellipse_height_and_top_left():
    p = Path().ellipse((0, 0), 2, 1, align="topLeft")
    assert p.segments[0].to == (1, 0)
    assert p.segments[1].config == ArcConfig(radius_x=1, radius_y=0.5)


# ---------------------------------------------------------------------
# 3. Chaikin
# ---------------------------------------------------------------------
def test_chaikin_reduces_max_turning_angle(zigzag):
    before = turning_angles(zigzag.points()).max()
    zigzag.chaikin(1)
    after_one = turning_angles(zigzag.points()).max()
    zigzag.chaikin(1)
    after_two = turning_angles(zigzag.points()).max()
    assert after_one < before
    assert after_two < after_one


def test_chaikin_keeps_endpoints_and_grows(zigzag):
    first, last = zigzag.segments[0], zigzag.segments[-1]
    n = len(zigzag)
    zigzag.chaikin(1)
    assert zigzag.segments[0] == first
    assert zigzag.segments[-1] == last
    # Each of the n-2 interior lines becomes two.
    assert len(zigzag) == n + (n - 2)


def test_chaikin_cut_points():
    p = Path().move_to((0, 0)).line_to((4, 0)).line_to((4, 4)).chaikin(1)
    assert p.points() == [(0, 0), (3, 0), (4, 1), (4, 4)]


def test_chaikin_passes_curves_through():
    p = (
        Path().move_to((0, 0)).line_to((1, 0)).curve_to((2, 1))
        .line_to((3, 0)).line_to((4, 0))
    )
    p.chaikin(1)
    assert sum(isinstance(s, CubicCurve) for s in p.segments) == 1
    assert any(s.to == (2, 1) for s in p.segments if isinstance(s, CubicCurve))


def test_chaikin_short_path_unchanged():
    p = Path().move_to((0, 0)).line_to((1, 1))
    assert p.chaikin(3).points() == [(0, 0), (1, 1)]


# ---------------------------------------------------------------------
# 4. map / clone / attributes
# ---------------------------------------------------------------------
def test_map_translates_segments():
    def shift(segment, index):
        if isinstance(segment, Close):
            return segment
        return dataclasses.replace(segment, to=v.add(segment.to, (1, index)))

    p = Path().move_to((0, 0)).line_to((1, 0)).close().map(shift)
    assert p.points() == [(1, 0), (2, 1)]
    assert isinstance(p.segments[-1], Close)


def test_clone_is_independent():
    p = Path(Attributes().stroke_width(0.01)).move_to((0, 0)).line_to((1, 1))
    c = p.clone()
    c.line_to((2, 0))
    c.attributes.stroke_width(0.5)
    assert len(p) == 2
    assert p.attributes.get("stroke-width") == 0.01
    assert c.d == "M 0 0 L 1 1 L 2 0"


def test_clone_replaces_attributes():
    p = Path(Attributes().no_fill()).move_to((0, 0))
    c = p.clone(Attributes().fill_opacity(0.5))
    assert c.attributes.get("fill") is None
    with pytest.raises(TypeError):
        p.clone("fill:red")


def test_configure_attributes():
    p = Path().move_to((0, 0)).line_to((1, 0))
    p.configure_attributes(lambda a: a.id("edge"))
    assert str(p) == '<path id="edge" d="M 0 0 L 1 0" />'


# ---------------------------------------------------------------------
# 5. Serialization errors and indentation
# ---------------------------------------------------------------------
def test_empty_path_raises():
    with pytest.raises(InvalidPathError, match="Must add to path"):
        Path().string()


def test_path_must_start_with_move():
    with pytest.raises(InvalidPathError, match="Must start path with move"):
        Path().line_to((1, 1)).string()


def test_string_indentation():
    p = Path().move_to((0, 0)).line_to((1, 1))
    assert p.string(2) == '    <path d="M 0 0 L 1 1" />'


# ---------------------------------------------------------------------
# 6. Reference geometry
# ---------------------------------------------------------------------
def test_rect_reference_corners():
    p = Path().rect((0.5, 0.5), 0.2, 0.4, align="center")
    assert [s.kind for s in p.segments] == ["move", "line", "line", "line", "line"]
    expected = [(0.4, 0.3), (0.6, 0.3), (0.6, 0.7), (0.4, 0.7), (0.4, 0.3)]
    for segment, point in zip(p.segments, expected):
        assert segment.to == pytest.approx(point)


def test_more_chaikin_iterations_give_more_segments():
    def square_run():
        return Path().move_to((0, 0)).line_to((1, 0)).line_to((1, 1)).line_to((0, 1))

    one = square_run().chaikin(1)
    three = square_run().chaikin(3)
    assert len(one) > 4
    assert len(three) > len(one)
    assert turning_angles(three.points()).max() < turning_angles(one.points()).max()
