"""
test_colors.py
--------------

HSL, OkLCH and named colour conversion.
"""

import pytest

from solandra_svg.colors import CSS4_COLOR_NAMES, hsl_to_rgb, hsla, named_color, oklch


@pytest.mark.parametrize("hsl, expected", [
    ((0, 0, 0), "#000000"),
    ((0, 1, 0.5), "#FF0000"),
    ((0.3333, 1, 0.5), "#00FF00"),
    ((0.66667, 1, 0.5), "#0000FF"),
    ((0, 0, 1), "#FFFFFF"),
])
def test_hsl_to_rgb(hsl, expected):
    assert hsl_to_rgb(*hsl) == expected


def test_hsla_css_ranges():
    assert hsla(0, 100, 50) == "#FF0000"
    assert hsla(240, 100, 50) == "#0000FF"
    assert hsla(0, 0, 50) == "#808080"


def test_oklch_string():
    assert oklch(62.5, 0.2, 145) == "oklch(62.5% 0.2 145)"
    assert oklch(62.5, 0.2, 145, 0.4) == "oklch(62.5% 0.2 145 / 0.4)"


def test_named_color():
    assert "rebeccapurple" in CSS4_COLOR_NAMES
    assert named_color("RebeccaPurple") == "#663399"
    assert named_color("#abcdef") == "#ABCDEF"
    with pytest.raises(ValueError):
        named_color("  ")
