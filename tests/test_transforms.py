"""
test_transforms.py
------------------

Unit tests for the SVG transform builder.
"""

import math

import pytest

from solandra_svg.transforms import Transform


def test_translate_forms():
    assert Transform().translate((10, 20)).string == "translate(10, 20)"
    assert Transform().translate(5, 15).string == "translate(5, 15)"


def test_translate_requires_y():
    with pytest.raises(TypeError):
        Transform().translate(5)


def test_scale_forms():
    assert Transform().scale((2, 3)).string == "scale(2, 3)"
    assert Transform().scale(2).string == "scale(2, 2)"
    assert Transform().scale(2, 3).string == "scale(2, 3)"


def test_rotate_in_degrees():
    assert Transform().rotate(math.pi).string == "rotate(180)"
    assert Transform().rotate(math.pi / 2, 0.5, 0.5).string == "rotate(90, 0.5, 0.5)"
    assert Transform().rotate(0).string == "rotate(0)"


def test_skews():
    assert Transform().skew_x(30).string == "skewX(30)"
    assert Transform().skew_y(15).string == "skewY(15)"


def test_chain_joins_with_spaces():
    t = Transform()
    assert t.translate(1, 2) is t
    t.scale(0.5).rotate(math.pi)
    assert str(t) == "translate(1, 2) scale(0.5, 0.5) rotate(180)"


def test_of_applies_fixed_order():
    t = Transform.of(rotate=(math.pi, (0.5, 0.5)), translate=(1, 1), skew_y=10, scale=2)
    assert t.string == "translate(1, 1) scale(2, 2) rotate(180, 0.5, 0.5) skewY(10)"
    assert Transform.of().string == ""


def test_copy_is_independent():
    t = Transform().translate(1, 1)
    c = t.copy()
    c.scale(2)
    assert t.string == "translate(1, 1)"
    assert c.string == "translate(1, 1) scale(2, 2)"
