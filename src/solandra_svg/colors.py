"""
colors.py
---------

Colour conversion for SVG attributes.

HSL input is converted to ``#RRGGBB`` so that non-browser renderers (plotter
software, vector editors) read the files correctly. OkLCH is passed through
as a CSS colour function for browser-only output.
"""

from __future__ import annotations

__all__ = ["CSS4_COLOR_NAMES", "hsl_to_rgb", "hsla", "oklch", "named_color"]

import colorsys
from typing import Any

from matplotlib import colors

from .text_utils import fmt_number

CSS4_COLOR_NAMES = list(colors.CSS4_COLORS.keys())


def hsl_to_rgb(h: float, s: float, l: float) -> str:
    """Convert HSL in ``[0, 1]`` (hue 1.0 == 360 degrees) to ``#RRGGBB``."""
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return colors.to_hex((r, g, b)).upper()


def hsla(hue: float, saturation: float, lightness: float) -> str:
    """Convert CSS-style HSL (hue 0-360, saturation/lightness 0-100)."""
    return hsl_to_rgb(hue / 360.0, saturation / 100.0, lightness / 100.0)


def oklch(lightness: float, chroma: float, hue: float, alpha: float = 1.0) -> str:
    """CSS ``oklch()`` string; lightness in percent, hue in degrees."""
    text = f"oklch({fmt_number(lightness)}% {fmt_number(chroma)} {fmt_number(hue)}"
    if alpha < 1.0:
        text += f" / {fmt_number(alpha)}"
    return text + ")"


def named_color(color: Any) -> str:
    """Resolve any Matplotlib colour spec (CSS4 name, RGB tuple, ...) to hex."""
    if isinstance(color, str) and not color.strip():
        raise ValueError("Empty colour name")
    try:
        return colors.to_hex(color if not isinstance(color, str) else color.strip().lower()).upper()
    except ValueError as e:
        raise ValueError(f"Invalid color: {color}") from e
