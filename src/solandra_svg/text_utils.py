"""
text_utils.py
-------------

Small formatting helpers shared by the SVG serializers.
"""

from __future__ import annotations

__all__ = ["fmt_number", "fmt_point", "indent"]

import math
from numbers import Real
from typing import Sequence

import numpy as np


def fmt_number(n: Real) -> str:
    """Format a number the way SVG golden files expect it.

    Integral values lose their trailing ``.0``, magnitudes from 1e-6 up are
    written positionally and smaller ones use a compact exponent (``1e-7``).
    """
    if isinstance(n, (bool, np.bool_)):
        n = int(n)
    if isinstance(n, (int, np.integer)):
        return str(int(n))

    n = float(n)
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "Infinity" if n > 0 else "-Infinity"
    if n == 0:
        return "0"
    if n.is_integer():
        return str(int(n))

    text = repr(n)
    if "e" not in text:
        return text
    if abs(n) >= 1e-6:
        return np.format_float_positional(n, trim="-")
    mantissa, exponent = text.split("e")
    exponent = int(exponent)
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def fmt_point(p: Sequence[Real]) -> str:
    return f"{fmt_number(p[0])} {fmt_number(p[1])}"


def indent(line: str, depth: int) -> str:
    """Indent ``line`` by two spaces per level."""
    return "  " * max(0, depth) + line
