"""
attributes.py
-------------

Styling and element attributes for paths and groups.

Element attributes (``class``, ``id``, ``transform``, ``transform-origin``)
render as separate ``key="value"`` tokens. Everything else is a presentation
property and is folded into one ``style="k:v; k:v;"`` token. Colours are
written as ``#RRGGBB`` (HSL input) or passed through as ``oklch(...)``.
"""

from __future__ import annotations

__all__ = ["Attributes", "ELEMENT_ATTRIBUTES"]

import copy
from typing import Any, Callable, Optional, Union

from .colors import hsla, named_color, oklch
from .config import DEFAULT_STROKE_WIDTH
from .text_utils import fmt_number
from .transforms import Transform

ELEMENT_ATTRIBUTES = ("class", "id", "transform", "transform-origin")
LINE_CAPS = ("butt", "round", "square")
LINE_JOINS = ("arcs", "bevel", "miter", "miter-clip", "round")

Configure = Callable[["Attributes"], Any]


def _value(value: Union[str, int, float]) -> str:
    return value if isinstance(value, str) else fmt_number(value)


class Attributes:
    """Fluent, mutable attribute set; every setter returns ``self``."""

    __slots__ = ("_attributes",)

    def __init__(self) -> None:
        self._attributes: dict[str, Union[str, int, float]] = {}

    # -------------------------------------------------------------------------
    # Fill
    # -------------------------------------------------------------------------
    def fill(self, hue: float, saturation: float, lightness: float,
             opacity: float = 1.0) -> Attributes:
        self._attributes["fill"] = hsla(hue, saturation, lightness)
        if opacity < 1.0:
            self._attributes["fill-opacity"] = opacity
        else:
            self._attributes.pop("fill-opacity", None)
        return self

    def fill_oklch(self, lightness: float, chroma: float, hue: float,
                   opacity: float = 1.0) -> Attributes:
        self._attributes["fill"] = oklch(lightness, chroma, hue, opacity)
        return self

    def fill_color(self, color: Any) -> Attributes:
        self._attributes["fill"] = named_color(color)
        return self

    def no_fill(self) -> Attributes:
        self._attributes["fill"] = "none"
        return self

    def fill_opacity(self, opacity: float) -> Attributes:
        self._attributes["fill-opacity"] = opacity
        return self

    # -------------------------------------------------------------------------
    # Stroke
    # -------------------------------------------------------------------------
    def stroke(self, hue: float, saturation: float, lightness: float,
               opacity: float = 1.0) -> Attributes:
        self._attributes["stroke"] = hsla(hue, saturation, lightness)
        if opacity < 1.0:
            self._attributes["stroke-opacity"] = opacity
        else:
            self._attributes.pop("stroke-opacity", None)
        return self

    def stroke_oklch(self, lightness: float, chroma: float, hue: float,
                     opacity: float = 1.0) -> Attributes:
        self._attributes["stroke"] = oklch(lightness, chroma, hue, opacity)
        return self

    def stroke_color(self, color: Any) -> Attributes:
        self._attributes["stroke"] = named_color(color)
        return self

    def stroke_opacity(self, opacity: float) -> Attributes:
        self._attributes["stroke-opacity"] = opacity
        return self

    def stroke_width(self, width: float) -> Attributes:
        self._attributes["stroke-width"] = width
        return self

    def line_cap(self, cap: str) -> Attributes:
        if cap not in LINE_CAPS:
            raise ValueError(f"Invalid line cap: {cap}")
        self._attributes["stroke-linecap"] = cap
        return self

    def line_join(self, join: str) -> Attributes:
        if join not in LINE_JOINS:
            raise ValueError(f"Invalid line join: {join}")
        self._attributes["stroke-linejoin"] = join
        return self

    def miter_limit(self, limit: float) -> Attributes:
        self._attributes["stroke-miterlimit"] = limit
        return self

    def dash_array(self, *dashes: float) -> Attributes:
        self._attributes["stroke-dasharray"] = " ".join(fmt_number(d) for d in dashes)
        return self

    def dash_offset(self, offset: float) -> Attributes:
        self._attributes["stroke-dashoffset"] = offset
        return self

    def opacity(self, opacity: float) -> Attributes:
        self._attributes["opacity"] = opacity
        return self

    # -------------------------------------------------------------------------
    # Element attributes
    # -------------------------------------------------------------------------
    def class_(self, name: str) -> Attributes:
        self._attributes["class"] = name
        return self

    def id(self, name: str) -> Attributes:
        self._attributes["id"] = name
        return self

    def transform(self, transformation: Union[Transform, Callable[[Transform], Any]]) -> Attributes:
        """Set the transform from a ``Transform`` or a callable configuring one."""
        if not isinstance(transformation, Transform):
            t = Transform()
            transformation(t)
            transformation = t
        self._attributes["transform"] = transformation.string
        return self

    def transform_origin(self, x: Union[str, float], y: Optional[float] = None) -> Attributes:
        if isinstance(x, str):
            self._attributes["transform-origin"] = x
        else:
            self._attributes["transform-origin"] = f"{fmt_number(x)} {fmt_number(y or 0)}"
        return self

    # -------------------------------------------------------------------------
    # Presets
    # -------------------------------------------------------------------------
    @classmethod
    def empty(cls) -> Attributes:
        return cls()

    @classmethod
    def stroked(cls, configure: Optional[Configure] = None,
                width: float = DEFAULT_STROKE_WIDTH) -> Attributes:
        """Outline-only preset: no fill, thin black stroke."""
        attr = cls().no_fill().stroke_width(width).stroke(0, 0, 0)
        if configure is not None:
            configure(attr)
        return attr

    @classmethod
    def filled(cls, configure: Optional[Configure] = None) -> Attributes:
        attr = cls()
        if configure is not None:
            configure(attr)
        return attr

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def clone(self) -> Attributes:
        attr = Attributes()
        attr._attributes = copy.deepcopy(self._attributes)
        return attr

    @property
    def string(self) -> str:
        """Attribute text with a leading space, or ``""`` when empty."""
        tokens = [
            f'{k}="{_value(v)}"'
            for k, v in self._attributes.items() if k in ELEMENT_ATTRIBUTES
        ]
        style = " ".join(
            f"{k}:{_value(v)};"
            for k, v in self._attributes.items() if k not in ELEMENT_ATTRIBUTES
        )
        if style:
            tokens.append(f'style="{style}"')
        return "".join(f" {t}" for t in tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return self._attributes == other._attributes

    def __repr__(self) -> str:
        return f"<Attributes keys={list(self._attributes.keys())}>"
