"""
svg.py
------

Scene graph and drawing canvas.

``SolandraSvg`` owns the top-level children, the output dimensions and the
single seeded ``RNG`` behind every stochastic helper. Paths and groups are
created through the canvas and land in whichever scope is current: the
canvas root, or the innermost group whose callback (or ``with`` block) is
running.

Authoring coordinates are normalized: x runs over ``[0, 1]`` and y over
``[0, 1 / aspect_ratio]`` whatever the pixel size of the output.

Note that all random helpers share one stream. Reordering two unrelated
drawing routines changes the numbers both of them see.
"""

from __future__ import annotations

__all__ = ["SolandraSvg", "Group", "CanvasMeta"]

import math
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, MutableSequence, Optional, Sequence, TypeVar, Union

from . import layout
from .attributes import Attributes
from .config import SketchConfig, DEFAULT_STROKE_WIDTH
from .logging_utils import LOGGER_NAME
from .path import Path
from .rng import RNG
from .text_utils import fmt_number, indent
from .transforms import Transform
from .vectors import Point2D, PointLike

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

T = TypeVar("T")
Seed = Union[int, tuple[int, int], None]
GroupAttributes = Union[Attributes, Callable[[Transform], Any], None]
CellCallback = Callable[[Point2D, Point2D, Point2D, int], Any]
PointCallback = Callable[[Point2D, int], Any]


# =============================================================================
# Scene graph
# =============================================================================
class Group:
    """``<g>`` wrapper around an ordered list of paths and groups."""

    __slots__ = ("attributes", "children")

    def __init__(self, attributes: Optional[Attributes] = None) -> None:
        self.attributes: Attributes = attributes if attributes is not None else Attributes()
        self.children: list[Union[Path, Group]] = []

    def add(self, child: Union[Path, Group]) -> Union[Path, Group]:
        if not isinstance(child, (Path, Group)):
            raise TypeError(f"Unsupported child type: {type(child).__name__}")
        self.children.append(child)
        return child

    def string(self, depth: int = 0) -> str:
        opening = indent(f"<g{self.attributes.string}>", depth)
        if not self.children:
            return f"{opening}</g>"
        inner = "\n".join(child.string(depth + 1) for child in self.children)
        return f"{opening}\n{inner}\n{indent('</g>', depth)}"

    def __str__(self) -> str:
        return self.string(0)

    def __repr__(self) -> str:
        return f"<Group children={len(self.children)}{self.attributes.string}>"


@dataclass(frozen=True)
class CanvasMeta:
    """Bounds of the normalized drawing space."""
    top: float
    bottom: float
    left: float
    right: float
    aspect_ratio: float
    center: Point2D


def _group_attributes(attributes: GroupAttributes) -> Attributes:
    if attributes is None:
        return Attributes()
    if isinstance(attributes, Attributes):
        return attributes
    if callable(attributes):
        return Attributes().transform(attributes)
    raise TypeError(f"Unsupported group attributes type: {type(attributes).__name__}")


# =============================================================================
# Canvas
# =============================================================================
class SolandraSvg:
    """Drawing canvas and scene root.

    Args:
        width, height: Output dimensions (pixels, or millimetres for ``image_mm``).
        seed: ``None`` for an entropy seed, one int, or a ``(hi, lo)`` pair.
        stroke_width: Width used by the ``stroked_path`` preset.

    Example:
        >>> s = SolandraSvg(200, 100, seed=1)
        >>> s.stroked_path().rect(s.meta.center, 0.5, 0.25)
        >>> svg_text = s.image
    """

    def __init__(self, width: float, height: float, seed: Seed = None,
                 stroke_width: float = DEFAULT_STROKE_WIDTH,
                 units: str = "px") -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.aspect_ratio = width / height
        self.stroke_width = stroke_width
        self.units = units
        self._rng = RNG(*seed) if isinstance(seed, tuple) else RNG(seed)
        self._elements: list[Union[Path, Group]] = []
        self._scopes: list[Group] = []

        logger = logging.getLogger(LOGGER_NAME)
        logger.debug(f"Canvas {width}x{height} created; aspect ratio {self.aspect_ratio}.")

    @classmethod
    def from_config(cls, config: SketchConfig) -> SolandraSvg:
        logging.getLogger(config.logger_name or LOGGER_NAME).setLevel(config.logger_level)
        return cls(config.width, config.height, seed=config.seed,
                   stroke_width=config.stroke_width, units=config.units)

    @property
    def rng(self) -> RNG:
        return self._rng

    @property
    def elements(self) -> list[Union[Path, Group]]:
        return self._elements

    # -------------------------------------------------------------------------
    # Scene construction
    # -------------------------------------------------------------------------
    def _current(self) -> MutableSequence[Union[Path, Group]]:
        return self._scopes[-1].children if self._scopes else self._elements

    def add(self, element: Union[Path, Group]) -> Union[Path, Group]:
        """Attach an externally built path or group to the current scope."""
        if not isinstance(element, (Path, Group)):
            raise TypeError(f"Unsupported element type: {type(element).__name__}")
        self._current().append(element)
        return element

    def path(self, attributes: Optional[Attributes] = None) -> Path:
        path = Path(attributes if attributes is not None else Attributes())
        self._current().append(path)
        return path

    def stroked_path(self, configure: Optional[Callable[[Attributes], Any]] = None) -> Path:
        """Path starting from the outline preset, optionally customized."""
        return self.path(Attributes.stroked(configure, width=self.stroke_width))

    def filled_path(self, configure: Optional[Callable[[Attributes], Any]] = None) -> Path:
        return self.path(Attributes.filled(configure))

    @contextmanager
    def grouped(self, attributes: GroupAttributes = None) -> Iterator[Group]:
        """Make a new group the current scope for the duration of the block.

        The previous scope is restored even if the block raises.
        """
        group = Group(_group_attributes(attributes))
        self._current().append(group)
        self._scopes.append(group)
        try:
            yield group
        finally:
            self._scopes.pop()

    def group(self, attributes: GroupAttributes, callback: Callable[[], Any]) -> Group:
        """Run ``callback`` with a new group as the current scope.

        ``attributes`` is an ``Attributes`` or a callable that configures a
        ``Transform`` for the group.
        """
        with self.grouped(attributes) as group:
            callback()
        return group

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------
    def _document(self, units: str) -> str:
        suffix = "" if units == "px" else units
        header = (
            f'<svg xmlns="{SVG_NAMESPACE}" viewBox="0 0 1 {fmt_number(1 / self.aspect_ratio)}" '
            f'width="{fmt_number(self.width)}{suffix}" height="{fmt_number(self.height)}{suffix}">'
        )
        if not self._elements:
            return f"{header}</svg>"
        body = "\n".join(element.string(1) for element in self._elements)
        return f"{header}\n{body}\n</svg>"

    @property
    def image(self) -> str:
        """The SVG document with pixel width/height."""
        return self._document("px")

    @property
    def image_mm(self) -> str:
        """The same document with millimetre width/height for vector editors."""
        return self._document("mm")

    def export(self) -> str:
        """The document in the canvas's configured units."""
        return self._document(self.units)

    @property
    def meta(self) -> CanvasMeta:
        return CanvasMeta(
            top=0,
            bottom=1 / self.aspect_ratio,
            left=0,
            right=1,
            aspect_ratio=self.aspect_ratio,
            center=(0.5, 0.5 / self.aspect_ratio),
        )

    def in_drawing(self, point: PointLike) -> bool:
        m = self.meta
        return m.left < point[0] < m.right and m.top < point[1] < m.bottom

    # -------------------------------------------------------------------------
    # Iteration
    # -------------------------------------------------------------------------
    def times(self, n: int, callback: Callable[[int], Any]) -> None:
        for i in range(n):
            callback(i)

    def down_from(self, n: int, callback: Callable[[int], Any]) -> None:
        for i in range(n, 0, -1):
            callback(i)

    def range(self, n: int, callback: Callable[[float], Any], start: float = 0.0,
              end: float = 1.0, inclusive: bool = True) -> None:
        """Call back with ``n`` steps from ``start`` toward ``end``."""
        di = (end - start) / n
        last = n if inclusive else n - 1
        for i in range(last + 1):
            callback(i * di + start)

    def tiles(self, n: int, kind: str = "proportionate", margin: float = 0.0,
              order: str = "columnFirst") -> Iterator[layout.Cell]:
        return layout.tiles(self.aspect_ratio, n, kind=kind, margin=margin, order=order)

    def for_tiling(self, n: int, callback: CellCallback, kind: str = "proportionate",
                   margin: float = 0.0, order: str = "columnFirst") -> None:
        for cell in self.tiles(n, kind=kind, margin=margin, order=order):
            callback(*cell)

    def for_margin(self, margin: float, callback: CellCallback) -> None:
        self.for_tiling(1, callback, margin=margin)

    def horizontal(self, n: int, margin: float = 0.0) -> Iterator[layout.Cell]:
        return layout.horizontal(self.aspect_ratio, n, margin=margin)

    def for_horizontal(self, n: int, callback: CellCallback, margin: float = 0.0) -> None:
        for cell in self.horizontal(n, margin=margin):
            callback(*cell)

    def vertical(self, n: int, margin: float = 0.0) -> Iterator[layout.Cell]:
        return layout.vertical(self.aspect_ratio, n, margin=margin)

    def for_vertical(self, n: int, callback: CellCallback, margin: float = 0.0) -> None:
        for cell in self.vertical(n, margin=margin):
            callback(*cell)

    def for_grid(self, min_x: int, max_x: int, min_y: int, max_y: int,
                 callback: PointCallback, order: str = "columnFirst") -> None:
        for point, k in layout.grid(min_x, max_x, min_y, max_y, order=order):
            callback(point, k)

    def circle_points(self, n: int, at: Optional[PointLike] = None,
                      radius: float = 0.25) -> Iterator[tuple[Point2D, int]]:
        return layout.circle_points(at if at is not None else self.meta.center, radius, n)

    def around_circle(self, n: int, callback: PointCallback, at: Optional[PointLike] = None,
                      radius: float = 0.25) -> None:
        for point, i in self.circle_points(n, at=at, radius=radius):
            callback(point, i)

    def build(self, iter_fn: Callable[..., Any], callback: Callable[..., T],
              *args: Any, **kwargs: Any) -> list[T]:
        """Collect the results of ``callback`` over an iteration helper."""
        results: list[T] = []
        iter_fn(*args, callback=lambda *a: results.append(callback(*a)), **kwargs)
        return results

    def with_random_order(self, iter_fn: Callable[..., Any], callback: Callable[..., Any],
                          *args: Any, **kwargs: Any) -> None:
        """Replay an iteration helper's callbacks in shuffled order."""
        calls: list[tuple] = []
        iter_fn(*args, callback=lambda *a: calls.append(a), **kwargs)
        for a in self.shuffle(calls):
            callback(*a)

    # -------------------------------------------------------------------------
    # Randomness
    # -------------------------------------------------------------------------
    def random(self) -> float:
        """Uniform float in ``[0, 1)``."""
        return self._rng.number()

    def random_angle(self) -> float:
        return self.random() * math.pi * 2

    def random_point(self) -> Point2D:
        return (self.random(), self.random() / self.aspect_ratio)

    def random_polarity(self) -> int:
        return 1 if self.random() > 0.5 else -1

    def uniform_random_int(self, to: int, start: int = 0, inclusive: bool = True) -> int:
        d = to - start + (1 if inclusive else 0)
        return start + math.floor(self.random() * d)

    def uniform_grid_point(self, min_x: int, max_x: int, min_y: int, max_y: int) -> Point2D:
        return (
            self.uniform_random_int(max_x, start=min_x),
            self.uniform_random_int(max_y, start=min_y),
        )

    def do_proportion(self, p: float, callback: Callable[[], Any]) -> None:
        if self.random() < p:
            callback()

    def proportionately(self, cases: Sequence[tuple[float, Callable[[], T]]]) -> T:
        """Run one callback, chosen with probability proportional to its weight."""
        total = sum(weight for weight, _ in cases)
        if total <= 0:
            raise ValueError("Must be positive total")
        r = self.random() * total
        for weight, fn in cases:
            if weight > r:
                return fn()
            r -= weight
        return cases[0][1]()

    def sample(self, items: Sequence[T]) -> T:
        if not items:
            raise IndexError("Cannot sample from an empty sequence")
        return items[math.floor(self.random() * len(items))]

    def samples(self, n: int, items: Sequence[T]) -> list[T]:
        return [self.sample(items) for _ in range(n)]

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher-Yates shuffle in place; returns ``items``."""
        current = len(items)
        while current != 0:
            j = math.floor(self.random() * current)
            current -= 1
            items[current], items[j] = items[j], items[current]
        return items

    def perturb(self, at: PointLike, magnitude: float = 0.1) -> Point2D:
        """Jitter ``at`` by up to ``magnitude / 2`` on each axis."""
        return (
            at[0] + magnitude * (self.random() - 0.5),
            at[1] + magnitude * (self.random() - 0.5),
        )

    def gaussian(self, mean: float = 0.0, sd: float = 1.0) -> float:
        """Box-Muller normal draw."""
        a = 1.0 - self.random()
        b = self.random()
        n = math.sqrt(-2.0 * math.log(a)) * math.cos(2.0 * math.pi * b)
        return mean + n * sd

    def poisson(self, lam: float) -> int:
        """Poisson draw by multiplying uniforms until below ``exp(-lam)``.

        The product is kept as a log sum so large ``lam`` cannot underflow.
        """
        log_prod = self._log_uniform()
        n = 0
        while log_prod >= -lam:
            n += 1
            log_prod += self._log_uniform()
        return n

    def _log_uniform(self) -> float:
        u = self.random()
        return math.log(u) if u > 0.0 else -math.inf

    def __repr__(self) -> str:
        return f"<SolandraSvg {self.width}x{self.height} elements={len(self._elements)}>"
