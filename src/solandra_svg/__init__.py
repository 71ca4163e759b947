"""
solandra_svg - declarative, deterministic SVG sketching.
"""

from .attributes import Attributes
from .collection_ops import array_of, pair_wise, triple_wise, zip2
from .colors import hsl_to_rgb
from .config import SketchConfig
from .curves import CurveConfig, convert_to_svg_cubic_spec, cubic_control_points
from .logging_utils import LOGGER_NAME, configure_logging
from .noise import PerlinNoise, perlin2
from .path import Arc, ArcConfig, Close, CubicCurve, InvalidPathError, Line, Move, Path
from .rng import RNG
from .svg import CanvasMeta, Group, SolandraSvg
from .transforms import Transform
from .util import centroid, clamp, hex_transform, iso_transform, scaler, scaler2d, tri_transform
from . import vectors as v

__version__ = "0.1.0"

__all__ = [
    "SolandraSvg", "Group", "CanvasMeta", "SketchConfig",
    "Path", "Move", "Line", "CubicCurve", "Arc", "Close", "ArcConfig", "InvalidPathError",
    "CurveConfig", "cubic_control_points", "convert_to_svg_cubic_spec",
    "Attributes", "Transform", "hsl_to_rgb", "RNG",
    "PerlinNoise", "perlin2",
    "clamp", "scaler", "scaler2d", "iso_transform", "centroid", "hex_transform", "tri_transform",
    "pair_wise", "triple_wise", "zip2", "array_of",
    "configure_logging", "LOGGER_NAME", "v",
]
