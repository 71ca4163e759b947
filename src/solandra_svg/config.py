"""
config.py - Configuration dataclass for canvas construction and export.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

DEFAULT_STROKE_WIDTH = 0.005
SUPPORTED_UNITS = ("px", "mm")


@dataclass(frozen=True)
class SketchConfig:
    """Immutable settings for a ``SolandraSvg`` canvas."""
    width: float = 800
    height: float = 800
    seed: Union[int, Tuple[int, int], None] = None
    stroke_width: float = DEFAULT_STROKE_WIDTH
    units: str = "px"
    logger_level: int = logging.INFO
    logger_name: Optional[str] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {self.width}x{self.height}")
        if self.units not in SUPPORTED_UNITS:
            raise ValueError(f"Unsupported units: {self.units!r}")
        if self.stroke_width <= 0:
            raise ValueError(f"stroke_width must be positive, got {self.stroke_width}")
