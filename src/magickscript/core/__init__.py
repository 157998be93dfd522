"""
Core magickscript components.

This package provides the range generator and the shared type aliases.
"""

from magickscript.core.ranges import AxisRange, RangeSpec, cycle, generate
from magickscript.core.types import Coordinate, ImageLoader

__all__ = [
    "AxisRange",
    "Coordinate",
    "ImageLoader",
    "RangeSpec",
    "cycle",
    "generate",
]
