"""
Core type definitions for magickscript.

This module contains the type aliases shared between the parsing, structure
and driver layers.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from magickscript.imaging.image import MagickImage

# One step of the multi-axis iterator: axis name -> current value
Coordinate = dict[str, int]

# Resolves an image locator to an image reference
ImageLoader = Callable[[str], "MagickImage"]
