"""
magickscript - Drive ImageMagick compositing from a small line-oriented script

A script declares variables, named images, an optional initial image and
integer ranges over named axes. magickscript replays the Cartesian product of
the ranges as coordinates and composites an image at each one.
"""

from importlib.metadata import version

from magickscript.core.ranges import AxisRange, RangeSpec
from magickscript.structure import Context, ContextFactory

__version__ = version("magickscript")

__all__ = [
    "__version__",
    "AxisRange",
    "Context",
    "ContextFactory",
    "RangeSpec",
]
