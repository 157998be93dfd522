"""
Image references and the ImageMagick collaborator.
"""

from magickscript.imaging.image import MagickImage, from_buffer, from_file
from magickscript.imaging.magick import MagickTool, geometry

__all__ = [
    "MagickImage",
    "MagickTool",
    "from_buffer",
    "from_file",
    "geometry",
]
