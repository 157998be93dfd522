"""
Composition driver.

Walks the coordinates of a Context and composites the foreground image over
an accumulating background at each one, then writes the result out.
"""

import logging
from pathlib import Path

from magickscript.config import CompositeSettings
from magickscript.imaging.image import MagickImage, from_file
from magickscript.imaging.magick import MagickTool
from magickscript.structure.context import Context

logger = logging.getLogger(__name__)


def starting_background(context: Context, settings: CompositeSettings) -> MagickImage:
    """The initial image when the script declares one, else the named background."""
    if context.initial_image is not None:
        return context.initial_image
    return context.get_img(settings.background)


def compose(
    context: Context,
    settings: CompositeSettings,
    tool: MagickTool | None = None,
) -> Path:
    """
    Run the composition described by a Context.

    Params:
        context: Built script context
        settings: Geometry, image names and output options
        tool: ImageMagick wrapper, created from settings when omitted

    Returns:
        Path of the written output

    Raises:
        UnknownImageError: If the foreground or background is not registered
        ExternalToolError: If an ImageMagick invocation fails
    """
    tool = tool or MagickTool(settings.magick)
    foreground = context.get_img(settings.foreground)
    background = starting_background(context, settings)

    steps = 0
    for coordinate in context.coordinates():
        background = tool.composite(
            [foreground, background],
            x=coordinate.get("x", 0),
            y=coordinate.get("y", 0),
            width=settings.width,
            height=settings.height,
            output_type=settings.output_type,
        )
        steps += 1
    logger.info("Composited %d steps", steps)

    tool.convert(background, from_file(str(settings.output)))
    return settings.output
