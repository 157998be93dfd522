"""
Settings for the composition driver.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from magickscript.imaging.magick import DEFAULT_BINARY


class CompositeSettings(BaseModel):
    """Options controlling how the script's coordinates are composited.

    Params:
        width: Width the foreground is fitted to at each step
        height: Height the foreground is fitted to at each step
        foreground: Name of the image placed at each coordinate
        background: Name of the starting image when no miff is declared
        output: Destination of the final composite
        output_type: Intermediate format passed between tool invocations
        magick: ImageMagick executable
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=60, gt=0)
    height: int = Field(default=60, gt=0)
    foreground: str = "picture"
    background: str = "background"
    output: Path = Path("output.png")
    output_type: str = "miff"
    magick: str = DEFAULT_BINARY

    @field_validator("foreground", "background", "output_type", "magick")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value
