"""
Thin wrapper around the ImageMagick command-line tool.

Each operation spawns one ``magick`` process, writes the buffered image
contents to its standard input and collects standard output. Failures are
reported as ExternalToolError and never retried.
"""

import logging
import subprocess
from collections.abc import Sequence

from magickscript.exceptions import ExternalToolError
from magickscript.imaging.image import MagickImage, from_buffer

logger = logging.getLogger(__name__)

DEFAULT_BINARY = "magick"


def geometry(width: int, height: int, x: int, y: int) -> str:
    """Format an ImageMagick geometry string, e.g. ``60x60+10+-4``."""
    return f"{width}x{height}+{x}+{y}"


class MagickTool:
    """Runs ImageMagick subcommands.

    Params:
        binary: Executable to invoke, ``magick`` by default
    """

    def __init__(self, binary: str = DEFAULT_BINARY):
        self.binary = binary

    def _run(self, args: list[str], images: Sequence[MagickImage]) -> bytes:
        command = [self.binary, *args]
        logger.debug("Running %s", command)
        stdin = b"".join(image.content for image in images)
        try:
            process = subprocess.run(command, input=stdin, capture_output=True)
        except OSError as e:
            raise ExternalToolError(command, stderr=str(e)) from e
        if process.returncode != 0:
            stderr = process.stderr.decode(errors="replace")
            logger.error(stderr)
            raise ExternalToolError(command, process.returncode, stderr)
        return process.stdout

    def composite(
        self,
        images: Sequence[MagickImage],
        x: int,
        y: int,
        width: int,
        height: int,
        output_type: str = "miff",
    ) -> MagickImage:
        """
        Composite the first image over the second at an offset.

        Params:
            images: Foreground then background image
            x: Horizontal offset of the foreground
            y: Vertical offset of the foreground
            width: Width the foreground is fitted to
            height: Height the foreground is fitted to
            output_type: Format of the returned image buffer

        Returns:
            The composited image, buffered in ``output_type`` format

        Raises:
            ExternalToolError: If the tool cannot be run or exits non-zero
        """
        stdout = self._run(
            [
                "composite",
                "-geometry",
                geometry(width, height, x, y),
                *(image.name for image in images),
                f"{output_type}:-",
            ],
            images,
        )
        return from_buffer(output_type, stdout)

    def convert(self, infile: MagickImage, outfile: MagickImage) -> None:
        """
        Write ``infile`` to the destination named by ``outfile``.

        Raises:
            ExternalToolError: If the tool cannot be run or exits non-zero
        """
        self._run([infile.name, outfile.name], [infile])
