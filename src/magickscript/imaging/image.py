"""
Image references handed to the external image tool.

An image is identified by the name the tool understands (a path, or a
``type:-`` pseudo-file read from standard input) and carries the bytes to
feed on standard input, if any.
"""

from attrs import field, frozen


@frozen
class MagickImage:
    """A named image, optionally backed by in-memory content."""

    name: str
    content: bytes = field(default=b"", repr=lambda content: f"<{len(content)} bytes>")

    @property
    def is_buffered(self) -> bool:
        return self.name.endswith(":-")


def from_file(locator: str) -> MagickImage:
    """Reference an image the tool reads on its own from ``locator``."""
    return MagickImage(locator)


def from_buffer(image_type: str, buffer: bytes) -> MagickImage:
    """
    Wrap tool output as an image fed back through standard input.

    Params:
        image_type: ImageMagick format prefix (e.g. "miff", "png")
        buffer: Encoded image bytes

    Returns:
        Image named ``<image_type>:-`` holding the buffer
    """
    return MagickImage(f"{image_type}:-", bytes(buffer))
