"""
Immutable execution context built from a script.

The Context holds the variable table, the resolved named images, the
optional initial image and the ordered axis ranges. It is created once by
ContextFactory.build() and only read afterwards, so it can be shared freely.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from attrs import field, frozen

from magickscript.core.ranges import AxisRange, generate
from magickscript.core.types import Coordinate
from magickscript.exceptions import UndefinedVariableError, UnknownImageError
from magickscript.imaging.image import MagickImage


def _read_only(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


def iter_coordinates(axes: tuple[AxisRange, ...]) -> Iterator[Coordinate]:
    """
    Lazily walk the Cartesian product of the axis ranges.

    The first axis is the outermost loop and varies slowest. Inner ranges
    are regenerated for each outer value, so nothing is materialized and
    nothing is shared between passes.

    Params:
        axes: Axis ranges in nesting order

    Returns:
        Iterator of coordinates; exactly one empty coordinate for no axes
    """
    if not axes:
        yield {}
        return
    head, rest = axes[0], axes[1:]
    for value in generate(head.spec):
        for tail in iter_coordinates(rest):
            yield {head.axis: value, **tail}


@frozen
class Context:
    """Read-only result of running a script.

    Params:
        variables: Variable name -> value
        images: Image name -> resolved image
        axes: Axis ranges in first-registration order
        initial_image: Image the composition starts from, if declared
    """

    variables: Mapping[str, str] = field(factory=dict, converter=_read_only)
    images: Mapping[str, MagickImage] = field(factory=dict, converter=_read_only)
    axes: tuple[AxisRange, ...] = field(factory=tuple, converter=tuple)
    initial_image: MagickImage | None = None

    @property
    def axis_names(self) -> tuple[str, ...]:
        return tuple(axis.axis for axis in self.axes)

    def has_var(self, name: str) -> bool:
        return name in self.variables

    def get_var(self, name: str) -> str:
        """
        Get a variable value.

        Raises:
            UndefinedVariableError: If the variable was never declared
        """
        try:
            return self.variables[name]
        except KeyError:
            raise UndefinedVariableError(name, sorted(self.variables)) from None

    def has_img(self, name: str) -> bool:
        return name in self.images

    def get_img(self, name: str) -> MagickImage:
        """
        Get a named image.

        Raises:
            UnknownImageError: If no image was registered under the name
        """
        try:
            return self.images[name]
        except KeyError:
            raise UnknownImageError(name, sorted(self.images)) from None

    def coordinates(self) -> Iterator[Coordinate]:
        """Start a new pass over every coordinate of the axis ranges."""
        return iter_coordinates(self.axes)

    def __iter__(self) -> Iterator[Coordinate]:
        return self.coordinates()
