"""
Build-time configuration for a script run.

ContextFactory accumulates variables, axis ranges, image locators and the
initial image while a script is parsed, then freezes them into a Context.
"""

import logging

from magickscript.commands.handlers import get_command
from magickscript.core.ranges import AxisRange
from magickscript.core.types import ImageLoader
from magickscript.exceptions import ErrorContext, MagickScriptError
from magickscript.imaging.image import from_file
from magickscript.structure.context import Context

logger = logging.getLogger(__name__)


class ContextFactory:
    """Mutable builder of a Context.

    Only the single parsing pass writes to a factory. Axis ranges keep the
    position of their first declaration; re-declaring an axis replaces its
    spec in place.
    """

    def __init__(self):
        self._vars: dict[str, str] = {}
        self._ranges: dict[str, AxisRange] = {}
        self._imgs: dict[str, str] = {}
        self._miff: str | None = None

    @property
    def miff(self) -> str | None:
        """Locator of the initial image, None when unset."""
        return self._miff

    @miff.setter
    def miff(self, value: str | None) -> None:
        self._miff = value if value else None

    @property
    def variables(self) -> dict[str, str]:
        return dict(self._vars)

    @property
    def ranges(self) -> list[AxisRange]:
        return list(self._ranges.values())

    @property
    def images(self) -> dict[str, str]:
        return dict(self._imgs)

    def set_var(self, name: str, value: str) -> "ContextFactory":
        self._vars[name] = value
        return self

    def set_range(self, axis_range: AxisRange) -> "ContextFactory":
        # dict assignment keeps the original insertion position
        self._ranges[axis_range.axis] = axis_range
        return self

    def set_img(self, name: str, locator: str) -> "ContextFactory":
        self._imgs[name] = locator
        return self

    def run(self, command: str, args: str, line: int | None = None) -> None:
        """
        Interpret one command line.

        Unknown commands are logged and skipped.

        Params:
            command: Command name
            args: Raw argument text
            line: 1-based script line, attached to any error raised

        Raises:
            MagickScriptError: If the handler rejects the line
        """
        handler = get_command(command)
        if handler is None:
            logger.warning(
                "Skipping unknown command '%s'%s",
                command,
                f" at line {line}" if line is not None else "",
            )
            return
        try:
            handler.handle(self, args)
        except MagickScriptError as e:
            raise e.attach(
                ErrorContext(line=line, command_text=f"{command} {args}".rstrip())
            )

    def build(self, loader: ImageLoader = from_file) -> Context:
        """
        Freeze the configuration into a Context.

        The factory is left untouched and may be built again.

        Params:
            loader: Resolves image locators to images

        Returns:
            Immutable Context for the script
        """
        images = {name: loader(locator) for name, locator in self._imgs.items()}
        initial_image = loader(self._miff) if self._miff is not None else None
        return Context(
            variables=self._vars,
            images=images,
            axes=tuple(self._ranges.values()),
            initial_image=initial_image,
        )
