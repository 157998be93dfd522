"""
Handlers for the script commands.

Each recognized command name maps to a FactoryCommand that interprets the
raw argument text of one line and records the result on a ContextFactory.
"""

import logging
import re
import warnings
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from magickscript.core.ranges import AxisRange, RangeSpec
from magickscript.exceptions import (
    InvalidArgumentCountError,
    NotAnIntegerError,
    PatternMismatchWarning,
)

if TYPE_CHECKING:
    from magickscript.structure.builder import ContextFactory

logger = logging.getLogger(__name__)

SEPARATOR = re.compile(r"\s+")

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


class CommandKind(Enum):
    """Commands understood by the factory."""

    VAR = "var"
    RANGE = "range"
    IMG = "img"
    MIFF = "miff"


def split_args(args: str) -> list[str]:
    """Split argument text on whitespace runs, dropping empty fields."""
    return [token for token in SEPARATOR.split(args) if token]


def parse_int(command: str, token: str) -> int:
    """
    Parse a base-10 integer token.

    Raises:
        NotAnIntegerError: If the token is not an optionally signed run of digits
    """
    if not INTEGER_PATTERN.match(token):
        raise NotAnIntegerError(command, token)
    return int(token)


class FactoryCommand(ABC):
    """Strategy interpreting one command line against a ContextFactory."""

    kind: CommandKind

    @abstractmethod
    def handle(self, factory: "ContextFactory", args: str) -> None:
        """
        Apply the command to the factory.

        Params:
            factory: Build-time configuration to update
            args: Raw argument text following the command name
        """


class VarCommand(FactoryCommand):
    """``var NAME="VALUE"``"""

    kind = CommandKind.VAR

    PATTERN = re.compile(r'^(?P<name>[A-Za-z]\w*)="(?P<value>.+)"\s*$')

    def handle(self, factory: "ContextFactory", args: str) -> None:
        match = self.PATTERN.match(args)
        if match is None:
            warnings.warn(
                f"Skipping var command that does not match NAME=\"VALUE\": {args!r}",
                PatternMismatchWarning,
                stacklevel=2,
            )
            return
        factory.set_var(match.group("name"), match.group("value"))


class RangeCommand(FactoryCommand):
    """``range AXIS START END STEP``"""

    kind = CommandKind.RANGE

    ARG_COUNT = 4

    def handle(self, factory: "ContextFactory", args: str) -> None:
        tokens = split_args(args)
        if len(tokens) < self.ARG_COUNT:
            raise InvalidArgumentCountError(
                self.kind.value, self.ARG_COUNT, len(tokens)
            )
        if len(tokens) > self.ARG_COUNT:
            logger.warning(
                "Ignoring extra range arguments: %s", " ".join(tokens[self.ARG_COUNT :])
            )
        axis, *numbers = tokens[: self.ARG_COUNT]
        start, end, step = (parse_int(self.kind.value, token) for token in numbers)
        factory.set_range(AxisRange(axis, RangeSpec(start, end, step)))


class ImgCommand(FactoryCommand):
    """``img NAME PATH``"""

    kind = CommandKind.IMG

    ARG_COUNT = 2

    def handle(self, factory: "ContextFactory", args: str) -> None:
        tokens = split_args(args)
        if len(tokens) < self.ARG_COUNT:
            raise InvalidArgumentCountError(
                self.kind.value, self.ARG_COUNT, len(tokens)
            )
        name, *path = tokens
        factory.set_img(name, "".join(path))


class MiffCommand(FactoryCommand):
    """``miff PATH``, the image the composition starts from."""

    kind = CommandKind.MIFF

    def handle(self, factory: "ContextFactory", args: str) -> None:
        factory.miff = "".join(split_args(args))


COMMANDS: dict[CommandKind, FactoryCommand] = {
    command.kind: command
    for command in (VarCommand(), RangeCommand(), ImgCommand(), MiffCommand())
}


def get_command(name: str) -> FactoryCommand | None:
    """
    Look up the handler for a command name.

    Returns:
        The handler, or None for an unrecognized name
    """
    try:
        return COMMANDS[CommandKind(name)]
    except ValueError:
        return None
