"""
magickscript command handlers.

This package maps script command names to the handlers that update the
build-time configuration.
"""

from magickscript.commands.handlers import (
    COMMANDS,
    CommandKind,
    FactoryCommand,
    ImgCommand,
    MiffCommand,
    RangeCommand,
    VarCommand,
    get_command,
    parse_int,
    split_args,
)

__all__ = [
    "COMMANDS",
    "CommandKind",
    "FactoryCommand",
    "ImgCommand",
    "MiffCommand",
    "RangeCommand",
    "VarCommand",
    "get_command",
    "parse_int",
    "split_args",
]
