"""
magickscript exception classes.

This package provides all exception types used throughout magickscript for
consistent error handling and reporting.
"""

from magickscript.exceptions.core import (
    ErrorContext,
    ExternalToolError,
    InvalidArgumentCountError,
    InvalidStepError,
    MagickScriptError,
    MalformedCommandError,
    NotAnIntegerError,
    PatternMismatchWarning,
    ScriptDecodeError,
    UndefinedVariableError,
    UnknownImageError,
)

__all__ = [
    "ErrorContext",
    "MagickScriptError",
    "MalformedCommandError",
    "InvalidArgumentCountError",
    "NotAnIntegerError",
    "InvalidStepError",
    "PatternMismatchWarning",
    "ScriptDecodeError",
    "UndefinedVariableError",
    "UnknownImageError",
    "ExternalToolError",
]
