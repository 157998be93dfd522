"""
Exception classes for magickscript script processing.

This module defines specific exception types for the error conditions that
can occur while parsing a script, building its Context, reading values back
out of the Context and driving the external image tool.
"""

from dataclasses import dataclass


@dataclass
class ErrorContext:
    """
    Location information for error messages.

    Captures where in the script an error originated so that a failure in a
    command handler can be reported against the line that triggered it.

    Params:
        line: 1-based line number within the script
        command_text: The original command text that caused the error
    """

    line: int | None = None
    command_text: str | None = None

    def format_location(self) -> str:
        """
        Format location information for display.

        Returns:
            Formatted location string, empty when nothing is known
        """
        lines = []

        if self.line is not None:
            lines.append(f"  at line {self.line}")

        if self.command_text:
            lines.append(f"  command: {self.command_text}")

        return "\n".join(lines)


class MagickScriptError(Exception):
    """Base exception for all magickscript errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(message)

    @property
    def line(self) -> int | None:
        """Script line the error is attached to, if any."""
        return self.context.line if self.context else None

    def attach(self, context: ErrorContext) -> "MagickScriptError":
        """
        Attach script location to an error raised without one.

        An existing context is kept so that the innermost location wins.

        Params:
            context: Location to attach

        Returns:
            The same exception, for use in a raise statement
        """
        if self.context is None:
            self.context = context
        return self

    def __str__(self) -> str:
        if self.context is None:
            return self.message
        location = self.context.format_location()
        return f"{self.message}\n{location}" if location else self.message


class MalformedCommandError(MagickScriptError):
    """Raised when a command line cannot be interpreted. Always fatal."""

    def __init__(self, command: str, reason: str):
        """
        Initialize the exception.

        Params:
            command: Name of the command being interpreted
            reason: Why the command is malformed
        """
        self.command = command
        self.reason = reason
        super().__init__(f"Malformed '{command}' command: {reason}")


class InvalidArgumentCountError(MalformedCommandError):
    """Raised when a command receives fewer arguments than it requires."""

    def __init__(self, command: str, expected: int, actual: int):
        """
        Initialize the exception.

        Params:
            command: Name of the command being interpreted
            expected: Minimum number of arguments required
            actual: Number of arguments found
        """
        self.expected = expected
        self.actual = actual
        super().__init__(
            command, f"expected at least {expected} arguments, got {actual}"
        )


class NotAnIntegerError(MalformedCommandError):
    """Raised when a numeric argument is not a base-10 integer."""

    def __init__(self, command: str, value: str):
        """
        Initialize the exception.

        Params:
            command: Name of the command being interpreted
            value: The offending token
        """
        self.value = value
        super().__init__(command, f"expected '{value}' to be an integer")


class InvalidStepError(MalformedCommandError):
    """Raised when a range is declared with a zero step."""

    def __init__(self, command: str = "range"):
        super().__init__(command, "step must be non-zero")


class PatternMismatchWarning(UserWarning):
    """Category for command lines skipped because they did not match their pattern."""


class UndefinedVariableError(MagickScriptError):
    """Raised when a variable that was never declared is requested."""

    def __init__(self, name: str, available: list[str] | None = None):
        """
        Initialize the exception.

        Params:
            name: Requested variable name
            available: Variable names that are defined
        """
        self.name = name
        self.available = available or []
        message = f"Undefined variable: '{name}'"
        if self.available:
            message += f". Available variables: {', '.join(self.available)}"
        super().__init__(message)


class UnknownImageError(MagickScriptError):
    """Raised when an image name that was never registered is requested."""

    def __init__(self, name: str, available: list[str] | None = None):
        """
        Initialize the exception.

        Params:
            name: Requested image name
            available: Image names that are registered
        """
        self.name = name
        self.available = available or []
        message = f"Unknown img: '{name}'"
        if self.available:
            message += f". Available images: {', '.join(self.available)}"
        super().__init__(message)


class ExternalToolError(MagickScriptError):
    """Raised when the external image tool fails or cannot be started."""

    def __init__(
        self,
        command: list[str],
        returncode: int | None = None,
        stderr: str = "",
    ):
        """
        Initialize the exception.

        Params:
            command: Command line that was executed
            returncode: Process exit code, None when the process never started
            stderr: Decoded standard error output of the tool
        """
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"Cannot run '{command[0]}'"
        else:
            message = f"ImageMagick error {returncode}"
        if stderr:
            message += f": {stderr.strip()}"
        super().__init__(message)


class ScriptDecodeError(MagickScriptError):
    """Raised when script input is not valid text in the expected encoding."""

    def __init__(self, encoding: str, reason: str):
        """
        Initialize the exception.

        Params:
            encoding: Encoding the script was decoded with
            reason: Decoder failure description
        """
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"Script is not valid {encoding}: {reason}")
