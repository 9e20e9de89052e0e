from __future__ import annotations

from enum import IntEnum


class Status(IntEnum):
    """UNIX-style status codes. Any non-zero code is a failure."""

    SUCCESS = 0
    FAILURE = 1


class ShellPipeError(RuntimeError):
    """Base class for errors recorded by a context or sequence."""


class NonZeroStatusError(ShellPipeError):
    """Recorded when something reports a failing status without an error."""

    def __init__(self, status_code: int, source: str = "command") -> None:
        super().__init__(f"{source} exited with non-zero status code {status_code}")
        self.status_code = status_code
        self.source = source


class CommandExecutionError(ShellPipeError):
    """Raised inside a command, or a command returned malformed data."""

    def __init__(self, command_name: str, message: str) -> None:
        super().__init__(f"Command '{command_name}' {message}")
        self.command_name = command_name


class EmptyKeyError(ShellPipeError, ValueError):
    """Environment variable names cannot be blank."""

    def __init__(self) -> None:
        super().__init__("Environment variable name must not be empty.")


def is_success(status_code: int) -> bool:
    return status_code == Status.SUCCESS
