from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Tuple

from .env import Expander, ProgramEnv
from .status import CommandExecutionError, NonZeroStatusError, Status, is_success
from .streams import TextBuffer, TextStream

logger = logging.getLogger(__name__)

CommandResult = Tuple[int, Optional[BaseException]]
Command = Callable[["Context"], CommandResult]
ContextOption = Callable[["Context"], Any]


def command_name(command: Callable[..., Any]) -> str:
    name = getattr(command, "__name__", None)
    if name:
        return name
    return type(command).__name__


class Context:
    """Carries stdin/stdout/stderr, an environment and the last status/error between commands."""

    def __init__(
        self,
        *options: ContextOption,
        env: Expander | None = None,
        flags: int = 0,
    ) -> None:
        self.stdin: TextStream | None = None
        self.stdout: TextStream | None = None
        self.stderr: TextStream | None = None
        self.env: Expander = env if env is not None else ProgramEnv()
        # bitmask for commands to interpret however they like
        self.flags = flags
        self._status_code: int = Status.SUCCESS
        self._error: BaseException | None = None
        self._stdin_stack: List[TextStream | None] = []
        self._stdout_stack: List[TextStream | None] = []
        self._stderr_stack: List[TextStream | None] = []

        self.reset_buffers()
        self.reset_error()

        for option in options:
            if not callable(option):
                raise TypeError(f"Context options must be callable, got {option!r}.")
            option(self)

    # status and error

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def error(self) -> BaseException | None:
        return self._error

    def okay(self) -> bool:
        return self._error is None

    def status_error(self) -> CommandResult:
        return self._status_code, self._error

    def set_status_error(self, status_code: int, error: BaseException | None = None) -> None:
        """Record an outcome, synthesising an error for a silent failure."""
        if not is_success(status_code) and error is None:
            error = NonZeroStatusError(status_code, "command")
        self._status_code = status_code
        self._error = error

    def reset_error(self) -> None:
        self._status_code = Status.SUCCESS
        self._error = None

    def expand(self, text: str) -> str:
        return self.env.expand(text)

    # command execution

    def run_command(self, command: Command) -> None:
        """Run one command against this context and record what it returned."""
        if self.stdin is None or self.stdout is None:
            return

        name = command_name(command)
        try:
            result = command(self)
        except Exception as exc:
            logger.debug("command %s raised %s", name, exc, exc_info=True)
            error = CommandExecutionError(name, f"raised {type(exc).__name__}: {exc}")
            error.__cause__ = exc
            self.set_status_error(Status.FAILURE, error)
            return

        status_code, error = self._unpack_result(name, result)
        self.set_status_error(status_code, error)
        logger.debug("command %s finished with status %s", name, self._status_code)

    def _unpack_result(self, name: str, result: Any) -> CommandResult:
        if not isinstance(result, tuple) or len(result) != 2:
            return Status.FAILURE, CommandExecutionError(name, f"returned a malformed result: {result!r}")

        status_code, error = result
        if not isinstance(status_code, int):
            return Status.FAILURE, CommandExecutionError(
                name, f"returned a non-integer status code: {status_code!r}"
            )
        if error is not None and not isinstance(error, BaseException):
            return Status.FAILURE, CommandExecutionError(
                name, f"returned a non-exception error value: {error!r}"
            )
        return status_code, error

    # buffers

    def reset_buffers(self) -> None:
        """Give every role a fresh empty buffer and forget any pushed redirections."""
        self.set_new_stdin()
        self.set_new_stdout()
        self.set_new_stderr()
        self._stdin_stack.clear()
        self._stdout_stack.clear()
        self._stderr_stack.clear()

    def rotate(self) -> None:
        """Make the current stdout the next stdin, with fresh stdout and stderr."""
        if self.stdout is None:
            return
        self.stdin = self.stdout.new_source()
        self.set_new_stdout()
        self.set_new_stderr()

    def drain_stdin_to_stdout(self) -> None:
        if self.stdin is None:
            return
        if self.stdout is None:
            self.set_new_stdout()
        self.stdout.write(self.stdin.read())

    # stdin

    def set_new_stdin(self) -> None:
        self.stdin = TextBuffer()

    def set_stdin_from_string(self, text: str) -> None:
        self.stdin = TextBuffer(text)

    def push_stdin(self, stream: TextStream) -> None:
        self._stdin_stack.append(self.stdin)
        self.stdin = stream

    def pop_stdin(self) -> None:
        if not self._stdin_stack:
            return
        self.stdin = self._stdin_stack.pop()

    def stdin_stack_len(self) -> int:
        return len(self._stdin_stack)

    # stdout

    def set_new_stdout(self) -> None:
        self.stdout = TextBuffer()

    def push_stdout(self, stream: TextStream) -> None:
        """Redirect stdout to ``stream``; an aliased stderr follows it."""
        if self.stdout is self.stderr:
            self.stderr = stream
        self._stdout_stack.append(self.stdout)
        self.stdout = stream

    def pop_stdout(self) -> None:
        """Restore the previous stdout; an aliased stderr is restored with it."""
        if not self._stdout_stack:
            return
        previous = self._stdout_stack.pop()
        if self.stdout is self.stderr:
            self.stderr = previous
        self.stdout = previous

    def pop_stdout_only(self) -> None:
        if not self._stdout_stack:
            return
        self.stdout = self._stdout_stack.pop()

    def stdout_stack_len(self) -> int:
        return len(self._stdout_stack)

    # stderr

    def set_new_stderr(self) -> None:
        self.stderr = TextBuffer()

    def push_stderr(self, stream: TextStream) -> None:
        """Redirect stderr to ``stream``; an aliased stdout follows it."""
        if self.stderr is self.stdout:
            self.stdout = stream
        self._stderr_stack.append(self.stderr)
        self.stderr = stream

    def pop_stderr(self) -> None:
        """Restore the previous stderr; an aliased stdout is restored with it."""
        if not self._stderr_stack:
            return
        previous = self._stderr_stack.pop()
        if self.stderr is self.stdout:
            self.stdout = previous
        self.stderr = previous

    def pop_stderr_only(self) -> None:
        if not self._stderr_stack:
            return
        self.stderr = self._stderr_stack.pop()

    def stderr_stack_len(self) -> int:
        return len(self._stderr_stack)

    def __repr__(self) -> str:
        return (
            f"Context(status_code={self._status_code!r}, error={self._error!r}, "
            f"stacks=({self.stdin_stack_len()}, {self.stdout_stack_len()}, {self.stderr_stack_len()}))"
        )
