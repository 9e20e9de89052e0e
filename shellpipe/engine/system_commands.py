"""Ready-made commands. The ``attach_os_*`` functions also work as context options."""

from __future__ import annotations

import sys
from functools import wraps

from .context import Command, CommandResult, Context
from .status import Status
from .streams import DevNull, TextFile


def attach_os_stdin(context: Context) -> CommandResult:
    context.stdin = TextFile(sys.stdin)
    return Status.SUCCESS, None


def attach_os_stdout(context: Context) -> CommandResult:
    context.stdout = TextFile(sys.stdout)
    return Status.SUCCESS, None


def attach_os_stderr(context: Context) -> CommandResult:
    context.stderr = TextFile(sys.stderr)
    return Status.SUCCESS, None


def drain_stdin(context: Context) -> CommandResult:
    """Copy whatever is left on stdin to stdout, like ``cat`` with no arguments."""
    context.drain_stdin_to_stdout()
    return Status.SUCCESS, None


def echo(text: str) -> Command:
    """Build a command that writes ``text`` (expanded against the environment) to stdout."""

    def _echo(context: Context) -> CommandResult:
        context.stdout.write(context.expand(text))
        return Status.SUCCESS, None

    _echo.__name__ = "echo"
    return _echo


def exit_with(status_code: int, message: str | None = None) -> Command:
    """Build a command that optionally writes ``message`` to stderr and returns ``status_code``."""

    def _exit(context: Context) -> CommandResult:
        if message and context.stderr is not None:
            context.stderr.write(message)
        return status_code, None

    _exit.__name__ = "exit"
    return _exit


def discard_output(command: Command) -> Command:
    """Wrap ``command`` so that its stdout and stderr go to a discard sink.

    While redirected both roles point at the same sink, so roles that were
    distinct beforehand are restored one at a time with the ``*_only`` pops.
    """

    @wraps(command)
    def _discarding(context: Context) -> CommandResult:
        sink = DevNull()
        aliased = context.stdout is context.stderr
        context.push_stdout(sink)
        if not aliased:
            context.push_stderr(sink)
        try:
            return command(context)
        finally:
            if aliased:
                context.pop_stdout()
            else:
                context.pop_stderr_only()
                context.pop_stdout_only()

    return _discarding
