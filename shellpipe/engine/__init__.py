"""Execution context, redirection stacks and sequencing controllers."""

from .context import Command, CommandResult, Context, ContextOption, command_name
from .controllers import Controller, ListController, PipelineController, new_list, new_pipeline
from .env import Expander, LocalEnv, OverlayEnv, ProgramEnv
from .sequence import Sequence
from .status import (
    CommandExecutionError,
    EmptyKeyError,
    NonZeroStatusError,
    ShellPipeError,
    Status,
)
from .streams import DevNull, TextBuffer, TextFile, TextStream
from .system_commands import (
    attach_os_stderr,
    attach_os_stdin,
    attach_os_stdout,
    discard_output,
    drain_stdin,
    echo,
    exit_with,
)

__all__ = [
    "Command",
    "CommandResult",
    "Context",
    "ContextOption",
    "command_name",
    "Controller",
    "ListController",
    "PipelineController",
    "new_list",
    "new_pipeline",
    "Expander",
    "LocalEnv",
    "OverlayEnv",
    "ProgramEnv",
    "Sequence",
    "CommandExecutionError",
    "EmptyKeyError",
    "NonZeroStatusError",
    "ShellPipeError",
    "Status",
    "DevNull",
    "TextBuffer",
    "TextFile",
    "TextStream",
    "attach_os_stderr",
    "attach_os_stdin",
    "attach_os_stdout",
    "discard_output",
    "drain_stdin",
    "echo",
    "exit_with",
]
