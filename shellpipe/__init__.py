"""In-process emulation of UNIX-style command pipelines and lists."""

import logging

from .engine import (
    Command,
    CommandExecutionError,
    Context,
    Controller,
    DevNull,
    EmptyKeyError,
    ListController,
    LocalEnv,
    NonZeroStatusError,
    OverlayEnv,
    PipelineController,
    ProgramEnv,
    Sequence,
    ShellPipeError,
    Status,
    TextBuffer,
    TextFile,
    TextStream,
    attach_os_stderr,
    attach_os_stdin,
    attach_os_stdout,
    discard_output,
    drain_stdin,
    echo,
    exit_with,
    new_list,
    new_pipeline,
)
from .visualize import visualize

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Command",
    "Context",
    "Sequence",
    "Controller",
    "ListController",
    "PipelineController",
    "new_list",
    "new_pipeline",
    "Status",
    "ShellPipeError",
    "NonZeroStatusError",
    "CommandExecutionError",
    "EmptyKeyError",
    "TextStream",
    "TextBuffer",
    "TextFile",
    "DevNull",
    "ProgramEnv",
    "LocalEnv",
    "OverlayEnv",
    "attach_os_stdin",
    "attach_os_stdout",
    "attach_os_stderr",
    "drain_stdin",
    "echo",
    "exit_with",
    "discard_output",
    "visualize",
]
