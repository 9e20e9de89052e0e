from __future__ import annotations

import io
import sys

from shellpipe import (
    Context,
    LocalEnv,
    Status,
    TextBuffer,
    TextFile,
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


def test_attach_os_streams_as_options(monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("typed input"))
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    monkeypatch.setattr(sys, "stderr", io.StringIO())

    context = Context(attach_os_stdin, attach_os_stdout, attach_os_stderr)

    assert isinstance(context.stdin, TextFile)
    assert context.status_error() == (Status.SUCCESS, None)

    context.run_command(drain_stdin)
    context.stderr.write("oops")

    assert sys.stdout.getvalue() == "typed input"
    assert sys.stderr.getvalue() == "oops"


def test_attach_os_stdout_as_command(capsys) -> None:
    context = Context()

    context.run_command(attach_os_stdout)
    context.run_command(echo("printed\n"))

    assert capsys.readouterr().out == "printed\n"
    assert context.okay()


def test_echo_expands_variables() -> None:
    context = Context(env=LocalEnv({"NAME": "world"}))

    sequence = new_list(echo("hello $NAME\n"), context=context).exec()

    assert sequence.string() == "hello world\n"


def test_exit_with_reports_status_and_message() -> None:
    pipeline = new_pipeline(echo("data"), exit_with(3, "it broke\n"), echo("never")).exec()

    assert pipeline.status_code == 3
    assert pipeline.error is not None
    assert pipeline.string() == "it broke\n"


def test_discard_output_hides_distinct_streams_and_restores_them() -> None:
    context = Context()
    stdout, stderr = context.stdout, context.stderr

    def chatty(ctx: Context):
        ctx.stdout.write("noise")
        ctx.stderr.write("more noise")
        return Status.SUCCESS, None

    context.run_command(discard_output(chatty))

    assert context.stdout is stdout
    assert context.stderr is stderr
    assert stdout.getvalue() == ""
    assert stderr.getvalue() == ""
    assert context.stdout_stack_len() == 0
    assert context.stderr_stack_len() == 0


def test_discard_output_keeps_aliased_streams_aliased() -> None:
    context = Context()
    shared = TextBuffer()
    context.stdout = shared
    context.stderr = shared

    context.run_command(discard_output(echo("noise")))

    assert context.stdout is shared
    assert context.stderr is shared
    assert shared.getvalue() == ""


def test_discard_output_restores_streams_when_command_raises() -> None:
    context = Context()
    stdout = context.stdout

    def explode(ctx: Context):
        raise RuntimeError("boom")

    context.run_command(discard_output(explode))

    assert context.stdout is stdout
    assert context.stdout_stack_len() == 0
    assert context.status_code == Status.FAILURE


def test_discard_output_keeps_command_name() -> None:
    def quiet(ctx: Context):
        return Status.SUCCESS, None

    assert discard_output(quiet).__name__ == "quiet"
