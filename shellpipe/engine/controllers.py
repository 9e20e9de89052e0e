from __future__ import annotations

from abc import ABC, abstractmethod
import logging

from .context import Command, Context, command_name
from .sequence import Sequence
from .status import NonZeroStatusError, is_success
from .streams import TextStream

logger = logging.getLogger(__name__)


class Controller(ABC):
    """Strategy that decides how a sequence's steps run and how failures propagate."""

    name = "controller"

    @abstractmethod
    def run(self, sequence: Sequence) -> None:
        """Walk the sequence's steps against its context."""

    def result_stream(self, sequence: Sequence) -> TextStream | None:
        """Stream whose contents represent the sequence's result."""
        if sequence.context is None:
            return None
        return sequence.context.stdout

    def _usable_context(self, sequence: Sequence) -> Context | None:
        context = sequence.context
        if context is None or context.stdin is None or context.stdout is None:
            return None
        return context

    def _finish(self, sequence: Sequence) -> None:
        if not is_success(sequence.status_code) and sequence.error is None:
            sequence.error = NonZeroStatusError(sequence.status_code, self.name)
        logger.debug(
            "%s finished with status %s (error: %s)", self.name, sequence.status_code, sequence.error
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ListController(Controller):
    """Runs every step like a shell ``;`` list, whatever the earlier steps returned."""

    name = "list"

    def run(self, sequence: Sequence) -> None:
        context = self._usable_context(sequence)
        if context is None:
            return

        for step in sequence.steps:
            context.run_command(step)
            sequence.status_code, sequence.error = context.status_error()

        self._finish(sequence)


class PipelineController(Controller):
    """Runs steps like a shell ``|`` pipeline, stopping at the first failure.

    Before each step the previous stdout becomes the new stdin, and the step
    starts with empty stdout and stderr. After a failure, stdout and stderr
    hold only what the failing step wrote.
    """

    name = "pipeline"

    def run(self, sequence: Sequence) -> None:
        context = self._usable_context(sequence)
        if context is None:
            return

        for index, step in enumerate(sequence.steps):
            context.rotate()
            context.run_command(step)
            sequence.status_code, sequence.error = context.status_error()

            if sequence.error is not None:
                logger.info(
                    "pipeline halted at step %d (%s): %s",
                    index + 1,
                    command_name(step),
                    sequence.error,
                )
                return

        self._finish(sequence)

    def result_stream(self, sequence: Sequence) -> TextStream | None:
        if sequence.context is None:
            return None
        if sequence.error is not None:
            return sequence.context.stderr
        return sequence.context.stdout


def new_list(*steps: Command, context: Context | None = None) -> Sequence:
    return Sequence(*steps, controller=ListController(), context=context)


def new_pipeline(*steps: Command, context: Context | None = None) -> Sequence:
    return Sequence(*steps, controller=PipelineController(), context=context)
