from __future__ import annotations

from typing import TYPE_CHECKING, List

from .context import Command, CommandResult, Context
from .env import ProgramEnv
from .status import Status, is_success
from .streams import TextStream

if TYPE_CHECKING:
    from .controllers import Controller


class Sequence:
    """An ordered list of commands bound to one context and one controller.

    The controller decides how the steps are walked and how failures
    propagate. Setting ``context`` to ``None`` turns every operation into a
    no-op that returns zero values.
    """

    def __init__(
        self,
        *steps: Command,
        controller: "Controller" | None = None,
        context: Context | None = None,
    ) -> None:
        for step in steps:
            if not callable(step):
                raise TypeError(f"Sequence steps must be callable, got {step!r}.")
        self.context: Context | None = context if context is not None else Context()
        self.steps: List[Command] = list(steps)
        self.controller = controller
        self.status_code: int = Status.SUCCESS
        self.error: BaseException | None = None

    def exec(self) -> "Sequence":
        if self.context is None or self.controller is None:
            return self
        self.controller.run(self)
        return self

    def status_error(self) -> CommandResult:
        return self.status_code, self.error

    def okay(self) -> bool:
        return is_success(self.status_code) and self.error is None

    def expand(self, text: str) -> str:
        if self.context is None:
            return ProgramEnv().expand(text)
        return self.context.expand(text)

    def string(self) -> str:
        stream = self._result_stream()
        return stream.getvalue() if stream is not None else ""

    def strings(self) -> List[str]:
        stream = self._result_stream()
        return stream.strings() if stream is not None else []

    def trimmed_string(self) -> str:
        stream = self._result_stream()
        return stream.trimmed_string() if stream is not None else ""

    def bytes(self) -> bytes:
        return self.string().encode("utf-8")

    def parse_int(self) -> int:
        """Return the output as an integer; raises ``ValueError`` if it is not one."""
        stream = self._result_stream()
        if stream is None:
            return 0
        return stream.parse_int()

    def _result_stream(self) -> TextStream | None:
        if self.context is None:
            return None
        if self.controller is None:
            return self.context.stdout
        return self.controller.result_stream(self)

    def __repr__(self) -> str:
        controller = self.controller.name if self.controller is not None else None
        return (
            f"Sequence(controller={controller!r}, steps={len(self.steps)}, "
            f"status_code={self.status_code!r}, error={self.error!r})"
        )
