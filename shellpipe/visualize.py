from __future__ import annotations

from typing import List

from .engine import Sequence, command_name


def visualize(sequence: Sequence) -> str:
    """
    Produce a human-readable listing of a sequence's controller and steps.
    """
    lines: List[str] = [_describe_sequence(sequence)]
    joiner = _step_joiner(sequence)
    for index, step in enumerate(sequence.steps):
        prefix = "  " if index == 0 else f"{joiner} "
        lines.append(f"{prefix}{command_name(step)}")
    return "\n".join(lines)


def _describe_sequence(sequence: Sequence) -> str:
    controller = sequence.controller
    kind = controller.name if controller is not None else "sequence"
    base = f"{kind} ({controller.__class__.__name__ if controller is not None else 'no controller'})"

    details: List[str] = [f"steps={len(sequence.steps)}"]
    if sequence.context is None:
        details.append("no context")
    if sequence.error is not None:
        details.append(f"status={int(sequence.status_code)}")
        details.append(f"error={sequence.error}")

    return f"{base} [{' | '.join(details)}]"


def _step_joiner(sequence: Sequence) -> str:
    controller = sequence.controller
    if controller is not None and controller.name == "pipeline":
        return "|"
    if controller is not None and controller.name == "list":
        return ";"
    return " "
