"""
Console rendering of evaluation results.

Each step is printed as ``state,remaining -> next,rest``; the step that
consumes the last symbol shows the empty-input marker in place of ``rest``:

    >>>Computation...
    0,ab -> 1,b
    1,b -> 1,{ε}
    ACCEPTED
"""

from __future__ import annotations

from dfasim.core.types import EvaluationResult, TransitionStep

EPSILON = "{ε}"
COMPUTATION_HEADER = ">>>Computation..."


def format_step(step: TransitionStep) -> str:
    rest = EPSILON if step.exhausted else step.rest
    return f"{step.from_state},{step.remaining} -> {step.to_state},{rest}"


def format_result(result: EvaluationResult, show_trace: bool = True) -> list[str]:
    lines = []
    if show_trace:
        lines.append(COMPUTATION_HEADER)
        if result.failure is not None:
            lines.append(f"{result.failure.state},{result.failure.symbol} -> INVALID INPUT")
        else:
            lines.extend(format_step(step) for step in result.trace)
    lines.append(result.verdict.value)
    return lines
