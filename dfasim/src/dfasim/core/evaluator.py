"""
Evaluation of one input string against an AutomatonModel.

run() is pure: it reads the model, builds a fresh trace and touches no
other state, so it can be called concurrently on a shared model.
"""

from __future__ import annotations

from dfasim.core.model import AutomatonModel
from dfasim.core.types import (
    EvaluationResult,
    RunStatus,
    SymbolNotInAlphabet,
    TransitionStep,
    Verdict,
)


def _verdict(model: AutomatonModel, state: int) -> Verdict:
    return Verdict.ACCEPTED if model.is_accepting(state) else Verdict.REJECTED


def run(model: AutomatonModel, text: str) -> EvaluationResult:
    """
    Simulate ``model`` on ``text`` starting from state 0.

    Symbols are consumed left to right. The first symbol outside the
    alphabet halts the run: the result is rejected, carries a
    SymbolNotInAlphabet failure and an empty trace, and nothing after that
    symbol is read. Otherwise every symbol contributes one TransitionStep and
    the verdict is decided by whether the final state is accepting.

    Args:
        model: Validated automaton.
        text: Input string; the empty string is valid.

    Returns:
        EvaluationResult with trace, verdict and final state.
    """
    state = model.initial_state
    status = RunStatus.RUNNING
    steps: list[TransitionStep] = []

    for position, symbol in enumerate(text):
        column = model.symbol_index(symbol)
        if column is None:
            status = RunStatus.HALTED_ON_INVALID_SYMBOL
            return EvaluationResult(
                text=text,
                trace=(),
                verdict=Verdict.REJECTED,
                final_state=state,
                status=status,
                failure=SymbolNotInAlphabet(state=state, symbol=symbol, position=position),
            )

        next_state = int(model.table[state, column])
        steps.append(
            TransitionStep(
                from_state=state,
                symbol=symbol,
                to_state=next_state,
                position=position,
                source=text,
            )
        )
        state = next_state

    status = RunStatus.COMPLETED
    return EvaluationResult(
        text=text,
        trace=tuple(steps),
        verdict=_verdict(model, state),
        final_state=state,
        status=status,
    )
