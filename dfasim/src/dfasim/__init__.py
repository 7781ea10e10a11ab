"""
dfasim: deterministic finite automaton interpreter.

Build an AutomatonModel from a description, then run strings through it:

    >>> from dfasim import build, run, RawDescription
    >>> model = build(RawDescription(2, [1], ["a", "b"], [[1, 0], [1, 1]]))
    >>> run(model, "ab").verdict
    <Verdict.ACCEPTED: 'ACCEPTED'>
"""

__version__ = "0.1.0"

from dfasim.core.errors import (
    ConstructionError,
    DescriptionFormatError,
    DuplicateSymbol,
    InvalidAcceptingState,
    InvalidTargetState,
    MalformedColumnCount,
    MalformedCount,
    MalformedRow,
    MalformedSymbol,
)
from dfasim.core.evaluator import run
from dfasim.core.model import AutomatonModel, build
from dfasim.core.types import (
    EvaluationResult,
    RawDescription,
    RunStatus,
    SymbolNotInAlphabet,
    TransitionStep,
    Verdict,
)

__all__ = [
    "AutomatonModel",
    "ConstructionError",
    "DescriptionFormatError",
    "DuplicateSymbol",
    "EvaluationResult",
    "InvalidAcceptingState",
    "InvalidTargetState",
    "MalformedColumnCount",
    "MalformedCount",
    "MalformedRow",
    "MalformedSymbol",
    "RawDescription",
    "RunStatus",
    "SymbolNotInAlphabet",
    "TransitionStep",
    "Verdict",
    "build",
    "run",
]
