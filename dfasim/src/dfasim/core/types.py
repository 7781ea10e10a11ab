"""
Core types for dfasim: RawDescription, TransitionStep, Verdict, RunStatus,
SymbolNotInAlphabet, EvaluationResult.

Pure data containers. No evaluation logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Sequence


class Verdict(Enum):
    """Outcome of evaluating one input string."""

    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class RunStatus(Enum):
    """Control state of a single evaluation run."""

    RUNNING = "running"
    HALTED_ON_INVALID_SYMBOL = "halted_on_invalid_symbol"
    COMPLETED = "completed"


@dataclass(frozen=True)
class RawDescription:
    """
    Unvalidated automaton description as handed over by a loader.

    Values are kept exactly as read (ints or strings); parsing and range
    checks happen in ``build``.
    """

    state_count: Any
    accepting_states: Sequence[Any]
    alphabet: Sequence[Any]
    transitions: Sequence[Sequence[Any]]


@dataclass(frozen=True)
class TransitionStep:
    """
    One step of a run: ``symbol`` read at ``position`` of ``source``.

    Every step of a run references the same ``source`` string; suffixes are
    sliced on demand. ``remaining`` is the unread input before ``symbol``
    was consumed, so the first step of "ab" has remaining "ab" and the
    second "b".
    """

    from_state: int
    symbol: str
    to_state: int
    position: int
    source: str = field(repr=False, compare=False)

    def __post_init__(self):
        if len(self.symbol) != 1:
            raise ValueError("symbol must be a single character")
        if not (0 <= self.position < len(self.source)):
            raise ValueError("position must index into source")
        if self.source[self.position] != self.symbol:
            raise ValueError("source must hold the consumed symbol at position")

    @property
    def remaining_length(self) -> int:
        return len(self.source) - self.position

    @property
    def remaining(self) -> str:
        """Input left before this step, including ``symbol``."""
        return self.source[self.position:]

    @property
    def rest(self) -> str:
        """Input left after this step."""
        return self.source[self.position + 1:]

    @property
    def exhausted(self) -> bool:
        """True on the step that consumes the last symbol."""
        return self.remaining_length == 1


@dataclass(frozen=True)
class SymbolNotInAlphabet:
    """Failure reason: ``symbol`` at ``position`` was read while in ``state``."""

    state: int
    symbol: str
    position: int


@dataclass(frozen=True)
class EvaluationResult:
    """Trace and verdict for one input string."""

    text: str
    trace: tuple[TransitionStep, ...]
    verdict: Verdict
    final_state: int
    status: RunStatus
    failure: Optional[SymbolNotInAlphabet] = None

    def __post_init__(self):
        if self.status is RunStatus.RUNNING:
            raise ValueError("result cannot be built from a running evaluation")
        if self.status is RunStatus.HALTED_ON_INVALID_SYMBOL:
            if self.failure is None:
                raise ValueError("halted result requires a failure reason")
            if self.verdict is not Verdict.REJECTED:
                raise ValueError("halted result must be rejected")
        elif self.failure is not None:
            raise ValueError("completed result cannot carry a failure reason")

    @property
    def accepted(self) -> bool:
        return self.verdict is Verdict.ACCEPTED

    @property
    def halted(self) -> bool:
        return self.status is RunStatus.HALTED_ON_INVALID_SYMBOL
