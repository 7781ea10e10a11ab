"""
Test types.py dataclasses with validation.
"""

import dataclasses

import pytest

from dfasim.core.types import (
    EvaluationResult,
    RunStatus,
    SymbolNotInAlphabet,
    TransitionStep,
    Verdict,
)


# ============================================================================
# TransitionStep Tests
# ============================================================================


class TestTransitionStep:
    """TransitionStep construction and derived fields."""

    def test_intermediate_step(self):
        """A step with more input left is not exhausted."""
        step = TransitionStep(from_state=0, symbol="a", to_state=1, position=0, source="ab")
        assert step.remaining == "ab"
        assert step.remaining_length == 2
        assert step.rest == "b"
        assert not step.exhausted

    def test_final_step(self):
        """The step consuming the last symbol is exhausted with empty rest."""
        step = TransitionStep(from_state=1, symbol="b", to_state=1, position=1, source="ab")
        assert step.remaining == "b"
        assert step.rest == ""
        assert step.exhausted

    def test_symbol_must_be_single_char(self):
        with pytest.raises(ValueError, match="single character"):
            TransitionStep(from_state=0, symbol="ab", to_state=1, position=0, source="ab")

    def test_position_must_index_source(self):
        with pytest.raises(ValueError, match="position"):
            TransitionStep(from_state=0, symbol="a", to_state=1, position=2, source="ab")

    def test_source_must_hold_symbol(self):
        with pytest.raises(ValueError, match="consumed symbol"):
            TransitionStep(from_state=0, symbol="a", to_state=1, position=0, source="ba")

    def test_source_not_compared_or_shown(self):
        """Equality and repr use the position, not the shared input text."""
        first = TransitionStep(from_state=0, symbol="a", to_state=1, position=0, source="ab")
        second = TransitionStep(from_state=0, symbol="a", to_state=1, position=0, source="aa")
        assert first == second
        assert "source" not in repr(first)

    def test_frozen(self):
        step = TransitionStep(from_state=0, symbol="a", to_state=1, position=0, source="a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.to_state = 0


# ============================================================================
# EvaluationResult Tests
# ============================================================================


class TestEvaluationResult:
    """EvaluationResult consistency rules."""

    def test_completed_accepted(self):
        result = EvaluationResult(
            text="",
            trace=(),
            verdict=Verdict.ACCEPTED,
            final_state=0,
            status=RunStatus.COMPLETED,
        )
        assert result.accepted
        assert not result.halted

    def test_halted_result(self):
        failure = SymbolNotInAlphabet(state=1, symbol="c", position=1)
        result = EvaluationResult(
            text="ac",
            trace=(),
            verdict=Verdict.REJECTED,
            final_state=1,
            status=RunStatus.HALTED_ON_INVALID_SYMBOL,
            failure=failure,
        )
        assert result.halted
        assert not result.accepted
        assert result.failure == failure

    def test_running_status_rejected(self):
        with pytest.raises(ValueError, match="running"):
            EvaluationResult(
                text="a",
                trace=(),
                verdict=Verdict.REJECTED,
                final_state=0,
                status=RunStatus.RUNNING,
            )

    def test_halted_requires_failure(self):
        with pytest.raises(ValueError, match="failure"):
            EvaluationResult(
                text="c",
                trace=(),
                verdict=Verdict.REJECTED,
                final_state=0,
                status=RunStatus.HALTED_ON_INVALID_SYMBOL,
            )

    def test_halted_cannot_accept(self):
        with pytest.raises(ValueError, match="rejected"):
            EvaluationResult(
                text="c",
                trace=(),
                verdict=Verdict.ACCEPTED,
                final_state=0,
                status=RunStatus.HALTED_ON_INVALID_SYMBOL,
                failure=SymbolNotInAlphabet(state=0, symbol="c", position=0),
            )

    def test_completed_cannot_carry_failure(self):
        with pytest.raises(ValueError, match="failure"):
            EvaluationResult(
                text="a",
                trace=(),
                verdict=Verdict.REJECTED,
                final_state=0,
                status=RunStatus.COMPLETED,
                failure=SymbolNotInAlphabet(state=0, symbol="c", position=0),
            )
