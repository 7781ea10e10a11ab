from __future__ import annotations

import numpy as np
import pytest

from dfasim.core.types import Verdict
from dfasim.metrics import acceptance_rate, evaluate_many, final_state_histogram, verdict_counts


def test_evaluate_many_preserves_order(contains_a_model) -> None:
    texts = ["ab", "", "bb", "ac"]
    results = evaluate_many(contains_a_model, texts)

    assert [result.text for result in results] == texts
    assert [result.verdict for result in results] == [
        Verdict.ACCEPTED,
        Verdict.REJECTED,
        Verdict.REJECTED,
        Verdict.REJECTED,
    ]


def test_verdict_counts(contains_a_model) -> None:
    results = evaluate_many(contains_a_model, ["a", "ba", "b", "c"])
    assert verdict_counts(results) == {Verdict.ACCEPTED: 2, Verdict.REJECTED: 2}


def test_verdict_counts_empty() -> None:
    assert verdict_counts([]) == {Verdict.ACCEPTED: 0, Verdict.REJECTED: 0}


def test_acceptance_rate(div3_model) -> None:
    # 0, 3, 6 are divisible by 3 among 0..7
    texts = [format(n, "b") for n in range(8)]
    results = evaluate_many(div3_model, texts)
    assert acceptance_rate(results) == pytest.approx(3 / 8)


def test_acceptance_rate_empty() -> None:
    with pytest.raises(ValueError, match="empty"):
        acceptance_rate([])


def test_final_state_histogram(contains_a_model) -> None:
    results = evaluate_many(contains_a_model, ["", "b", "a", "ab", "ax"])
    histogram = final_state_histogram(contains_a_model, results)

    assert histogram.dtype == np.int64
    assert histogram.shape == (2,)
    # "ax" halts in state 1
    np.testing.assert_array_equal(histogram, [2, 3])
    assert histogram.sum() == len(results)


def test_final_state_histogram_foreign_result(div3_model, contains_a_model) -> None:
    results = evaluate_many(div3_model, ["10"])
    with pytest.raises(ValueError, match="final_state"):
        final_state_histogram(contains_a_model, results)
