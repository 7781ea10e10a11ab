from __future__ import annotations

from typing import Iterable

import numpy as np

from dfasim.core.evaluator import run
from dfasim.core.model import AutomatonModel
from dfasim.core.types import EvaluationResult, Verdict


def evaluate_many(model: AutomatonModel, texts: Iterable[str]) -> list[EvaluationResult]:
    return [run(model, text) for text in texts]


def verdict_counts(results: list[EvaluationResult]) -> dict[Verdict, int]:
    counts = {verdict: 0 for verdict in Verdict}
    for result in results:
        counts[result.verdict] += 1
    return counts


def acceptance_rate(results: list[EvaluationResult]) -> float:
    if not results:
        raise ValueError("results must not be empty")

    accepted = sum(1 for result in results if result.accepted)
    return float(accepted) / float(len(results))


def final_state_histogram(
    model: AutomatonModel,
    results: list[EvaluationResult],
) -> np.ndarray:
    """Count of runs ending (or halting) in each state, indexed by state id."""
    histogram = np.zeros(model.state_count, dtype=np.int64)

    for result in results:
        if not (0 <= result.final_state < model.state_count):
            raise ValueError(f"result final_state {result.final_state} not a state of model")
        histogram[result.final_state] += 1

    return histogram
