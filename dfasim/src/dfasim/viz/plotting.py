"""Plotting utilities for automata and evaluation traces."""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np

from dfasim.core.model import AutomatonModel
from dfasim.core.types import EvaluationResult


def plot_transition_table(
    model: AutomatonModel,
    title: str = "Transition Table",
    ax=None,
):
    """
    Draw the transition table as an annotated heatmap.

    Rows are states (accepting states are labelled with a trailing ``*``),
    columns are alphabet symbols and each cell shows the target state.

    Args:
        model: Automaton to draw.
        title: Plot title.
        ax: Matplotlib axes object (optional).

    Returns:
        The axes drawn on.

    Raises:
        ValueError: If the alphabet is empty.
    """
    if not model.alphabet:
        raise ValueError("model has an empty alphabet, nothing to plot")

    if ax is None:
        _, ax = plt.subplots()

    ax.imshow(model.table, cmap="viridis", vmin=0, vmax=max(model.state_count - 1, 1), aspect="auto")

    for state in range(model.state_count):
        for column in range(len(model.alphabet)):
            ax.text(column, state, str(model.table[state, column]), ha="center", va="center", color="white")

    ax.set_xticks(np.arange(len(model.alphabet)))
    ax.set_xticklabels(model.alphabet)
    ax.set_yticks(np.arange(model.state_count))
    ax.set_yticklabels(
        [f"{state}*" if model.is_accepting(state) else str(state) for state in range(model.state_count)]
    )
    ax.set_xlabel("symbol")
    ax.set_ylabel("state")
    ax.set_title(title)
    return ax


def plot_trace(
    result: EvaluationResult,
    title: str = "State Trace",
    ax=None,
):
    """
    Plot the state occupied after each consumed symbol.

    Args:
        result: Completed evaluation result.
        title: Plot title.
        ax: Matplotlib axes object (optional).

    Returns:
        The axes drawn on.

    Raises:
        ValueError: If the run halted on a symbol outside the alphabet.
    """
    if result.halted:
        raise ValueError("cannot plot a halted run: trace was dropped")

    if ax is None:
        _, ax = plt.subplots()

    states = [0] + [step.to_state for step in result.trace]
    ax.step(np.arange(len(states)), states, where="post", marker="o")
    ax.set_xticks(np.arange(len(states)))
    ax.set_xticklabels(["start"] + [step.symbol for step in result.trace])
    ax.set_xlabel("consumed symbol")
    ax.set_ylabel("state")
    ax.set_title(f"{title} ({result.verdict.value})")
    return ax
