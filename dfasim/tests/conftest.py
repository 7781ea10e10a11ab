"""
Pytest configuration and fixtures for dfasim tests.

Provides the reference automata and raw descriptions used across unit and
integration tests.
"""

import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def contains_a_model():
    """
    Two-state automaton over {a, b}: row 0 a->1 b->0, row 1 a->1 b->1.

    Accepts exactly the strings containing an 'a'.
    """
    from dfasim.examples import make_contains_a_dfa
    return make_contains_a_dfa()


@pytest.fixture
def div3_model():
    """Binary numbers divisible by 3."""
    from dfasim.examples import make_div3_dfa
    return make_div3_dfa()


@pytest.fixture
def contains_a_raw():
    """Raw description of the contains-a automaton, values as read from text."""
    from dfasim.core.types import RawDescription

    return RawDescription(
        state_count="2",
        accepting_states=["1"],
        alphabet=("a", "b"),
        transitions=[["1", "0"], ["1", "1"]],
    )


@pytest.fixture
def contains_a_text():
    """Text-format description of the contains-a automaton."""
    return "2\n1\na b\n1 0\n1 1\n"
