from __future__ import annotations

from dfasim.core.model import AutomatonModel


def make_div3_dfa() -> AutomatonModel:
    """Binary numbers (most significant bit first) divisible by 3; state = value mod 3."""
    return AutomatonModel(
        state_count=3,
        accepting_states=frozenset({0}),
        alphabet=("0", "1"),
        table=[
            [0, 1],
            [2, 0],
            [1, 2],
        ],
    )


def make_contains_a_dfa() -> AutomatonModel:
    """Strings over {a, b} containing at least one 'a'."""
    return AutomatonModel(
        state_count=2,
        accepting_states=frozenset({1}),
        alphabet=("a", "b"),
        table=[
            [1, 0],
            [1, 1],
        ],
    )
