"""
AutomatonModel: immutable, validated DFA.

States are the integers 0..state_count-1 and state 0 is the initial state.
The transition table is a read-only int64 array with one row per state and
one column per alphabet symbol, in alphabet order.

Enforces:
- Accepting states are valid state ids
- Alphabet symbols are distinct single characters
- Table shape is (state_count, len(alphabet)) and every entry is a valid state id
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

from dfasim.core.errors import (
    ConstructionError,
    DuplicateSymbol,
    InvalidAcceptingState,
    InvalidTargetState,
    MalformedColumnCount,
    MalformedCount,
    MalformedRow,
    MalformedSymbol,
)
from dfasim.core.types import RawDescription

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?\d+")


def _parse_int(value: Any) -> Optional[int]:
    """Return ``value`` as an int, or None when it is not an integer literal."""
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, str):
        stripped = value.strip()
        if _INT_PATTERN.fullmatch(stripped):
            return int(stripped)
    return None


def _check_count(value: Any) -> int:
    count = _parse_int(value)
    if count is None or count <= 0:
        raise MalformedCount(f"state count must be a positive integer, got {value!r}", value)
    return count


def _is_sequence(value: Any) -> bool:
    """Lists, tuples, sets and arrays; not strings, bytes or scalars."""
    if isinstance(value, (str, bytes)):
        return False
    return hasattr(value, "__iter__") and hasattr(value, "__len__")


def _check_accepting(entries: Any, state_count: int) -> frozenset[int]:
    if not _is_sequence(entries):
        raise InvalidAcceptingState(f"accepting states must be a sequence, got {entries!r}", entries)
    accepting = set()
    for entry in entries:
        state = _parse_int(entry)
        if state is None or not (0 <= state < state_count):
            raise InvalidAcceptingState(
                f"accepting state {entry!r} is not in [0, {state_count})", entry
            )
        accepting.add(state)
    return frozenset(accepting)


def _check_alphabet(symbols: Any) -> tuple[str, ...]:
    if not isinstance(symbols, str) and not _is_sequence(symbols):
        raise MalformedSymbol(f"alphabet must be a string or a sequence of symbols, got {symbols!r}", symbols)
    seen: set[str] = set()
    for symbol in symbols:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise MalformedSymbol(f"alphabet symbol must be a single character, got {symbol!r}", symbol)
        if symbol in seen:
            raise DuplicateSymbol(f"duplicate alphabet symbol {symbol!r}", symbol)
        seen.add(symbol)
    return tuple(symbols)


def _check_table(rows: Any, state_count: int, n_symbols: int) -> np.ndarray:
    if isinstance(rows, np.ndarray):
        rows = rows.tolist()
    if not _is_sequence(rows):
        raise MalformedRow(f"transition table must be a sequence of rows, got {rows!r}", rows)
    rows = list(rows)
    if len(rows) != state_count:
        raise MalformedRow(
            f"transition table has {len(rows)} rows, expected {state_count}", len(rows)
        )

    table = np.zeros((state_count, n_symbols), dtype=np.int64)
    for i, row in enumerate(rows):
        if not _is_sequence(row):
            raise MalformedColumnCount(f"transition row {i} is not a sequence: {row!r}", row=i, value=row)
        if len(row) != n_symbols:
            raise MalformedColumnCount(
                f"transition row {i} has {len(row)} entries, expected {n_symbols}", row=i, value=len(row)
            )
        for j, entry in enumerate(row):
            target = _parse_int(entry)
            if target is None or not (0 <= target < state_count):
                raise InvalidTargetState(
                    f"transition ({i}, {j}) targets {entry!r}, not in [0, {state_count})",
                    row=i,
                    column=j,
                    value=entry,
                )
            table[i, j] = target
    return table


@dataclass(frozen=True, eq=False)
class AutomatonModel:
    """
    Deterministic finite automaton with integer states.

    Immutable: the table is copied and marked read-only on construction, so
    one model can be shared by any number of concurrent evaluations.
    """

    state_count: int
    accepting_states: frozenset
    alphabet: tuple
    table: np.ndarray
    _index: dict = field(init=False, repr=False)

    def __post_init__(self):
        """Validate fields and freeze the table."""
        state_count = _check_count(self.state_count)
        accepting = _check_accepting(self.accepting_states, state_count)
        alphabet = _check_alphabet(self.alphabet)
        table = _check_table(self.table, state_count, len(alphabet))
        table.flags.writeable = False

        # Use object.__setattr__ because this is a frozen dataclass
        object.__setattr__(self, "state_count", state_count)
        object.__setattr__(self, "accepting_states", accepting)
        object.__setattr__(self, "alphabet", alphabet)
        object.__setattr__(self, "table", table)
        object.__setattr__(self, "_index", {symbol: i for i, symbol in enumerate(alphabet)})

    @classmethod
    def build(cls, raw: RawDescription) -> "AutomatonModel":
        return build(raw)

    @property
    def initial_state(self) -> int:
        return 0

    def is_accepting(self, state: int) -> bool:
        return state in self.accepting_states

    def has_symbol(self, symbol: str) -> bool:
        return symbol in self._index

    def symbol_index(self, symbol: str) -> Optional[int]:
        """Column of ``symbol`` in the table, or None if it is not in the alphabet."""
        return self._index.get(symbol)

    def next_state(self, state: int, symbol: str) -> int:
        """
        Look up the transition for (state, symbol).

        Raises:
            KeyError: symbol is not in the alphabet.
            IndexError: state is not a valid state id.
        """
        if not (0 <= state < self.state_count):
            raise IndexError(f"state {state} not in [0, {self.state_count})")
        return int(self.table[state, self._index[symbol]])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AutomatonModel):
            return NotImplemented
        return (
            self.state_count == other.state_count
            and self.accepting_states == other.accepting_states
            and self.alphabet == other.alphabet
            and np.array_equal(self.table, other.table)
        )

    def __hash__(self) -> int:
        return hash((self.state_count, self.accepting_states, self.alphabet, self.table.tobytes()))


def build(raw: RawDescription) -> AutomatonModel:
    """
    Validate a raw description and construct an AutomatonModel.

    Checks run in order: state count, accepting states, alphabet, then the
    transition table (row count, column count per row, target range). The
    first failure aborts the build.

    Args:
        raw: Description with the four logical fields.

    Returns:
        Fully validated AutomatonModel.

    Raises:
        ConstructionError: One of MalformedCount, InvalidAcceptingState,
            MalformedSymbol, DuplicateSymbol, MalformedRow,
            MalformedColumnCount, InvalidTargetState.
    """
    try:
        model = AutomatonModel(
            state_count=raw.state_count,
            accepting_states=raw.accepting_states,
            alphabet=raw.alphabet,
            table=raw.transitions,
        )
    except ConstructionError as exc:
        logger.info("rejected automaton description: %s", exc)
        raise

    logger.debug(
        "built automaton: %d states, %d accepting, alphabet %s",
        model.state_count,
        len(model.accepting_states),
        "".join(model.alphabet),
    )
    return model
