"""
Construction errors raised while building an AutomatonModel.

All of them derive from ConstructionError, itself a ValueError, so callers
can catch the family or a single variant.
"""

from __future__ import annotations

from typing import Any, Optional


class ConstructionError(ValueError):
    """Base class for rejected automaton descriptions."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class MalformedCount(ConstructionError):
    """State count is not a positive integer."""


class InvalidAcceptingState(ConstructionError):
    """Accepting state entry is not a state id in range."""


class DuplicateSymbol(ConstructionError):
    """Alphabet lists the same symbol twice."""


class MalformedSymbol(ConstructionError):
    """Alphabet entry is not a single character."""


class MalformedRow(ConstructionError):
    """Transition table row count differs from the state count."""


class MalformedColumnCount(ConstructionError):
    """A transition row has the wrong number of entries."""

    def __init__(self, message: str, row: int, value: Any = None):
        super().__init__(message, value)
        self.row = row


class InvalidTargetState(ConstructionError):
    """A transition entry is not a state id in range."""

    def __init__(self, message: str, row: int, column: int, value: Any = None):
        super().__init__(message, value)
        self.row = row
        self.column = column


class DescriptionFormatError(ConstructionError):
    """Text description is missing a required line."""

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.line = line
