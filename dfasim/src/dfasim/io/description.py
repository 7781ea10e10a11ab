"""
Automaton description loading.

Text format (one item per line):

    2           number of states
    1           accepting states, space separated (may be empty)
    a b         alphabet; spaces are dropped and every remaining char is a symbol
    1 0         transition row for state 0, one target per symbol
    1 1         transition row for state 1

JSON format: an object with keys "states", "accepting", "alphabet" (string
or list of symbols) and "transitions".

Loaders only split the input into the four logical fields; all validation
is left to build().
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from dfasim.core.errors import DescriptionFormatError
from dfasim.core.model import AutomatonModel, build
from dfasim.core.types import RawDescription

_HEADER_LINES = ("state count", "accepting states", "alphabet")
_JSON_KEYS = ("states", "accepting", "alphabet", "transitions")


def parse_description(text: str) -> RawDescription:
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    if len(lines) < len(_HEADER_LINES):
        missing = _HEADER_LINES[len(lines)]
        raise DescriptionFormatError(
            f"description ends before the {missing} line", line=len(lines) + 1
        )

    return RawDescription(
        state_count=lines[0].strip(),
        accepting_states=lines[1].split(),
        alphabet=tuple(lines[2].replace(" ", "").strip()),
        transitions=[line.split() for line in lines[3:]],
    )


def parse_json_description(data: dict[str, Any]) -> RawDescription:
    if not isinstance(data, dict):
        raise DescriptionFormatError(f"JSON description must be an object, got {type(data).__name__}")
    missing = [key for key in _JSON_KEYS if key not in data]
    if missing:
        raise DescriptionFormatError(f"JSON description missing keys: {missing}")

    alphabet = data["alphabet"]
    if isinstance(alphabet, str):
        alphabet = tuple(alphabet.replace(" ", ""))
    elif isinstance(alphabet, list):
        alphabet = tuple(alphabet)
    else:
        raise DescriptionFormatError(
            f"JSON alphabet must be a string or a list, got {type(alphabet).__name__}"
        )
    for key in ("accepting", "transitions"):
        if not isinstance(data[key], list):
            raise DescriptionFormatError(f"JSON {key} must be a list, got {type(data[key]).__name__}")

    # rows pass through untouched so build() reports row-level errors
    return RawDescription(
        state_count=data["states"],
        accepting_states=list(data["accepting"]),
        alphabet=alphabet,
        transitions=list(data["transitions"]),
    )


def load_description(path: Union[str, Path]) -> RawDescription:
    """
    Read a description file.

    ``.json`` files use the JSON format, everything else the text format.

    Raises:
        FileNotFoundError: If path does not exist
        DescriptionFormatError: If the file is not UTF-8 text, or a required
            line or key is missing or has the wrong type
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Description file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise DescriptionFormatError(f"{path} is not valid UTF-8 text: {exc}") from exc

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DescriptionFormatError(f"invalid JSON in {path}: {exc}") from exc
        return parse_json_description(data)
    return parse_description(text)


def load_model(path: Union[str, Path]) -> AutomatonModel:
    return build(load_description(path))
