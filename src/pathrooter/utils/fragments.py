"""Argument normalisation: fragment validation and pattern flattening."""

from __future__ import annotations

import os
from typing import Any, Iterable

from pathrooter.errors import InvalidArgument


def as_fragment(value: Any) -> str:
    """Return value as a path string; raise InvalidArgument unless str or os.PathLike."""
    if isinstance(value, str):
        return value
    if isinstance(value, os.PathLike):
        result = os.fspath(value)
        if isinstance(result, str):
            return result
    raise InvalidArgument(f"Expected a path string, got {type(value).__name__}: {value!r}")


def flatten_patterns(patterns: Iterable[Any]) -> list[str]:
    """
    Flatten arbitrarily nested lists/tuples of patterns into one ordered list.

    Strings (and path-like objects) are leaves; any other type raises InvalidArgument.
    """
    flat: list[str] = []
    for item in patterns:
        if isinstance(item, (list, tuple)):
            flat.extend(flatten_patterns(item))
        else:
            flat.append(as_fragment(item))
    return flat
