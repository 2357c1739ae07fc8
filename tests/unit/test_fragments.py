"""Unit tests for fragment validation and pattern flattening."""

from __future__ import annotations

from pathlib import Path

import pytest

from pathrooter import InvalidArgument
from pathrooter.utils.fragments import as_fragment, flatten_patterns


def test_as_fragment_accepts_str_and_pathlike() -> None:
    assert as_fragment("a/b") == "a/b"
    assert as_fragment(Path("a") / "b") == str(Path("a") / "b")


@pytest.mark.parametrize("bad", [None, 1, b"a", object()])
def test_as_fragment_rejects(bad: object) -> None:
    with pytest.raises(InvalidArgument, match="Expected a path string"):
        as_fragment(bad)


def test_flatten_patterns_nested() -> None:
    assert flatten_patterns(["a", ["b", ("c", ["d"])], "e"]) == ["a", "b", "c", "d", "e"]


def test_flatten_patterns_empty() -> None:
    assert flatten_patterns([]) == []
    assert flatten_patterns([[], [[]]]) == []


def test_flatten_patterns_rejects_invalid_leaf() -> None:
    with pytest.raises(InvalidArgument):
        flatten_patterns(["a", ["b", 3]])
