"""Shared utilities: argument flattening, ignore patterns."""

from pathrooter.utils.fragments import as_fragment, flatten_patterns
from pathrooter.utils.ignore import (
    build_spec,
    is_ignored,
    load_patterns,
    parse_ignore_file,
)

__all__ = [
    "as_fragment",
    "build_spec",
    "flatten_patterns",
    "is_ignored",
    "load_patterns",
    "parse_ignore_file",
]
