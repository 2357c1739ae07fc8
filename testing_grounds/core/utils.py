"""
Common utility functions used across the codebase.
"""

import os
from pathlib import Path


def normalize_path(path: str | Path) -> str:
    """
    Normalize a path to a consistent string form (forward slashes, no redundant parts).
    """
    p = Path(path).resolve()
    return str(p).replace(os.sep, "/")


def safe_filename(name: str) -> str:
    """Replace characters that are unsafe in filenames with underscores."""
    unsafe = '<>:"/\\|?*'
    for c in unsafe:
        name = name.replace(c, "_")
    return name
