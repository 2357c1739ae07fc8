"""
Core helpers package.
"""

from .utils import normalize_path, safe_filename

__all__ = ["normalize_path", "safe_filename"]
