"""
Rooter: build paths, find files and load modules relative to one root directory.

    rooter = Rooter.create(Path(__file__).parent / "..")
    route = rooter.resolve("/subpath/to/somewhere", "and/using", "parts.py")
    settings = rooter.require("/config", "settings.json")      # cached
    plugin = rooter.execute("/plugins", "alpha.py")            # fresh
    routes = rooter.find(["/plugins/*.py", "!/plugins/_*.py"], "/extra/**/*.py")
    plugins = rooter.find_and_require("/plugins/*.py")
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pathrooter.config import deep_merge, default_config, load_config
from pathrooter.finder import find_files
from pathrooter.loader import load_module
from pathrooter.utils.fragments import as_fragment, flatten_patterns

_LEADING_SEPARATORS = ("/", os.sep)


class Rooter:
    """Path helper bound to an absolute root directory, fixed at construction."""

    __slots__ = ("_root", "_config")

    def __init__(self, basedir: str | os.PathLike[str], config: dict[str, Any] | None = None) -> None:
        self._root = os.path.abspath(as_fragment(basedir))
        self._config = deep_merge(default_config(), config or {})

    @classmethod
    def create(cls, *args: Any, **kwargs: Any) -> Rooter:
        """Same as the constructor."""
        return cls(*args, **kwargs)

    @classmethod
    def from_project(cls, basedir: str | os.PathLike[str]) -> Rooter:
        """Rooter configured from defaults, ~/.pathrooter/config.json and <basedir>/.pathrooter.json."""
        root = os.path.abspath(as_fragment(basedir))
        return cls(root, load_config(Path(root)))

    @property
    def root(self) -> str:
        return self._root

    @property
    def config(self) -> dict[str, Any]:
        return self._config

    def __repr__(self) -> str:
        return f"Rooter({self._root!r})"

    def resolve(self, *fragments: str | os.PathLike[str]) -> str:
        """
        Join the root with fragments and return the absolute, normalised path.

        A leading separator on the first fragment is stripped, so "/sub" means
        "<root>/sub", unless the fragment is already an absolute path inside
        the root (resolving a resolved path returns it unchanged).
        """
        parts = [as_fragment(f) for f in fragments]
        if not parts:
            return self._root
        first = parts[0]
        if first.startswith(_LEADING_SEPARATORS) and not self._contains(first):
            parts[0] = first[1:]
        return os.path.abspath(os.path.join(self._root, *parts))

    def find(self, *patterns: Any) -> list[str]:
        """
        Return the files matching the glob patterns, each resolved against the root.

        Accepts strings and (nested) lists of strings. Patterns starting with
        '!' exclude files. Order: per pattern sorted, in pattern order, without duplicates.
        """
        return find_files(self._root, flatten_patterns(patterns), self._config, self.resolve)

    def require(self, *fragments: str | os.PathLike[str]) -> Any:
        """Load the file at resolve(*fragments) through the process-wide module cache."""
        return load_module(self.resolve(*fragments))

    def execute(self, *fragments: str | os.PathLike[str]) -> Any:
        """Like require, but always evaluates the file again (and refreshes the cache)."""
        return load_module(self.resolve(*fragments), fresh=True)

    def find_and_require(self, *patterns: Any) -> list[Any]:
        """find, then require every match in order. The first failing file aborts the call."""
        return [load_module(path) for path in self.find(*patterns)]

    def find_and_execute(self, *patterns: Any) -> list[Any]:
        """find, then execute every match in order. The first failing file aborts the call."""
        return [load_module(path, fresh=True) for path in self.find(*patterns)]

    def _contains(self, path: str) -> bool:
        """True if the absolute path is the root or lies under it (lexically)."""
        path = os.path.abspath(path)
        if path == self._root:
            return True
        prefix = self._root if self._root.endswith(os.sep) else self._root + os.sep
        return path.startswith(prefix)


def create(basedir: str | os.PathLike[str], config: dict[str, Any] | None = None) -> Rooter:
    """Module-level shortcut for Rooter.create."""
    return Rooter.create(basedir, config)
