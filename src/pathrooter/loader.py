"""
Module loading by absolute path, with a process-wide cache.

Cached loads return the value stored for the path; fresh loads always
evaluate the file from disk and replace the stored value. Python sources are
compiled from their current text on every evaluation (no bytecode cache), so a
fresh load sees the file as it is now. JSON files load as their parsed value.
"""

from __future__ import annotations

import hashlib
import importlib.machinery
import importlib.util
import json
import logging
import os
import re
import sys
from pathlib import Path
from typing import Any

from pathrooter.errors import FileNotFound, ModuleLoadError

logger = logging.getLogger(__name__)

JSON_SUFFIX = ".json"
PACKAGE_INIT = "__init__.py"
MODULE_NAME_PREFIX = "_pathrooter_"

# Absolute path -> loaded value. Shared by every Rooter in the process.
_cache: dict[str, Any] = {}


def module_name_for(path: str) -> str:
    """Stable synthetic sys.modules name for a file path (stem + short SHA-256 of the path)."""
    digest = hashlib.sha256(path.encode("utf-8")).hexdigest()[:16]
    stem = re.sub(r"\W", "_", Path(path).stem) or "module"
    return f"{MODULE_NAME_PREFIX}{stem}_{digest}"


def is_cached(path: str | os.PathLike[str]) -> bool:
    return os.path.abspath(path) in _cache


def forget(path: str | os.PathLike[str]) -> None:
    """Drop the cached value for path (no-op if absent). The next cached load re-evaluates."""
    _cache.pop(os.path.abspath(path), None)


def clear_cache() -> None:
    _cache.clear()


def load_module(path: str | os.PathLike[str], fresh: bool = False) -> Any:
    """
    Load the file at path and return its value.

    With fresh=False the cached value is returned when present. With fresh=True
    the file is evaluated again and the cache entry refreshed.

    Raises FileNotFound if path does not exist, ModuleLoadError if evaluation fails.
    """
    path = os.path.abspath(path)
    if not fresh and path in _cache:
        logger.debug("Cache hit: %s", path)
        return _cache[path]

    # A failed load leaves no stale entry behind
    _cache.pop(path, None)
    value = _evaluate(path)
    _cache[path] = value
    return value


def _evaluate(path: str) -> Any:
    target = Path(path)
    if target.is_dir() and (target / PACKAGE_INIT).is_file():
        logger.debug("Evaluating package %s", path)
        return _exec_python(path, str(target / PACKAGE_INIT), package_dir=path)
    if not target.is_file():
        raise FileNotFound(path)
    logger.debug("Evaluating %s", path)
    if target.suffix.lower() == JSON_SUFFIX:
        return _load_json(target)
    if target.name == PACKAGE_INIT:
        return _exec_python(path, path, package_dir=str(target.parent))
    return _exec_python(path, path)


def _load_json(target: Path) -> Any:
    try:
        return json.loads(target.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ModuleLoadError(str(target), exc) from exc


def _exec_python(path: str, source_path: str, package_dir: str | None = None) -> Any:
    """Execute source_path as a module registered in sys.modules under a name derived from path."""
    name = module_name_for(path)
    # Explicit loader so files load regardless of suffix
    loader = importlib.machinery.SourceFileLoader(name, source_path)
    spec = importlib.util.spec_from_file_location(
        name,
        source_path,
        loader=loader,
        submodule_search_locations=[package_dir] if package_dir is not None else None,
    )
    if spec is None:
        raise ModuleLoadError(path, ImportError(f"Cannot create module spec for {source_path}"))
    module = importlib.util.module_from_spec(spec)

    sys.modules[name] = module
    try:
        code = compile(loader.get_data(source_path), source_path, "exec", dont_inherit=True)
        exec(code, module.__dict__)
    except Exception as exc:
        sys.modules.pop(name, None)
        raise ModuleLoadError(path, exc) from exc
    except BaseException:
        # SystemExit, KeyboardInterrupt: propagate unwrapped
        sys.modules.pop(name, None)
        raise
    return module
