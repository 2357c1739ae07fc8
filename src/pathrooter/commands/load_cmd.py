"""Find files under a root and load each one (CLI command)."""

from __future__ import annotations

import logging
from argparse import Namespace
from pathlib import Path
from types import ModuleType
from typing import Any

from pathrooter.loader import load_module
from pathrooter.rooter import Rooter

logger = logging.getLogger(__name__)


def describe(value: Any) -> str:
    """Short kind label for a loaded value: 'module' or the JSON value's type name."""
    if isinstance(value, ModuleType):
        return "module"
    return type(value).__name__


def run(args: Namespace) -> None:
    """Load every match (all or nothing) and print 'path<TAB>kind' per file."""
    rooter = Rooter.from_project(Path(args.path))
    fresh = getattr(args, "fresh", False)
    paths = rooter.find(list(args.patterns))
    values = [load_module(path, fresh=fresh) for path in paths]
    logger.info("Loaded %d file(s) from %s", len(values), rooter.root)
    for path, value in zip(paths, values):
        print(f"{path}\t{describe(value)}")
