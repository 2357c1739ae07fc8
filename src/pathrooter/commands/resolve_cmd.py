"""Print a path built from a root and fragments (CLI command)."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from pathrooter.rooter import Rooter


def run(args: Namespace) -> None:
    rooter = Rooter.from_project(Path(args.path))
    print(rooter.resolve(*(getattr(args, "fragments", None) or [])))
