"""List files matching glob patterns under a root (CLI command)."""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path

from pathrooter.rooter import Rooter


def run(args: Namespace) -> None:
    """Print matches one per line, or as a JSON list with --json. No matches prints nothing (or [])."""
    rooter = Rooter.from_project(Path(args.path))
    found = rooter.find(list(args.patterns))
    if getattr(args, "as_json", False):
        print(json.dumps(found, indent=2))
        return
    for path in found:
        print(path)
