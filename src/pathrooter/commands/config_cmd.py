"""Show effective configuration (CLI command)."""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path

from pathrooter.config import global_config_path, load_config, project_config_path


def run(args: Namespace) -> None:
    """Print the merged config (defaults + global + project) as JSON."""
    if not getattr(args, "show", False):
        print("Error: specify --show.", file=sys.stderr)
        sys.exit(1)
    root = Path(getattr(args, "path", Path("."))).resolve()
    project_path = project_config_path(root)
    sources = [str(global_config_path())]
    if project_path.is_file():
        sources.append(str(project_path))
    print(f"# Config: {', '.join(sources)}")
    print(json.dumps(load_config(root), indent=2))
