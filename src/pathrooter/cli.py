"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pathrooter import __version__
from pathrooter.config import load_config
from pathrooter.errors import RooterError


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Route pathrooter's loader and finder records to stderr (and logging.file, if set).
    -v shows cache hits and per-pattern match counts; -q keeps only errors.
    """
    config = load_config(None)
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    root = logging.getLogger("pathrooter")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(log_file, encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError:
                root.warning("Cannot open log file %s; logging to stderr only", log_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathrooter",
        description="Resolve paths, find files and load modules relative to a root directory.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Same flags on subparsers so "pathrooter find . '*.py' -v" works
    global_flags = argparse.ArgumentParser(add_help=False)
    log_grp = global_flags.add_mutually_exclusive_group()
    log_grp.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)
    log_grp.add_argument("-q", "--quiet", action="store_true", default=argparse.SUPPRESS, help=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    p_resolve = subparsers.add_parser("resolve", help="Print the path built from ROOT and fragments.", parents=[global_flags])
    p_resolve.add_argument("path", type=Path, help="Root directory.")
    p_resolve.add_argument("fragments", nargs="*", help="Path fragments joined under the root.")
    p_resolve.set_defaults(run="resolve")

    p_find = subparsers.add_parser("find", help="List files matching glob patterns under ROOT.", parents=[global_flags])
    p_find.add_argument("path", type=Path, help="Root directory.")
    p_find.add_argument("patterns", nargs="+", help="Glob patterns ('!' prefix excludes).")
    p_find.add_argument("--json", dest="as_json", action="store_true", help="Print a JSON list instead of one path per line.")
    p_find.set_defaults(run="find")

    p_load = subparsers.add_parser("load", help="Find files and load each one (modules or JSON).", parents=[global_flags])
    p_load.add_argument("path", type=Path, help="Root directory.")
    p_load.add_argument("patterns", nargs="+", help="Glob patterns ('!' prefix excludes).")
    p_load.add_argument("--fresh", action="store_true", help="Bypass the module cache.")
    p_load.set_defaults(run="load")

    p_config = subparsers.add_parser("config", help="Show effective configuration.", parents=[global_flags])
    p_config.add_argument("path", type=Path, nargs="?", default=Path("."), help="Root directory for project config (default: .).")
    p_config.add_argument("--show", action="store_true", help="Display current settings.")
    p_config.set_defaults(run="config")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
    )
    run = getattr(args, "run", None)

    args.path = args.path.resolve()

    if run == "resolve":
        from pathrooter.commands.resolve_cmd import run as cmd_run
    elif run == "find":
        from pathrooter.commands.find_cmd import run as cmd_run
    elif run == "load":
        from pathrooter.commands.load_cmd import run as cmd_run
    elif run == "config":
        from pathrooter.commands.config_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    try:
        cmd_run(args)
    except RooterError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
