"""Which files find skips: gitignore-syntax patterns from config and, optionally, the root's .gitignore."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pathspec import PathSpec

GITIGNORE = ".gitignore"


def parse_ignore_file(path: Path) -> list[str]:
    """
    Patterns from the root's .gitignore, one per non-blank, non-comment line.
    A missing file contributes nothing to find's exclusions.
    """
    if not path.is_file():
        return []
    lines = path.read_text(encoding="utf-8").splitlines()
    patterns: list[str] = []
    for line in lines:
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        patterns.append(s)
    return patterns


def load_patterns(root: Path | str, config: dict[str, Any]) -> list[tuple[str, str]]:
    """
    Collect the patterns that hide files from find: ignore.builtin_patterns,
    then the root's .gitignore when ignore.use_gitignore is set, then
    ignore.additional_patterns. Each entry is (pattern, source).
    """
    root = Path(root).resolve()
    ignore_cfg = config.get("ignore", {}) or {}
    use_gitignore = ignore_cfg.get("use_gitignore", False)
    builtin = list(ignore_cfg.get("builtin_patterns", []) or [])
    additional = list(ignore_cfg.get("additional_patterns", []) or [])

    result: list[tuple[str, str]] = []
    for p in builtin:
        result.append((p, "builtin"))
    if use_gitignore:
        for p in parse_ignore_file(root / GITIGNORE):
            result.append((p, "gitignore"))
    for p in additional:
        result.append((p, "additional"))
    return result


def build_spec(patterns: list[str]) -> PathSpec:
    """Compile the exclusions applied to find results (paths relative to the root)."""
    return PathSpec.from_lines("gitignore", patterns)


def is_ignored(path: Path | str, root: Path | str, spec: PathSpec) -> bool:
    """
    Return True if the path is ignored by the given spec.

    The path is made relative to root and normalised to posix for matching.
    Paths outside root are never ignored. Symlinks are not followed so that
    matches stay relative to the root the caller sees.
    """
    path = Path(path).absolute()
    root = Path(root).absolute()
    try:
        rel = path.relative_to(root)
    except ValueError:
        return False
    rel_str = rel.as_posix()
    if rel_str == ".":
        return False
    return spec.match_file(rel_str)
