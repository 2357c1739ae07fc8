"""Glob expansion relative to a root directory (wcmatch), with negation and ignore filtering."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable

from wcmatch import glob

from pathrooter.utils.ignore import build_spec, is_ignored, load_patterns

logger = logging.getLogger(__name__)

NEGATION_PREFIX = "!"


def glob_flags(config: dict[str, Any]) -> int:
    """wcmatch flags for matching (without NODIR), from the 'glob' config section."""
    glob_cfg = config.get("glob", {}) or {}
    flags = glob.GLOBSTAR | glob.BRACE
    if glob_cfg.get("dot"):
        flags |= glob.DOTGLOB
    if glob_cfg.get("extglob"):
        flags |= glob.EXTGLOB
    return flags


def anchor_pattern(root: str, resolved: str) -> str:
    """
    Escape the root part of a resolved pattern so that glob characters in the
    root directory name are matched literally. Patterns outside root are returned as is.
    """
    if resolved == root:
        return glob.escape(root)
    prefix = root if root.endswith(os.sep) else root + os.sep
    if resolved.startswith(prefix):
        return glob.escape(prefix) + resolved[len(prefix):]
    return resolved


def find_files(
    root: str,
    patterns: list[str],
    config: dict[str, Any],
    resolve: Callable[..., str],
) -> list[str]:
    """
    Expand patterns (already flattened) into matching file paths.

    Each pattern is resolved with `resolve` (root-relative) before matching.
    Patterns starting with '!' exclude matches of every other pattern.
    Results: per-pattern lexicographic order, concatenated in pattern order,
    duplicates dropped (first occurrence kept). Missing directories match nothing.
    """
    flags = glob_flags(config)
    expand_directories = (config.get("glob", {}) or {}).get("expand_directories", True)

    def expand(pattern: str) -> str:
        resolved = resolve(pattern)
        anchored = anchor_pattern(root, resolved)
        if expand_directories and not glob.is_magic(pattern, flags=flags) and os.path.isdir(resolved):
            anchored = anchored.rstrip("/" + os.sep) + "/**"
        return anchored

    positives: list[tuple[str, str]] = []
    negatives: list[str] = []
    for pattern in patterns:
        if pattern.startswith(NEGATION_PREFIX):
            negatives.append(expand(pattern[len(NEGATION_PREFIX):]))
        else:
            positives.append((pattern, expand(pattern)))

    ignore_spec = build_spec([p for p, _ in load_patterns(root, config)])

    seen: set[str] = set()
    found: list[str] = []
    for pattern, anchored in positives:
        matches = sorted(glob.glob(anchored, flags=flags | glob.NODIR))
        logger.debug("Pattern %r matched %d file(s)", pattern, len(matches))
        for path in matches:
            if path in seen:
                continue
            if negatives and glob.globmatch(path, negatives, flags=flags):
                continue
            if is_ignored(path, root, ignore_spec):
                continue
            seen.add(path)
            found.append(path)
    return found
