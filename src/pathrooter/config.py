"""Settings for finding and loading: glob flags, ignore patterns, logging; layered per user and per root."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

# Project-local config file, looked up directly under the root
PROJECT_CONFIG_FILENAME = ".pathrooter.json"
CONFIG_FILENAME = "config.json"


def _global_config_dir() -> Path:
    return Path.home() / ".pathrooter"


def global_config_path() -> Path:
    """Path to global config file (~/.pathrooter/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Default configuration. A fresh dict on every call."""
    return {
        "glob": {
            "dot": False,
            "extglob": False,
            "expand_directories": True,
        },
        "ignore": {
            "use_gitignore": False,
            "builtin_patterns": ["__pycache__/"],
            "additional_patterns": [],
        },
        "logging": {
            "level": "WARNING",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Read a config file; None when it is absent, unreadable, or not a JSON object (it is then skipped)."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Overlay override onto base, section by section (e.g. only glob.dot). Mutates and returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = copy.deepcopy(value)
    return base


def load_global_config() -> dict[str, Any]:
    """Defaults overlaid with the per-user settings in ~/.pathrooter/config.json, if any."""
    data = _load_json(global_config_path())
    if data is None:
        return default_config()
    return deep_merge(default_config(), data)


def project_config_path(root: Path) -> Path:
    """Path to project-local config (<root>/.pathrooter.json)."""
    return root / PROJECT_CONFIG_FILENAME


def load_config(root: Path | str | None = None) -> dict[str, Any]:
    """
    Effective settings for a Rooter over root: defaults, then the per-user
    file, then <root>/.pathrooter.json. With root=None the project layer is skipped
    (the CLI does this to read logging settings before a root is known).
    """
    merged = load_global_config()
    if root is not None:
        project_data = _load_json(project_config_path(Path(root).resolve()))
        if project_data is not None:
            deep_merge(merged, project_data)
    return merged
