"""Configuration: defaults, constants, and config loading (global + project overrides)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# Directory name inside a target project for rubysmell settings
RUBYSMELL_DIR = ".rubysmell"
CONFIG_FILENAME = "config.json"


# Global config location
def _global_config_dir() -> Path:
    return Path.home() / ".rubysmell"


def global_config_path() -> Path:
    """Path to global config file (~/.rubysmell/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Default configuration."""
    return {
        "parser": {
            "grammar": "ruby",
        },
        "source": {
            "encoding": "utf-8",
        },
        "logging": {
            "level": "WARNING",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load JSON from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_global_config() -> dict[str, Any]:
    """Load global config from ~/.rubysmell/config.json. Returns defaults if missing."""
    data = _load_json(global_config_path())
    if data is None:
        return default_config()
    return _deep_merge(default_config(), data)


def project_config_path(project_root: Path) -> Path:
    """Path to project-local config (<project>/.rubysmell/config.json)."""
    return project_root / RUBYSMELL_DIR / CONFIG_FILENAME


def load_config(project_root: Path | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global (~/.rubysmell/config.json) + project overrides.

    If project_root is None, only global config (and defaults) are used.
    Project overrides apply when project_root is set and .rubysmell/config.json exists.
    """
    merged = load_global_config()
    if project_root is not None:
        project_data = _load_json(project_config_path(project_root.resolve()))
        if project_data is not None:
            _deep_merge(merged, project_data)
    return merged


def source_encoding(config: dict[str, Any]) -> str:
    """Encoding used to decode files and byte streams."""
    return (config.get("source") or {}).get("encoding") or "utf-8"


def parser_grammar(config: dict[str, Any]) -> str:
    """Grammar key used to pick the parser (see rubysmell.analysis.parser)."""
    return (config.get("parser") or {}).get("grammar") or "ruby"
