"""Unit tests for config (default_config, load_config, global + project overrides)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from rubysmell import config as rubysmell_config
from rubysmell.config import (
    RUBYSMELL_DIR,
    default_config,
    load_config,
    parser_grammar,
    project_config_path,
    source_encoding,
)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the global config directory at a temp dir."""
    home = tmp_path / "home"
    monkeypatch.setattr(rubysmell_config, "_global_config_dir", lambda: home / ".rubysmell")
    return home


def _write_json(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def test_default_config() -> None:
    cfg = default_config()
    assert cfg["parser"]["grammar"] == "ruby"
    assert cfg["source"]["encoding"] == "utf-8"
    assert cfg["logging"]["level"] == "WARNING"
    assert parser_grammar(cfg) == "ruby"
    assert source_encoding(cfg) == "utf-8"


def test_default_config_is_fresh_copy() -> None:
    cfg = default_config()
    cfg["parser"]["grammar"] = "other"
    assert default_config()["parser"]["grammar"] == "ruby"


def test_load_config_without_files_returns_defaults() -> None:
    assert load_config(None) == default_config()


def test_global_config_overrides_defaults(isolated_home: Path) -> None:
    _write_json(isolated_home / ".rubysmell" / "config.json", {"logging": {"level": "DEBUG"}})
    cfg = load_config(None)
    assert cfg["logging"]["level"] == "DEBUG"
    assert cfg["logging"]["file"] is None
    assert cfg["source"]["encoding"] == "utf-8"


def test_project_config_overrides_global(isolated_home: Path, tmp_path: Path) -> None:
    _write_json(isolated_home / ".rubysmell" / "config.json", {"source": {"encoding": "latin-1"}})
    project = tmp_path / "project"
    _write_json(project_config_path(project), {"source": {"encoding": "utf-16"}})
    cfg = load_config(project)
    assert cfg["source"]["encoding"] == "utf-16"


def test_invalid_json_is_ignored(tmp_path: Path) -> None:
    project = tmp_path / "project"
    path = project_config_path(project)
    path.parent.mkdir(parents=True)
    path.write_text("{not json", encoding="utf-8")
    assert load_config(project) == default_config()


def test_non_object_json_is_ignored(tmp_path: Path) -> None:
    project = tmp_path / "project"
    _write_json(project_config_path(project), ["a", "list"])
    assert load_config(project) == default_config()


def test_project_config_path(tmp_path: Path) -> None:
    expected = tmp_path / RUBYSMELL_DIR / "config.json"
    assert project_config_path(tmp_path) == expected


def test_accessors_fall_back_when_sections_missing() -> None:
    assert parser_grammar({}) == "ruby"
    assert source_encoding({"source": {}}) == "utf-8"
