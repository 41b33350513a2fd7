# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from phosys_parser.config import PPConfig, get_config, load_config, reset_config


def test_defaults() -> None:
    cfg = PPConfig({})
    assert cfg.root_name == "PHOSYS"
    assert cfg.depth_aware is False
    assert cfg.debug is False
    assert cfg.logging == {}


def test_load_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yml"
    path.write_text(
        "debug: true\n"
        "parser:\n"
        "  root_name: Other\n"
        "  depth_aware: true\n"
        "logging:\n"
        "  level: DEBUG\n",
        encoding="utf-8",
    )

    cfg = load_config(path)
    assert cfg.debug is True
    assert cfg.root_name == "Other"
    assert cfg.depth_aware is True
    assert cfg.logging["level"] == "DEBUG"


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path).root_name == "PHOSYS"


def test_explicit_missing_path_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


def test_get_config_is_cached() -> None:
    reset_config()
    first = get_config()
    assert get_config() is first
    assert first.root_name == "PHOSYS"
