from __future__ import annotations

"""
Unit tests for configuration persistence.

CONFIG_FILE is redirected to a temporary location so the user's real
state is never read or written.
"""

import json
from pathlib import Path

import pytest

from treeforge.domain import config as cfg
from treeforge.domain.constants import CURRENT_CONFIG_VERSION


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    target = tmp_path / "state" / "config.json"
    monkeypatch.setattr(cfg, "CONFIG_FILE", str(target))
    return target


def test_defaults_when_file_missing(config_file: Path) -> None:
    """TC-01: A missing file yields the default state."""
    assert cfg.load_app_state() == cfg.get_default_app_state()
    assert cfg.load_config() == cfg.get_default_config()


def test_save_and_reload_session(config_file: Path) -> None:
    """TC-02: The last session survives a save/load cycle."""
    session = cfg.get_default_config()
    session["output_root"] = "/tmp/out"
    session["print_tree"] = True

    cfg.save_config(session)

    assert config_file.is_file()
    loaded = cfg.load_config()
    assert loaded["output_root"] == "/tmp/out"
    assert loaded["print_tree"] is True


def test_corrupted_file_falls_back(config_file: Path) -> None:
    config_file.parent.mkdir(parents=True)
    config_file.write_text("{not json", encoding="utf-8")

    assert cfg.load_app_state() == cfg.get_default_app_state()


def test_non_dict_document_falls_back(config_file: Path) -> None:
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[1, 2, 3]", encoding="utf-8")

    assert cfg.load_config() == cfg.get_default_config()


def test_partial_document_is_merged_over_defaults(config_file: Path) -> None:
    config_file.parent.mkdir(parents=True)
    config_file.write_text(
        json.dumps({"version": "0.1", "app_settings": {"theme": "Dark"}}),
        encoding="utf-8",
    )

    state = cfg.load_app_state()

    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["app_settings"] == {"theme": "Dark", "log_level": "INFO"}
    assert state["last_session"] == cfg.get_default_config()


def test_app_settings_defaults() -> None:
    assert cfg.get_app_settings(cfg.get_default_app_state()) == {"theme": "System", "log_level": "INFO"}


def test_app_settings_from_saved_state(config_file: Path) -> None:
    """TC-03: Hand-edited appearance and log level are read back normalized."""
    config_file.parent.mkdir(parents=True)
    config_file.write_text(
        json.dumps({"app_settings": {"theme": "dark", "log_level": "debug"}}),
        encoding="utf-8",
    )

    assert cfg.get_app_settings(cfg.load_app_state()) == {"theme": "Dark", "log_level": "DEBUG"}


@pytest.mark.parametrize("settings", [
    {"theme": "Neon", "log_level": "LOUD"},
    {"theme": 3, "log_level": None},
    "not a dict",
])
def test_invalid_app_settings_fall_back(settings) -> None:
    assert cfg.get_app_settings({"app_settings": settings}) == {"theme": "System", "log_level": "INFO"}
