from __future__ import annotations

"""
Unit tests for the main entry point and its global exception supervisor.
"""

import importlib
import sys
from types import ModuleType
from unittest.mock import patch

import pytest


@pytest.fixture
def entry_module(monkeypatch: pytest.MonkeyPatch) -> ModuleType:
    """Import treeforge.main without leaking its excepthook past the test."""
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    return importlib.import_module("treeforge.main")


def _raise_and_capture() -> tuple:
    try:
        raise RuntimeError("disk on fire")
    except RuntimeError:
        return sys.exc_info()


def test_fatal_report_includes_log_tail(entry_module: ModuleType) -> None:
    """TC-01: The crash dialog carries the error and the recent log lines."""
    with patch("treeforge.infra.logging.get_recent_logs", return_value="INFO | Build started.\n") as tail:
        report = entry_module.build_fatal_report("disk on fire", n_lines=5)

    tail.assert_called_once_with(5)
    assert "disk on fire" in report
    assert "INFO | Build started." in report


def test_supervisor_cli_mode_exits(
        entry_module: ModuleType,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["treeforge", "tree.txt"])

    with pytest.raises(SystemExit) as exc:
        entry_module.global_exception_handler(*_raise_and_capture())

    assert exc.value.code == 1
    assert "CRITICAL ERROR (TREEFORGE CLI): disk on fire" in capsys.readouterr().err


def test_supervisor_gui_mode_shows_dialog(entry_module: ModuleType, monkeypatch: pytest.MonkeyPatch) -> None:
    """TC-02: Without arguments the crash is shown in a message box with the log tail."""
    pytest.importorskip("tkinter")
    monkeypatch.setattr(sys, "argv", ["treeforge"])
    monkeypatch.setattr(entry_module, "build_fatal_report", lambda msg: f"report: {msg}")

    with patch("tkinter.messagebox.showerror") as show:
        with pytest.raises(SystemExit):
            entry_module.global_exception_handler(*_raise_and_capture())

    show.assert_called_once_with("TreeForge - Fatal Error", "report: disk on fire")
