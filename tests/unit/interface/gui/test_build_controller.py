from __future__ import annotations

"""
Unit tests for the GUI Build Controller.

The view, the Tk root and the message boxes are mocked; no window is
created. Builds triggered through the worker thread are executed inline.
"""

from pathlib import Path
from typing import Any, Dict
from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("tkinter")

from treeforge.core.pipeline.engine import run_build  # noqa: E402
from treeforge.domain import constants as const  # noqa: E402
from treeforge.interface.gui import threads  # noqa: E402
from treeforge.interface.gui.controllers.build_controller import BuildController  # noqa: E402

pytestmark = pytest.mark.gui

_MODULE = "treeforge.interface.gui.controllers.build_controller"


@pytest.fixture
def view() -> MagicMock:
    mock_view = MagicMock()
    mock_view.entry_output.get.return_value = ""
    return mock_view


@pytest.fixture
def controller(view: MagicMock, build_config: Dict[str, Any]) -> BuildController:
    app = MagicMock()
    app.after.side_effect = lambda delay, fn: fn()
    ctrl = BuildController(app, build_config)
    ctrl.register_view(view)
    return ctrl


def _last_status(view: MagicMock) -> str:
    return view.lbl_status.configure.call_args.kwargs["text"]


def test_sync_config_from_view(controller: BuildController, view: MagicMock) -> None:
    """TC-01: The destination entry is scraped into the session."""
    view.entry_output.get.return_value = "  /tmp/dest  "

    controller.sync_config_from_view()

    assert controller.config["output_root"] == "/tmp/dest"


def test_load_diagram_fills_editor_and_destination(
        controller: BuildController, view: MagicMock, tmp_path: Path, connector_diagram: str
) -> None:
    diagram = tmp_path / "tree.txt"
    diagram.write_text(connector_diagram, encoding="utf-8")

    assert controller.load_diagram_file(str(diagram)) is True

    view.textbox.insert.assert_called_once_with("1.0", connector_diagram)
    view.entry_output.insert.assert_called_once_with(0, str(tmp_path))
    assert controller.config["diagram_path"] == str(diagram)


def test_load_rejected_diagram_shows_error(controller: BuildController, tmp_path: Path) -> None:
    with patch(f"{_MODULE}.mb") as mock_mb:
        assert controller.load_diagram_file(str(tmp_path / "tree.md")) is False
        mock_mb.showerror.assert_called_once()


def test_empty_editor_does_not_start_thread(controller: BuildController, view: MagicMock) -> None:
    """TC-02: Blank input reports 'no structure' without a worker."""
    view.textbox.get.return_value = "   \n"

    with patch(f"{_MODULE}.threading.Thread") as mock_thread:
        controller.start_build()

    mock_thread.assert_not_called()
    assert _last_status(view) == const.MSG_NO_STRUCTURE


def test_build_requires_destination(controller: BuildController, view: MagicMock) -> None:
    view.textbox.get.return_value = "project/\n"
    view.entry_output.get.return_value = ""

    with patch(f"{_MODULE}.mb") as mock_mb, patch(f"{_MODULE}.threading.Thread") as mock_thread:
        controller.start_build()

    mock_mb.showerror.assert_called_once()
    mock_thread.assert_not_called()


def test_build_dispatches_worker(controller: BuildController, view: MagicMock, tmp_path: Path) -> None:
    view.textbox.get.return_value = "project/\n"
    view.entry_output.get.return_value = str(tmp_path)

    with patch(f"{_MODULE}.threading.Thread") as mock_thread:
        controller.start_build()

    kwargs = mock_thread.call_args.kwargs
    assert kwargs["target"] is threads.run_build_task
    assert kwargs["args"][1] == "project/\n"
    assert kwargs["daemon"] is True
    mock_thread.return_value.start.assert_called_once()
    view.btn_build.configure.assert_called_with(state="disabled")


def test_successful_build_round_trip(
        controller: BuildController, view: MagicMock, tmp_path: Path, connector_diagram: str
) -> None:
    """TC-03: A worker result is rendered on the Tk loop and the session saved."""
    dest = tmp_path / "dest"
    view.textbox.get.return_value = connector_diagram
    view.entry_output.get.return_value = str(dest)

    with patch(f"{_MODULE}.mb") as mock_mb, \
            patch(f"{_MODULE}.cfg.save_config") as mock_save, \
            patch(f"{_MODULE}.threading.Thread") as mock_thread:
        controller.start_build()
        kwargs = mock_thread.call_args.kwargs
        kwargs["target"](*kwargs["args"])

    assert (dest / "project" / "src" / "main.ext").is_file()
    mock_mb.showinfo.assert_called_once()
    mock_save.assert_called_once_with(controller.config)
    assert _last_status(view) == const.MSG_BUILD_OK
    view.btn_build.configure.assert_called_with(state="normal")


def test_preview_opens_preview_window(
        controller: BuildController, view: MagicMock, connector_diagram: str
) -> None:
    result = run_build(controller.config, text=connector_diagram, dry_run=True)

    controller._handle_build_result(result)

    view.show_preview.assert_called_once_with(connector_diagram.splitlines())
    assert _last_status(view) == "Preview: 4 entries"


def test_partial_result_lists_failures(
        controller: BuildController, view: MagicMock, tmp_path: Path
) -> None:
    out = Path(controller.config["output_root"])
    out.mkdir()
    (out / "blocked").write_text("", encoding="utf-8")
    result = run_build(controller.config, text="blocked/\n└── a\nfree.txt\n")

    with patch(f"{_MODULE}.mb") as mock_mb:
        controller._handle_build_result(result)

    message = mock_mb.showerror.call_args.args[1]
    assert "blocked/a" in message
    assert _last_status(view) == const.MSG_BUILD_PARTIAL


def test_worker_exception_is_reported(controller: BuildController, view: MagicMock) -> None:
    with patch(f"{_MODULE}.mb") as mock_mb:
        controller._handle_build_result(RuntimeError("disk on fire"))

    assert "disk on fire" in mock_mb.showerror.call_args.args[1]
    assert _last_status(view) == const.MSG_BUILD_FAILED
