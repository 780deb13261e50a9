from __future__ import annotations

"""
Build Controller.

Bridges the editor window and the build engine: scrapes widgets into the
session configuration, dispatches builds to a worker thread, and renders
the outcome back on the Tk loop.
"""

import logging
import os
import threading
import tkinter.messagebox as mb
from typing import Any, Dict

from treeforge.domain import config as cfg
from treeforge.domain import constants as const
from treeforge.domain.build_models import BuildResult
from treeforge.domain.errors import DiagramSourceError
from treeforge.infra.fs import read_diagram
from treeforge.interface.gui import threads

logger = logging.getLogger(__name__)


class BuildController:
    """
    Controller for the single-window editor.

    The view is expected to expose: `textbox`, `entry_output`,
    `btn_build`, `btn_preview`, `lbl_status` and `show_preview(lines)`.
    """

    def __init__(self, app: Any, config: Dict[str, Any]):
        """
        Args:
            app: Root CustomTkinter application (used for `after` scheduling).
            config: Active session configuration dictionary.
        """
        self.app = app
        self.config = config
        self.view: Any = None

    def register_view(self, view: Any) -> None:
        self.view = view

    # -------------------------------------------------------------------------
    # CONFIGURATION SYNCHRONIZATION
    # -------------------------------------------------------------------------

    def sync_view_from_config(self) -> None:
        """Populate widgets from the session (last destination, last diagram)."""
        if not self.view:
            return

        self._set_entry(self.view.entry_output, self.config.get("output_root", ""))

        diagram_path = self.config.get("diagram_path", "")
        if diagram_path and os.path.isfile(diagram_path):
            self.load_diagram_file(diagram_path, quiet=True)

    def sync_config_from_view(self) -> None:
        self.config["output_root"] = self.view.entry_output.get().strip()

    def get_diagram_text(self) -> str:
        return self.view.textbox.get("1.0", "end")

    # -------------------------------------------------------------------------
    # DIAGRAM LOADING
    # -------------------------------------------------------------------------

    def load_diagram_file(self, path: str, quiet: bool = False) -> bool:
        """
        Load a diagram file into the editor.

        When no destination is set yet, the diagram's directory becomes the
        destination.

        Args:
            path: Diagram file path.
            quiet: Log instead of showing a dialog on failure.

        Returns:
            bool: True if the file was loaded.
        """
        try:
            text = read_diagram(path, require_txt=self.config.get("require_txt_extension", True))
        except DiagramSourceError as e:
            logger.warning(str(e))
            if not quiet:
                mb.showerror("Open Diagram", str(e))
            return False

        self.view.textbox.delete("1.0", "end")
        self.view.textbox.insert("1.0", text)
        self.config["diagram_path"] = path

        if not self.view.entry_output.get().strip():
            self._set_entry(self.view.entry_output, os.path.dirname(os.path.abspath(path)))

        self._set_status(f"Loaded {os.path.basename(path)}")
        return True

    # -------------------------------------------------------------------------
    # BUILD EXECUTION
    # -------------------------------------------------------------------------

    def start_build(self, dry_run: bool = False) -> None:
        """
        Validate the form and start a build on a daemon thread.

        Args:
            dry_run: Preview only.
        """
        self.sync_config_from_view()
        text = self.get_diagram_text()

        if not text.strip():
            self._set_status(const.MSG_NO_STRUCTURE)
            return

        if not dry_run and not self.config.get("output_root"):
            mb.showerror("Build", "Choose a destination folder first.")
            return

        self._toggle_ui(disabled=True)
        self._set_status("Previewing..." if dry_run else "Building...")
        logger.debug(f"Starting build (DryRun={dry_run}). Config: {self.config}")

        threading.Thread(
            target=threads.run_build_task,
            args=(self.config, text, dry_run, self._on_build_complete),
            daemon=True,
        ).start()

    def _on_build_complete(self, result: Any) -> None:
        """Marshal the worker result back onto the Tk loop."""
        self.app.after(0, lambda: self._handle_build_result(result))

    def _handle_build_result(self, result: Any) -> None:
        self._toggle_ui(disabled=False)

        if isinstance(result, Exception):
            self._set_status(const.MSG_BUILD_FAILED)
            mb.showerror("Build", f"Unexpected error: {result}\n\nSee the log file for details.")
            return

        if not isinstance(result, BuildResult):
            return

        if result.empty and result.ok:
            self._set_status(const.MSG_NO_STRUCTURE)
            return

        if result.dry_run:
            self.view.show_preview(result.tree_lines)
            self._set_status(f"Preview: {len(result.entries)} entries")
            return

        report = result.materialization
        if result.ok and report is not None:
            self._set_status(const.MSG_BUILD_OK)
            mb.showinfo(
                "Build",
                f"{const.MSG_BUILD_OK}\n\n{report.created_count} created, "
                f"{report.existing_count} already present.",
            )
            cfg.save_config(self.config)
            return

        if report is not None and report.processed_count:
            self._set_status(const.MSG_BUILD_PARTIAL)
        else:
            self._set_status(const.MSG_BUILD_FAILED)
        mb.showerror("Build", self._format_failures(result))

    # -------------------------------------------------------------------------
    # VIEW HELPERS
    # -------------------------------------------------------------------------

    @staticmethod
    def _format_failures(result: BuildResult, limit: int = 10) -> str:
        report = result.materialization
        if report is None or not report.failures:
            return result.error

        lines = [result.error, ""]
        for failure in report.failures[:limit]:
            lines.append(f"{failure.entry.full_path}: {failure.cause}")
        if len(report.failures) > limit:
            lines.append(f"... and {len(report.failures) - limit} more")
        return "\n".join(lines)

    def _toggle_ui(self, disabled: bool) -> None:
        state = "disabled" if disabled else "normal"
        self.view.btn_build.configure(state=state)
        self.view.btn_preview.configure(state=state)

    def _set_status(self, text: str) -> None:
        self.view.lbl_status.configure(text=text)

    @staticmethod
    def _set_entry(entry: Any, value: str) -> None:
        entry.delete(0, "end")
        if value:
            entry.insert(0, value)
