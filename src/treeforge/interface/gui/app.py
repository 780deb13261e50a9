from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle.

Initializes logging and persisted state, assembles the editor window and
binds its widgets to the BuildController before entering the Tk loop.
"""

import logging
from tkinter import filedialog

import customtkinter as ctk

from treeforge.domain import config as cfg
from treeforge.domain import constants as const
from treeforge.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_gui_log_path,
)
from treeforge.interface.gui.components.main_window import EditorFrame, create_main_window
from treeforge.interface.gui.controllers.build_controller import BuildController

logger = logging.getLogger(__name__)


def main() -> None:
    """Initialize and launch the graphical interface."""
    # PHASE 1: Persistent state
    state = cfg.load_app_state()
    settings = cfg.get_app_settings(state)
    config = dict(state["last_session"])

    # PHASE 2: Diagnostics
    configure_logging(LoggingConfig(
        level=settings["log_level"],
        console=True,
        log_file=get_default_gui_log_path(),
    ))
    logger.info(f"GUI Lifecycle: Initializing v{const.CURRENT_CONFIG_VERSION}")

    # PHASE 3: View construction
    app = create_main_window(appearance_mode=settings["theme"])
    editor = EditorFrame(app)
    editor.grid(row=0, column=0, sticky="nsew", padx=20, pady=20)

    # PHASE 4: Controller binding
    controller = BuildController(app, config)
    controller.register_view(editor)
    controller.sync_view_from_config()

    editor.btn_build.configure(command=lambda: controller.start_build(dry_run=False))
    editor.btn_preview.configure(command=lambda: controller.start_build(dry_run=True))
    editor.btn_open.configure(command=lambda: _browse_diagram(controller))
    editor.btn_browse_out.configure(command=lambda: _browse_folder(editor.entry_output))

    # PHASE 5: Loop
    app.protocol("WM_DELETE_WINDOW", lambda: _on_close(app, controller))
    app.mainloop()


def _browse_diagram(controller: BuildController) -> None:
    path = filedialog.askopenfilename(
        title="Open tree diagram",
        filetypes=[("Text files", "*.txt"), ("All files", "*.*")],
    )
    if path:
        controller.load_diagram_file(path)


def _browse_folder(entry: ctk.CTkEntry) -> None:
    initial = entry.get().strip() or None
    path = filedialog.askdirectory(initialdir=initial)
    if path:
        entry.delete(0, "end")
        entry.insert(0, path)


def _on_close(app: ctk.CTk, controller: BuildController) -> None:
    """Persist the session before the window is destroyed."""
    controller.sync_config_from_view()
    cfg.save_config(controller.config)
    logger.info("GUI Lifecycle: Shutdown.")
    app.destroy()
