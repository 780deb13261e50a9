from __future__ import annotations

"""
Main Application Window.

Builds the root CustomTkinter window and the single editor frame: a
diagram textbox, the destination picker, action buttons and a status line.
"""

from typing import List

import customtkinter as ctk

from treeforge.domain import constants as const

# -----------------------------------------------------------------------------
# ROOT WINDOW CONSTRUCTION
# -----------------------------------------------------------------------------

def create_main_window(appearance_mode: str = "System") -> ctk.CTk:
    """
    Instantiate and configure the primary application window.

    Args:
        appearance_mode: CustomTkinter mode ("System", "Light" or "Dark").

    Returns:
        ctk.CTk: The configured root application instance.
    """
    ctk.set_appearance_mode(appearance_mode)
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()
    app.title(f"{const.APP_NAME} - v{const.CURRENT_CONFIG_VERSION}")
    app.geometry("820x640")

    app.grid_columnconfigure(0, weight=1)
    app.grid_rowconfigure(0, weight=1)
    return app

# -----------------------------------------------------------------------------
# EDITOR FRAME
# -----------------------------------------------------------------------------

class EditorFrame(ctk.CTkFrame):
    """Diagram editor with destination selection and build actions."""

    def __init__(self, master: ctk.CTk):
        super().__init__(master)
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(1, weight=1)

        # --- Diagram ---
        ctk.CTkLabel(self, text="Tree diagram", font=("Arial", 14, "bold")).grid(
            row=0, column=0, padx=10, pady=(10, 0), sticky="w"
        )
        self.btn_open = ctk.CTkButton(self, text="Open .txt", width=100)
        self.btn_open.grid(row=0, column=2, padx=10, pady=(10, 0), sticky="e")

        self.textbox = ctk.CTkTextbox(self, font=("Courier New", 13), wrap="none")
        self.textbox.grid(row=1, column=0, columnspan=3, padx=10, pady=10, sticky="nsew")

        # --- Destination ---
        ctk.CTkLabel(self, text="Destination").grid(row=2, column=0, padx=10, pady=5, sticky="w")
        self.entry_output = ctk.CTkEntry(self)
        self.entry_output.grid(row=2, column=1, padx=5, pady=5, sticky="ew")
        self.btn_browse_out = ctk.CTkButton(self, text="Browse", width=100)
        self.btn_browse_out.grid(row=2, column=2, padx=10, pady=5)

        # --- Actions ---
        actions = ctk.CTkFrame(self, fg_color="transparent")
        actions.grid(row=3, column=0, columnspan=3, padx=10, pady=10, sticky="ew")
        actions.grid_columnconfigure((0, 1), weight=1)

        self.btn_preview = ctk.CTkButton(actions, text="PREVIEW", fg_color="gray30")
        self.btn_preview.grid(row=0, column=0, padx=(0, 5), sticky="ew")
        self.btn_build = ctk.CTkButton(actions, text="BUILD STRUCTURE", font=("Arial", 13, "bold"))
        self.btn_build.grid(row=0, column=1, padx=(5, 0), sticky="ew")

        self.lbl_status = ctk.CTkLabel(self, text="", anchor="w")
        self.lbl_status.grid(row=4, column=0, columnspan=3, padx=10, pady=(0, 10), sticky="ew")

    def show_preview(self, lines: List[str]) -> None:
        """Display the normalized tree in a modal-less window."""
        window = ctk.CTkToplevel(self)
        window.title(const.MSG_PREVIEW_TITLE)
        window.geometry("520x480")

        box = ctk.CTkTextbox(window, font=("Courier New", 13), wrap="none")
        box.pack(fill="both", expand=True, padx=10, pady=10)
        box.insert("1.0", "\n".join(lines))
        box.configure(state="disabled")
