from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI (any argument given) or the GUI (no
arguments) and installs a last-resort exception hook so that crashes are
logged and reported instead of dumped on the user.
"""

import logging
import os
import sys
import traceback
from typing import Any

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Allow `python src/treeforge/main.py` without installation
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if not getattr(sys, "frozen", False):
    SRC_DIR = os.path.dirname(BASE_DIR)
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Log an unhandled exception and report it through the active interface.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    error_msg = str(value)

    logger = logging.getLogger("treeforge.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {error_msg}\n{stack_trace}")

    if len(sys.argv) > 1:
        print(f"CRITICAL ERROR (TREEFORGE CLI): {error_msg}", file=sys.stderr)
        print("Run with --debug for the full trace.", file=sys.stderr)
        sys.exit(1)

    try:
        import tkinter.messagebox as mb
        mb.showerror("TreeForge - Fatal Error", build_fatal_report(error_msg))
    except Exception:
        print(f"CRITICAL SYSTEM ERROR: {error_msg}\n{stack_trace}", file=sys.stderr)
    sys.exit(1)


def build_fatal_report(error_msg: str, n_lines: int = 15) -> str:
    """Body of the fatal error dialog: the error plus the tail of the GUI log."""
    from treeforge.infra.logging import get_recent_logs

    return (
        f"A critical error occurred:\n\n{error_msg}\n\n"
        f"Last log entries:\n{get_recent_logs(n_lines)}"
    )


sys.excepthook = global_exception_handler


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Dispatch to the CLI or GUI controller.

    Returns:
        int: Process exit code.
    """
    try:
        if len(sys.argv) > 1:
            from treeforge.interface.cli.app import main as cli_main
            return cli_main()

        from treeforge.interface.gui.app import main as gui_main
        gui_main()
        return 0

    except SystemExit:
        raise
    except Exception as e:
        global_exception_handler(type(e), e, sys.exc_info()[2])
        return 1


if __name__ == "__main__":
    sys.exit(main())
