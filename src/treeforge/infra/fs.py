from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation, the application data directory,
and diagram source loading. Acts as an abstraction over the 'os' module to
ensure uniform behavior across Windows and Unix-like systems.
"""

import os
import sys
from typing import Optional, TextIO, Tuple

from treeforge.domain.errors import DiagramSourceError

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeForge"
UNIX_APP_DIR_NAME = ".treeforge"
DIAGRAM_EXTENSION = ".txt"
STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TreeForge
    - Linux/Mac: ~/.treeforge

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def default_output_root(diagram_path: str) -> str:
    """
    Directory where a diagram is materialized when no root is given.

    The structure is created next to the diagram file; stdin and inline
    text fall back to the current working directory.
    """
    if not diagram_path or diagram_path == STDIN_MARKER:
        return os.getcwd()
    return os.path.dirname(os.path.abspath(diagram_path))


def is_writable_dir(path: str) -> Tuple[bool, str]:
    """
    Check that a path is an existing, writable directory.

    Returns:
        Tuple[bool, str]: (Usable flag, reason when unusable).
    """
    if not path:
        return False, "empty path"
    if not os.path.exists(path):
        return False, "does not exist"
    if not os.path.isdir(path):
        return False, "not a directory"
    if not os.access(path, os.W_OK | os.X_OK):
        return False, "not writable"
    return True, ""


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)

# -----------------------------------------------------------------------------
# DIAGRAM SOURCE API
# -----------------------------------------------------------------------------

def read_diagram(
        diagram_path: str,
        *,
        require_txt: bool = True,
        stdin: Optional[TextIO] = None,
) -> str:
    """
    Load diagram text from a file, or from stdin when the path is '-'.

    Args:
        diagram_path: Path to the diagram file, or '-' for stdin.
        require_txt: Reject files without the '.txt' extension.
        stdin: Stream to read for '-' (defaults to sys.stdin).

    Returns:
        str: The raw diagram text.

    Raises:
        DiagramSourceError: If the source is missing, rejected or unreadable.
    """
    if diagram_path == STDIN_MARKER:
        stream = stdin if stdin is not None else sys.stdin
        return stream.read()

    if not diagram_path:
        raise DiagramSourceError("No diagram file given.")

    if require_txt and not diagram_path.lower().endswith(DIAGRAM_EXTENSION):
        raise DiagramSourceError(f"Diagram must be a {DIAGRAM_EXTENSION} file: {diagram_path}")

    if not os.path.isfile(diagram_path):
        raise DiagramSourceError(f"Diagram file does not exist: {diagram_path}")

    try:
        with open(diagram_path, "r", encoding="utf-8-sig", errors="replace") as f:
            return f.read()
    except OSError as e:
        raise DiagramSourceError(f"Cannot read diagram file {diagram_path}: {e}") from e
