from __future__ import annotations

"""
Domain Constants.

Glyph vocabularies used to read tree diagrams, the fixed indentation unit,
user-facing messages and application versioning.
"""

from typing import FrozenSet

CURRENT_CONFIG_VERSION = "1.0.0"
APP_NAME = "TreeForge"

# Columns per nesting level, as drawn by `tree` and similar tools
INDENT_UNIT = 4
TAB_WIDTH = 4

DIRECTORY_MARKER = "/"

# Tokens that name the diagram root itself (`tree` prints "." first)
ROOT_TOKENS: FrozenSet[str] = frozenset({"."})

# -----------------------------------------------------------------------------
# CONNECTOR GLYPHS
# -----------------------------------------------------------------------------
VERTICAL_GLYPHS = "│┃║╎╏┆┇┊┋|"

# Tees and corners that open a child column (square, heavy, double, rounded)
BRANCH_GLYPHS = "├┝┞┟┠┡┢┣╞╟╠└┕┖┗╘╙╚╰"

# Horizontal runs, including down-tees drawn by `npm ls` ("├─┬ pkg")
FILL_GLYPHS = "─━═╌╍┄┅┈┉╴╶╸╺┬┭┮┯┰┱┲┳╤╥╦"

# ASCII corners only count when followed by dashes ("+--", "`--", "\--")
ASCII_BRANCH_GLYPHS = "+`\\"
ASCII_FILL_GLYPH = "-"

# Glyphs that mark one ancestor column each
LEVEL_GLYPHS: FrozenSet[str] = frozenset(VERTICAL_GLYPHS + BRANCH_GLYPHS + ASCII_BRANCH_GLYPHS)

# Every character the indentation strategy treats as indentation
INDENT_GLYPHS: FrozenSet[str] = frozenset(
    VERTICAL_GLYPHS + BRANCH_GLYPHS + FILL_GLYPHS + ASCII_BRANCH_GLYPHS + ASCII_FILL_GLYPH
)

# List markers stripped from the front of a name ("* src/", "• main.py")
BULLET_GLYPHS: FrozenSet[str] = frozenset("*•·◦▪>")

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------
RENDER_BRANCH = "├── "
RENDER_LAST = "└── "
RENDER_PIPE = "│   "
RENDER_BLANK = "    "

# -----------------------------------------------------------------------------
# USER MESSAGES
# -----------------------------------------------------------------------------
MSG_NO_STRUCTURE = "No structure found in diagram."
MSG_BUILD_OK = "Folder structure created!"
MSG_BUILD_PARTIAL = "Folder structure created with errors."
MSG_BUILD_FAILED = "Folder structure could not be created."
MSG_PREVIEW_TITLE = "PREVIEW (no changes written)"

# -----------------------------------------------------------------------------
# APPLICATION SETTINGS
# -----------------------------------------------------------------------------
APPEARANCE_MODES = ("System", "Light", "Dark")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_APPEARANCE_MODE = "System"
DEFAULT_LOG_LEVEL = "INFO"
