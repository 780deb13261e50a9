from __future__ import annotations

"""
Tree Diagram Parser.

Recovers an ordered list of HierarchyEntry records from a plain-text tree
diagram. Two depth signals are read from every line:

- connector counting: vertical and branch glyphs each mark one ancestor column;
- indentation counting: width of the glyph/whitespace prefix divided by the
  4-column indentation unit.

The larger of the two wins. Decorations in front of a name (emoji, list
bullets, Markdown list markers) are dropped from the token and do not
affect depth. A plain indentation strategy re-reads the diagram when the
first pass yields nothing.

Parsing is pure and total: malformed input degrades to fewer entries.
"""

import logging
import re
import unicodedata
from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple

from treeforge.domain.constants import (
    ASCII_BRANCH_GLYPHS,
    BRANCH_GLYPHS,
    BULLET_GLYPHS,
    DIRECTORY_MARKER,
    FILL_GLYPHS,
    INDENT_GLYPHS,
    INDENT_UNIT,
    LEVEL_GLYPHS,
    ROOT_TOKENS,
    TAB_WIDTH,
    VERTICAL_GLYPHS,
)
from treeforge.domain.hierarchy_models import HierarchyEntry

logger = logging.getLogger(__name__)

_CONNECTOR_PREFIX_RE = re.compile(
    r"(?:\s"
    r"|[" + re.escape(VERTICAL_GLYPHS + BRANCH_GLYPHS + FILL_GLYPHS) + r"]"
    r"|[" + re.escape(ASCII_BRANCH_GLYPHS) + r"]-+"
    r"|-{2,})*"
)


class ScannedLine(NamedTuple):
    depth: int
    token: str


LineScanner = Callable[[str], Optional[ScannedLine]]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse(text: object) -> List[HierarchyEntry]:
    """
    Parse a tree diagram into hierarchy entries.

    Args:
        text: Full diagram text. Anything that is not a string yields no entries.

    Returns:
        List[HierarchyEntry]: Entries in diagram order; empty if nothing parseable.
    """
    if not isinstance(text, str) or not text.strip():
        return []
    return parse_lines(text.splitlines())


def parse_lines(lines: Iterable[str]) -> List[HierarchyEntry]:
    """
    Parse pre-split diagram lines.

    Runs the connector strategy first and falls back to the indentation
    strategy only if the first pass produced zero entries.
    """
    expanded = [str(line).expandtabs(TAB_WIDTH) for line in lines]

    entries = _build_entries(expanded, scan_connector_line)
    if entries:
        logger.debug(f"Connector strategy recovered {len(entries)} entries.")
        return entries

    entries = _build_entries(expanded, scan_indented_line)
    if entries:
        logger.debug(f"Indentation fallback recovered {len(entries)} entries.")
    else:
        logger.debug("No parseable entries found in diagram.")
    return entries


# -----------------------------------------------------------------------------
# LINE SCANNERS
# -----------------------------------------------------------------------------

def scan_connector_line(line: str) -> Optional[ScannedLine]:
    """
    Read one line with the connector strategy.

    Returns None for blank lines and lines holding only glyphs or
    decorations.
    """
    stripped = line.rstrip()
    prefix = _CONNECTOR_PREFIX_RE.match(stripped).group(0)
    token = _strip_decorations(stripped[len(prefix):])

    if not token:
        return None

    connectors = sum(1 for ch in prefix if ch in LEVEL_GLYPHS)
    indentation = len(prefix) // INDENT_UNIT
    return ScannedLine(max(connectors, indentation), token)


def scan_indented_line(line: str) -> Optional[ScannedLine]:
    """
    Read one line with the indentation-only strategy.

    Depth comes from the width of the leading whitespace/glyph run alone;
    any bullet or symbol run in front of the name is discarded.
    """
    stripped = line.rstrip()
    width = 0
    while width < len(stripped) and (stripped[width].isspace() or stripped[width] in INDENT_GLYPHS):
        width += 1

    token = _strip_symbols(stripped[width:])
    if not token:
        return None
    return ScannedLine(width // INDENT_UNIT, token)


# -----------------------------------------------------------------------------
# PATH RECONSTRUCTION
# -----------------------------------------------------------------------------

def _build_entries(lines: List[str], scanner: LineScanner) -> List[HierarchyEntry]:
    entries: List[HierarchyEntry] = []
    # (inferred depth, name) of each directory still open, shallowest first
    open_ancestors: List[Tuple[int, str]] = []

    for line in lines:
        scanned = scanner(line)
        if scanned is None:
            continue

        name, is_directory = _split_marker(scanned.token)
        if not name or name in ROOT_TOKENS:
            continue

        open_ancestors = [a for a in open_ancestors if a[0] < scanned.depth]
        parents = [a[1] for a in open_ancestors]

        entries.append(
            HierarchyEntry(
                name=name,
                full_path="/".join(parents + [name]),
                is_directory=is_directory,
                depth=len(parents),
            )
        )

        if is_directory:
            open_ancestors = open_ancestors + [(scanned.depth, name)]

    return entries


def _split_marker(token: str) -> Tuple[str, bool]:
    if token.endswith(DIRECTORY_MARKER):
        return token.rstrip(DIRECTORY_MARKER).rstrip(), True
    return token, False


# -----------------------------------------------------------------------------
# CHARACTER CLASSES
# -----------------------------------------------------------------------------

# Zero-width marks that ride along with emoji (variation selectors, ZWJ)
_JOINER_CATEGORIES = ("Mn", "Cf")

# Markdown list markers, recognized only when followed by whitespace
_LIST_MARKERS = "-+*"


def _is_decoration(ch: str) -> bool:
    """Bullets and Unicode 'other symbol' (So) characters: emoji, arrows, box drawing."""
    return (
            ch in BULLET_GLYPHS
            or unicodedata.category(ch) == "So"
            or unicodedata.category(ch) in _JOINER_CATEGORIES
    )


def _strip_decorations(text: str) -> str:
    """Drop the run of decorations and list markers in front of a name."""
    i = 0
    while i < len(text):
        ch = text[i]
        if ch.isspace() or _is_decoration(ch):
            i += 1
        elif ch in _LIST_MARKERS and i + 1 < len(text) and text[i + 1].isspace():
            i += 2
        else:
            break
    return text[i:].strip()


def _strip_symbols(text: str) -> str:
    i = 0
    while i < len(text) and (
            text[i].isspace()
            or text[i] in INDENT_GLYPHS
            or _is_decoration(text[i])
    ):
        i += 1
    return text[i:].strip()
