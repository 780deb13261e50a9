from __future__ import annotations

"""
Tree Renderer.

Converts parsed hierarchy entries back into a normalized connector diagram.
Sibling order follows the original diagram order.
"""

from typing import Dict, List, Sequence, Set

from treeforge.domain.constants import (
    DIRECTORY_MARKER,
    RENDER_BLANK,
    RENDER_BRANCH,
    RENDER_LAST,
    RENDER_PIPE,
)
from treeforge.domain.hierarchy_models import HierarchyEntry

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_entries(entries: Sequence[HierarchyEntry]) -> List[str]:
    """
    Render entries as diagram lines.

    Root entries are printed bare; their descendants use the standard
    connectors (├──, └──) with a 4-column unit. Directories keep the
    trailing marker so the output parses back to the same entries, minus
    repeated paths.

    Args:
        entries: Entries as returned by the parser.

    Returns:
        List[str]: Diagram lines, without line terminators.
    """
    # Repeated paths are drawn once, matching what the materializer creates
    children: Dict[str, List[HierarchyEntry]] = {}
    seen: Set[str] = set()
    for entry in entries:
        if entry.full_path in seen:
            continue
        seen.add(entry.full_path)
        children.setdefault(entry.parent_path, []).append(entry)

    lines: List[str] = []
    for root in children.get("", []):
        lines.append(_label(root))
        if root.is_directory:
            _render_children(root.full_path, children, lines, prefix="")
    return lines


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_children(
        parent_path: str,
        children: Dict[str, List[HierarchyEntry]],
        lines: List[str],
        prefix: str,
) -> None:
    kids = children.get(parent_path, [])
    total = len(kids)

    for i, entry in enumerate(kids):
        is_last = (i == total - 1)
        connector = RENDER_LAST if is_last else RENDER_BRANCH
        lines.append(f"{prefix}{connector}{_label(entry)}")

        if entry.is_directory:
            new_prefix = prefix + (RENDER_BLANK if is_last else RENDER_PIPE)
            _render_children(entry.full_path, children, lines, new_prefix)


def _label(entry: HierarchyEntry) -> str:
    return entry.name + DIRECTORY_MARKER if entry.is_directory else entry.name
