from __future__ import annotations

"""
Build Domain Data Models.

Defines the result object exchanged between the build engine and the
interface layers (CLI/GUI), plus factory functions for both outcomes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from treeforge.domain.hierarchy_models import HierarchyEntry, MaterializationResult

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildResult:
    """
    Unified result of one diagram build.

    Attributes:
        ok: False when the build could not run at all or any entry failed.
        error: Descriptive message in case of failure.
        diagram_path: Source file of the diagram ('' for inline text or stdin).
        output_root: Absolute destination root.
        dry_run: Whether filesystem effects were skipped.
        empty: True when the diagram contained no parseable structure.
        entries: Parsed hierarchy entries in diagram order.
        tree_lines: Normalized re-rendering of the parsed hierarchy.
        materialization: Materializer report (None for dry runs and early errors).
        summary: Flat execution statistics for rendering.
    """
    ok: bool
    error: str

    diagram_path: str
    output_root: str
    dry_run: bool = False
    empty: bool = False

    entries: List[HierarchyEntry] = field(default_factory=list)
    tree_lines: List[str] = field(default_factory=list)
    materialization: Optional[MaterializationResult] = None

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        diagram_path: str,
        output_root: str,
        entries: Optional[List[HierarchyEntry]] = None,
        materialization: Optional[MaterializationResult] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> BuildResult:
    """
    Create a failed build result.

    Args:
        error: Detailed error description.
        diagram_path: Diagram source path.
        output_root: Destination root.
        entries: Entries parsed before the failure, if any.
        materialization: Partial materializer report, if any.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        BuildResult: An immutable error result object.
    """
    return BuildResult(
        ok=False,
        error=error,
        diagram_path=diagram_path,
        output_root=output_root,
        entries=entries or [],
        materialization=materialization,
        summary=summary_extra or {},
    )


def create_success_result(
        diagram_path: str,
        output_root: str,
        entries: List[HierarchyEntry],
        tree_lines: List[str],
        materialization: Optional[MaterializationResult] = None,
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> BuildResult:
    """
    Create a result for a build that completed without failures.

    Args:
        diagram_path: Diagram source path.
        output_root: Destination root.
        entries: Parsed entries.
        tree_lines: Rendered preview lines.
        materialization: Materializer report (None for dry runs).
        dry_run: Simulation flag.
        summary_extra: Execution statistics.

    Returns:
        BuildResult: An immutable result object.
    """
    return BuildResult(
        ok=True,
        error="",
        diagram_path=diagram_path,
        output_root=output_root,
        dry_run=dry_run,
        empty=not entries,
        entries=entries,
        tree_lines=tree_lines,
        materialization=materialization,
        summary=summary_extra or {},
    )
