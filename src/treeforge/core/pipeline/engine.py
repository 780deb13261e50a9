from __future__ import annotations

"""
Build orchestration.

Coordinates one diagram build:
1. Validates configuration.
2. Loads the diagram text (file, stdin or inline).
3. Resolves the destination root.
4. Parses the diagram and renders a normalized preview.
5. Materializes the hierarchy (skipped for dry runs and empty diagrams).
"""

import logging
import os
from typing import Any, Dict, List, Optional, TextIO

from treeforge.core.materializer import ensure_root, materialize
from treeforge.core.parsing.diagram_parser import parse
from treeforge.core.parsing.tree_renderer import render_entries
from treeforge.core.pipeline.validator import validate_config
from treeforge.domain.build_models import (
    BuildResult,
    create_error_result,
    create_success_result,
)
from treeforge.domain.constants import MSG_NO_STRUCTURE
from treeforge.domain.errors import DiagramSourceError, RootUnavailableError
from treeforge.domain.hierarchy_models import HierarchyEntry, MaterializationResult
from treeforge.infra.fs import default_output_root, normalize_path, read_diagram

logger = logging.getLogger(__name__)


def run_build(
        config: Optional[Dict[str, Any]],
        *,
        text: Optional[str] = None,
        dry_run: bool = False,
        stdin: Optional[TextIO] = None,
) -> BuildResult:
    """
    Execute a full diagram build.

    Args:
        config: Raw or partial configuration dictionary.
        text: Inline diagram text; when given, 'diagram_path' is not read.
        dry_run: Parse and preview only, without touching the filesystem.
        stdin: Stream used when 'diagram_path' is '-'.

    Returns:
        BuildResult: Status, parsed entries, preview lines and statistics.
    """
    logger.info("Build started.")

    # -------------------------------------------------------------------------
    # 1) Config
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config or {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    diagram_path = cfg["diagram_path"]
    output_root = normalize_path(cfg["output_root"], default_output_root(diagram_path))

    # -------------------------------------------------------------------------
    # 2) Diagram Source
    # -------------------------------------------------------------------------
    if text is None:
        try:
            text = read_diagram(
                diagram_path,
                require_txt=cfg["require_txt_extension"],
                stdin=stdin,
            )
        except DiagramSourceError as e:
            logger.error(str(e))
            return create_error_result(str(e), diagram_path, output_root)

    # -------------------------------------------------------------------------
    # 3) Parse
    # -------------------------------------------------------------------------
    entries = parse(text)
    tree_lines = render_entries(entries)

    if not entries:
        logger.info(MSG_NO_STRUCTURE)
        return create_success_result(
            diagram_path, output_root, entries, tree_lines,
            dry_run=dry_run,
            summary_extra={"status": "empty", "entries": 0},
        )

    logger.info(f"Parsed {len(entries)} entries from diagram.")

    if dry_run:
        return create_success_result(
            diagram_path, output_root, entries, tree_lines,
            dry_run=True,
            summary_extra=_plan_summary(entries),
        )

    # -------------------------------------------------------------------------
    # 4) Materialize
    # -------------------------------------------------------------------------
    try:
        if cfg["create_missing_root"] and not os.path.exists(output_root):
            output_root = ensure_root(output_root)
        report = materialize(output_root, entries)
    except RootUnavailableError as e:
        logger.critical(str(e))
        return create_error_result(
            str(e), diagram_path, output_root, entries=entries,
            summary_extra={"status": "root_unavailable"},
        )

    summary = _report_summary(report)
    summary["entries"] = len(entries)

    if report.ok:
        return create_success_result(
            diagram_path, output_root, entries, tree_lines,
            materialization=report,
            summary_extra=summary,
        )

    return create_error_result(
        f"{len(report.failures)} of {len(entries)} entries could not be created.",
        diagram_path, output_root,
        entries=entries,
        materialization=report,
        summary_extra=summary,
    )


# -----------------------------------------------------------------------------
# SUMMARY HELPERS
# -----------------------------------------------------------------------------

def _plan_summary(entries: List[HierarchyEntry]) -> Dict[str, Any]:
    directories = sum(1 for e in entries if e.is_directory)
    return {
        "status": "dry_run",
        "entries": len(entries),
        "directories": directories,
        "files": len(entries) - directories,
    }


def _report_summary(report: MaterializationResult) -> Dict[str, Any]:
    return {
        "status": report.status.value,
        "processed": report.processed_count,
        "created": report.created_count,
        "existing": report.existing_count,
        "duplicates": report.duplicate_count,
        "failed": len(report.failures),
        "failures": [
            {"path": f.entry.full_path, "cause": f.cause} for f in report.failures
        ],
    }
