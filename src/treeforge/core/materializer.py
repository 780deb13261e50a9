from __future__ import annotations

"""
Hierarchy Materializer.

Creates the directories and empty files described by parsed hierarchy
entries beneath a destination root. The batch is best-effort: every entry
is attempted, failures are collected into the result, and only an unusable
root aborts the run. Existing directories count as success and existing
files are never opened for writing, so re-running a build is harmless.
"""

import logging
import os
from typing import List, Optional, Sequence, Set

from treeforge.domain.errors import RootUnavailableError
from treeforge.domain.hierarchy_models import (
    EntryFailure,
    HierarchyEntry,
    MaterializationResult,
)
from treeforge.infra.fs import is_writable_dir, safe_mkdir

logger = logging.getLogger(__name__)

_CREATED = "created"
_EXISTING = "existing"


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def ensure_root(root_path: str) -> str:
    """
    Create the destination root (with parents) if it is missing.

    Args:
        root_path: Destination directory.

    Returns:
        str: Absolute root path.

    Raises:
        RootUnavailableError: If the root cannot be created.
    """
    if not root_path:
        raise RootUnavailableError(root_path, "empty path")

    root = os.path.abspath(root_path)
    created, error = safe_mkdir(root)
    if not created:
        raise RootUnavailableError(root, error or "cannot create directory")
    logger.debug(f"Destination root ready: {root}")
    return root


def materialize(root_path: str, entries: Sequence[HierarchyEntry]) -> MaterializationResult:
    """
    Create the hierarchy on disk.

    Entries are processed shallowest first (stable within a depth), so
    every parent directory exists before its children are attempted,
    whatever the diagram line order was.

    Args:
        root_path: Existing, writable destination directory.
        entries: Parsed hierarchy entries.

    Returns:
        MaterializationResult: Aggregated counts and per-entry failures.

    Raises:
        RootUnavailableError: If the root is missing, not a directory or not writable.
    """
    root = os.path.abspath(root_path) if root_path else ""
    usable, reason = is_writable_dir(root)
    if not usable:
        raise RootUnavailableError(root_path, reason)

    ordered = sorted(entries, key=lambda e: e.depth)
    seen: Set[str] = set()
    failures: List[EntryFailure] = []
    created = existing = duplicates = 0

    logger.info(f"Materializing {len(ordered)} entries under {root}")

    for entry in ordered:
        target = _resolve_target(root, entry.full_path)
        if target is None:
            failures.append(EntryFailure(entry, "path resolves outside the destination root"))
            logger.warning(f"Skipped '{entry.full_path}': path resolves outside the destination root.")
            continue

        if target in seen:
            duplicates += 1
            logger.debug(f"Duplicate entry skipped: {entry.full_path}")
            continue

        try:
            if entry.is_directory:
                outcome = _create_directory(target)
            else:
                outcome = _create_empty_file(target)
        except OSError as e:
            failures.append(EntryFailure(entry, _describe_os_error(e)))
            logger.error(f"Failed to create '{entry.full_path}': {e}")
            continue

        seen.add(target)
        if outcome == _CREATED:
            created += 1
            logger.debug(f"Created {'directory' if entry.is_directory else 'file'}: {target}")
        else:
            existing += 1

    result = MaterializationResult(
        root_path=root,
        processed_count=created + existing,
        created_count=created,
        existing_count=existing,
        duplicate_count=duplicates,
        failures=failures,
    )
    logger.info(
        f"Materialization {result.status.value}: {result.processed_count} processed, "
        f"{created} created, {len(failures)} failed."
    )
    return result


# -----------------------------------------------------------------------------
# ENTRY OPERATIONS
# -----------------------------------------------------------------------------

def _create_directory(target: str) -> str:
    if os.path.isdir(target):
        return _EXISTING
    os.makedirs(target, exist_ok=True)
    return _CREATED


def _create_empty_file(target: str) -> str:
    parent = os.path.dirname(target)
    if parent:
        os.makedirs(parent, exist_ok=True)

    if os.path.isdir(target):
        raise IsADirectoryError(f"A directory already exists at {target}")
    if os.path.exists(target):
        return _EXISTING

    # 'x' never truncates: a file appearing in between is left as is
    try:
        with open(target, "x", encoding="utf-8"):
            pass
    except FileExistsError:
        return _EXISTING
    return _CREATED


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _resolve_target(root: str, full_path: str) -> Optional[str]:
    """Absolute path of an entry, or None if it would land outside the root."""
    relative = full_path.replace("\\", "/").lstrip("/")
    target = os.path.normpath(os.path.join(root, *relative.split("/")))
    if target == root:
        return None
    try:
        if os.path.commonpath([root, target]) != root:
            return None
    except ValueError:
        return None
    return target


def _describe_os_error(e: OSError) -> str:
    if e.strerror and e.filename:
        return f"{e.strerror}: {e.filename}"
    return str(e)
