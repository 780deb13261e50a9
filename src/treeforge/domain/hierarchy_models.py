from __future__ import annotations

"""
Hierarchy Domain Data Models.

Defines the entries produced by the diagram parser and the aggregated
report produced by the materializer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

# -----------------------------------------------------------------------------
# PARSER OUTPUT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class HierarchyEntry:
    """
    A single directory or file recovered from one diagram line.

    Attributes:
        name: Bare identifier with the directory marker stripped.
        full_path: Slash-joined path from the hierarchy root, no trailing slash.
        is_directory: True if the source token ended with the directory marker.
        depth: Zero-based nesting level.
    """
    name: str
    full_path: str
    is_directory: bool
    depth: int

    @property
    def parent_path(self) -> str:
        """Slash-joined path of the enclosing directory ('' at the root)."""
        head = self.full_path[: len(self.full_path) - len(self.name)]
        return head.rstrip("/")


# -----------------------------------------------------------------------------
# MATERIALIZER OUTPUT
# -----------------------------------------------------------------------------

class MaterializationStatus(str, Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"


@dataclass(frozen=True)
class EntryFailure:
    """
    A single entry that could not be materialized.

    Attributes:
        entry: The offending entry.
        cause: Human readable reason.
    """
    entry: HierarchyEntry
    cause: str


@dataclass(frozen=True)
class MaterializationResult:
    """
    Aggregated outcome of a materialization batch.

    Attributes:
        root_path: Absolute destination root.
        processed_count: Entries handled successfully (created or already present).
        created_count: Entries newly created on disk.
        existing_count: Entries found already present and left untouched.
        duplicate_count: Repeated lines skipped within the batch.
        failures: Per-entry failures, in processing order.
    """
    root_path: str
    processed_count: int = 0
    created_count: int = 0
    existing_count: int = 0
    duplicate_count: int = 0
    failures: List[EntryFailure] = field(default_factory=list)

    @property
    def status(self) -> MaterializationStatus:
        if not self.failures:
            return MaterializationStatus.SUCCESS
        if self.processed_count > 0:
            return MaterializationStatus.PARTIAL
        return MaterializationStatus.FAILED

    @property
    def ok(self) -> bool:
        return not self.failures
