from __future__ import annotations

"""
Domain Exceptions.

Only batch-fatal conditions are modelled as exceptions. Per-entry problems
are aggregated into results instead of being raised.
"""


class TreeForgeError(Exception):
    """Base class for all application errors."""


class RootUnavailableError(TreeForgeError):
    """The destination root cannot be resolved, created or written to."""

    def __init__(self, root_path: str, reason: str):
        super().__init__(f"Destination root unavailable: {root_path} ({reason})")
        self.root_path = root_path
        self.reason = reason


class DiagramSourceError(TreeForgeError):
    """The diagram text could not be obtained from its source."""
