from __future__ import annotations

"""
Background Worker Threads for GUI Operations.

Runs builds off the Tk event loop so that large diagrams or slow disks
never freeze the window. Results are handed back through a callback.
"""

import logging
from typing import Any, Callable, Dict

from treeforge.core.pipeline.engine import run_build

logger = logging.getLogger(__name__)


def run_build_task(
        config: Dict[str, Any],
        text: str,
        dry_run: bool,
        on_complete: Callable[[Any], None],
) -> None:
    """
    Execute one build in the current (worker) thread.

    Args:
        config: Session configuration.
        text: Diagram text taken from the editor.
        dry_run: Preview only.
        on_complete: Receives the BuildResult, or the exception on crash.
    """
    result: Any
    try:
        result = run_build(dict(config), text=text, dry_run=dry_run)
    except Exception as e:
        logger.critical(f"Build Thread: Critical failure detected: {e}", exc_info=True)
        result = e
    on_complete(result)
