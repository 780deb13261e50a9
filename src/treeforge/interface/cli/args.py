from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the build engine.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the TreeForge CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treeforge",
        description="Create directories and empty files from a text tree diagram.",
    )

    # --- Path Management ---
    p.add_argument(
        "diagram",
        nargs="?",
        default=None,
        help="Diagram file (.txt), or '-' to read the diagram from stdin.",
    )
    p.add_argument(
        "-o", "--output-root",
        dest="output_root",
        default=None,
        help="Destination directory (default: the diagram's directory).",
    )

    # --- Source Rules ---
    p.add_argument(
        "--any-extension",
        action="store_true",
        help="Accept diagram files without the .txt extension.",
    )
    p.add_argument(
        "--no-create-root",
        action="store_true",
        help="Fail instead of creating a missing destination directory.",
    )

    # --- Runtime Modes ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and preview the structure without writing anything.",
    )
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the normalized tree that was recovered from the diagram.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the build result as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually gave are returned, so saved settings
    survive for everything else.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.diagram is not None:
        overrides["diagram_path"] = args.diagram
    if args.output_root is not None:
        overrides["output_root"] = args.output_root

    if args.any_extension:
        overrides["require_txt_extension"] = False
    if args.no_create_root:
        overrides["create_missing_root"] = False
    if args.print_tree:
        overrides["print_tree"] = True

    return overrides
