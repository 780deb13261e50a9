from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, persistent storage, CLI overrides), build execution and
result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from treeforge.core.pipeline.engine import run_build
from treeforge.core.pipeline.validator import validate_config
from treeforge.domain import constants as const
from treeforge.domain.build_models import BuildResult
from treeforge.domain.config import get_default_config, load_config
from treeforge.infra.logging import LoggingConfig, configure_logging, get_logger
from treeforge.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_BUILD_FAILED = 1
EXIT_INVALID_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv[1:].

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Resolve base configuration and merge overrides
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if not clean_conf["diagram_path"]:
        print("ERROR: No diagram given. Pass a .txt file or '-' for stdin.", file=sys.stderr)
        return EXIT_INVALID_INPUT

    # 4. Build execution phase
    try:
        result = run_build(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Build interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Build failed unexpectedly: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_BUILD_FAILED

    # 5. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, show_tree=bool(clean_conf["print_tree"]))

    return _exit_code(result)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge CLI overrides into the base configuration.

    A diagram given on the command line without '-o' is built next to
    itself, not in a destination remembered from an earlier session.
    """
    out = {k: v for k, v in base.items() if k in get_default_config()}
    if "diagram_path" in overrides and "output_root" not in overrides:
        out["output_root"] = ""
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


def _exit_code(result: BuildResult) -> int:
    if result.ok:
        return EXIT_OK
    if result.materialization is None:
        return EXIT_INVALID_INPUT
    return EXIT_BUILD_FAILED

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: BuildResult, show_tree: bool = False) -> None:
    """
    Print a terminal report for a build result.

    Args:
        result: The build result to render.
        show_tree: Also print the recovered tree.
    """
    if result.empty and result.ok:
        print(const.MSG_NO_STRUCTURE)
        return

    if result.materialization is None and not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.dry_run or show_tree:
        if result.dry_run:
            print(const.MSG_PREVIEW_TITLE)
        for line in result.tree_lines:
            print(line)
        print()

    if result.dry_run:
        summary = result.summary
        print(f"Destination: {result.output_root}")
        print(f"Would create: {summary.get('directories', 0)} directories, {summary.get('files', 0)} files")
        return

    report = result.materialization
    if report is None:
        return

    if report.ok:
        print(const.MSG_BUILD_OK)
    elif report.processed_count:
        print(const.MSG_BUILD_PARTIAL)
    else:
        print(const.MSG_BUILD_FAILED)

    print(f"Destination: {report.root_path}")
    stats = {
        "Processed": report.processed_count,
        "Created": report.created_count,
        "Already present": report.existing_count,
        "Duplicates skipped": report.duplicate_count,
        "Failed": len(report.failures),
    }
    for label, value in stats.items():
        print(f"{label}: {value}")

    if report.failures:
        print("\nFailures:", file=sys.stderr)
        for failure in report.failures:
            print(f"  - {failure.entry.full_path}: {failure.cause}", file=sys.stderr)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
