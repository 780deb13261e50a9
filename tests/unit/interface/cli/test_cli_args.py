from __future__ import annotations

"""
Unit tests for CLI argument definition and override mapping.
"""

import pytest

from treeforge.interface.cli.args import args_to_overrides, build_parser


def test_no_flags_produce_no_overrides() -> None:
    """TC-01: Saved settings are untouched when nothing is passed."""
    args = build_parser().parse_args([])

    assert args_to_overrides(args) == {}


def test_full_override_mapping() -> None:
    """TC-02: Every source and behavior flag maps onto its config key."""
    args = build_parser().parse_args([
        "tree.txt", "-o", "out", "--any-extension", "--no-create-root", "--print-tree",
    ])

    assert args_to_overrides(args) == {
        "diagram_path": "tree.txt",
        "output_root": "out",
        "require_txt_extension": False,
        "create_missing_root": False,
        "print_tree": True,
    }


def test_runtime_flags_are_not_config() -> None:
    args = build_parser().parse_args(["-", "--dry-run", "--json", "--debug", "--log-file", "x.log"])

    assert args.dry_run and args.json_output and args.debug
    assert args.log_file == "x.log"
    assert args_to_overrides(args) == {"diagram_path": "-"}


def test_help_exits_cleanly(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--help"])

    assert exc.value.code == 0
    assert "usage: treeforge" in capsys.readouterr().out
