from __future__ import annotations

"""
Unit tests for configuration validation.
"""

import pytest

from treeforge.core.pipeline.validator import validate_config
from treeforge.domain.config import get_default_config


def test_empty_dict_yields_defaults() -> None:
    clean, warnings = validate_config({})

    assert clean == get_default_config()
    assert warnings == []


def test_non_dict_input_falls_back() -> None:
    """TC-01: Garbage input is replaced by defaults with a warning."""
    clean, warnings = validate_config(["not", "a", "dict"])

    assert clean == get_default_config()
    assert len(warnings) == 1
    assert "expected dict" in warnings[0]


def test_non_dict_input_strict_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


@pytest.mark.parametrize("raw, expected", [
    ("yes", True),
    ("OFF", False),
    (1, True),
    (0, False),
])
def test_bool_coercion(raw, expected) -> None:
    """TC-02: Common truthy/falsy spellings are converted with a warning."""
    clean, warnings = validate_config({"print_tree": raw})

    assert clean["print_tree"] is expected
    assert len(warnings) == 1


def test_invalid_bool_uses_fallback() -> None:
    clean, warnings = validate_config({"create_missing_root": "maybe"})

    assert clean["create_missing_root"] is True
    assert "expected bool" in warnings[0]


def test_strict_mode_rejects_coercion() -> None:
    with pytest.raises(TypeError):
        validate_config({"print_tree": "yes"}, strict=True)


def test_string_fields_are_stripped() -> None:
    clean, _ = validate_config({"output_root": "  /tmp/out  ", "diagram_path": "   "})

    assert clean["output_root"] == "/tmp/out"
    assert clean["diagram_path"] == ""


def test_non_string_path_uses_fallback() -> None:
    clean, warnings = validate_config({"output_root": 42})

    assert clean["output_root"] == ""
    assert "expected str" in warnings[0]


def test_unknown_keys_are_dropped() -> None:
    clean, warnings = validate_config({"bogus": 1, "print_tree": True})

    assert "bogus" not in clean
    assert warnings == ["Unknown configuration keys ignored: bogus."]
