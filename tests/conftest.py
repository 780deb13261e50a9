from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared diagram fixtures used across unit and integration tests.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "gui: controller tests that need tkinter")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def connector_diagram() -> str:
    """The canonical connector-drawn diagram."""
    return (
        "project/\n"
        "├── src/\n"
        "│   └── main.ext\n"
        "└── README\n"
    )


@pytest.fixture
def indented_diagram() -> str:
    """The same hierarchy drawn with 4-space indentation only."""
    return (
        "project/\n"
        "    src/\n"
        "        main.ext\n"
        "    README\n"
    )


@pytest.fixture
def nested_diagram() -> str:
    """A deeper diagram with siblings on several levels."""
    return (
        "page_builder/\n"
        "├── app/\n"
        "│   ├── main.py\n"
        "│   ├── templates/\n"
        "│   │   ├── base.html\n"
        "│   │   └── editor.html\n"
        "│   └── static/\n"
        "│       ├── js/\n"
        "│       │   └── editor.js\n"
        "│       └── css/\n"
        "│           └── style.css\n"
        "│\n"
        "├── requirements.txt\n"
        "└── run.sh\n"
    )


@pytest.fixture
def build_config(tmp_path) -> Dict[str, Any]:
    """A complete session configuration pointing at a temporary destination."""
    return {
        "diagram_path": "",
        "output_root": str(tmp_path / "out"),
        "require_txt_extension": True,
        "create_missing_root": True,
        "print_tree": False,
    }
