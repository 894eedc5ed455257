from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared directory fixtures used across unit and integration tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a small directory tree.

    Structure:
    /project
      /docs
        guide.md
      /src
        /empty
        main.py
        Utils.py
      b.txt
      README.md
    """
    root = tmp_path / "project"
    root.mkdir()

    (root / "docs").mkdir()
    (root / "docs" / "guide.md").write_text("# Guide", encoding="utf-8")

    src = root / "src"
    src.mkdir()
    (src / "empty").mkdir()
    (src / "main.py").write_text("print('hi')", encoding="utf-8")
    (src / "Utils.py").write_text("X = 1", encoding="utf-8")

    (root / "b.txt").write_text("b", encoding="utf-8")
    (root / "README.md").write_text("# Project", encoding="utf-8")

    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Separate folder standing in for the executable's directory."""
    out = tmp_path / "bin"
    out.mkdir()
    return out
