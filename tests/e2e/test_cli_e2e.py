from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes and
stream output. Only invocations that abort before writing are exercised
here, since a successful run writes next to the entry script itself.
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "foldertree" / "main.py"


def run_cli(args: List[str]) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Args:
        args: Command line arguments (excluding 'python' and script path).

    Returns:
        subprocess.CompletedProcess: Result with returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["PYTHONIOENCODING"] = "utf-8"

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_without_arguments_prints_usage() -> None:
    result = run_cli([])

    assert result.returncode == 1
    assert "Usage:" in result.stdout


@pytest.mark.parametrize("flag", ["--version", "--vErSiOn"])
def test_cli_version(flag: str) -> None:
    result = run_cli([flag])

    assert result.returncode == 0
    assert result.stdout.startswith("FolderTree version: ")


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    missing = tmp_path / "non existent folder"

    result = run_cli(str(missing).split(" "))

    assert result.returncode == 1
    assert f"cannot access the specified path '{missing}'" in result.stdout


def test_cli_rejects_file_target(tmp_path: Path) -> None:
    target = tmp_path / "plain.txt"
    target.write_text("x", encoding="utf-8")

    result = run_cli([str(target)])

    assert result.returncode == 1
    assert "is a file, not a folder" in result.stdout


def test_cli_help() -> None:
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "--lang" in result.stdout
