from __future__ import annotations

"""
Unit tests for the CLI application controller.

Runs the CLI in-process with the executable directory redirected to a
temporary folder, checking exit codes, console output and side effects.
"""

from pathlib import Path

import pytest

from foldertree.core.pipeline import engine
from foldertree.domain.constants import (
    ARTIFACT_FILENAMES,
    CURRENT_VERSION,
    MARKDOWN_FILENAME,
    TXT_FILENAME,
)
from foldertree.infra.logging import reset_logging
from foldertree.interface.cli.app import main
from foldertree.utils.i18n import i18n


@pytest.fixture(autouse=True)
def isolate_cli(output_dir: Path, monkeypatch: pytest.MonkeyPatch):
    """Redirect artifacts and restore global logging/locale state."""
    monkeypatch.setattr(engine, "get_executable_dir", lambda: str(output_dir))
    yield
    reset_logging()
    i18n.load_locale("en")


def test_no_arguments_prints_usage(capsys: pytest.CaptureFixture, output_dir: Path) -> None:
    assert main([]) == 1
    assert "Usage: specify the directory path as an argument." in capsys.readouterr().out
    assert list(output_dir.iterdir()) == []


@pytest.mark.parametrize("flag", ["--version", "--VERSION"])
def test_version_flag(flag: str, capsys: pytest.CaptureFixture, output_dir: Path) -> None:
    assert main([flag, "ignored"]) == 0
    assert capsys.readouterr().out == f"FolderTree version: {CURRENT_VERSION}\n"
    assert list(output_dir.iterdir()) == []


def test_success_lists_artifacts(
        sample_project: Path, output_dir: Path, capsys: pytest.CaptureFixture
) -> None:
    assert main([str(sample_project)]) == 0

    out = capsys.readouterr().out
    assert out == (
        f'Files created at "{output_dir}":\n'
        + "".join(f" - {name}\n" for name in ARTIFACT_FILENAMES)
    )
    for name in ARTIFACT_FILENAMES:
        assert (output_dir / name).exists()


def test_path_with_spaces_is_rebuilt(tmp_path: Path, output_dir: Path) -> None:
    target = tmp_path / "My Documents"
    target.mkdir()
    (target / "note.txt").write_text("x", encoding="utf-8")

    assert main(str(target).split(" ")) == 0

    txt = (output_dir / TXT_FILENAME).read_text(encoding="utf-8")
    assert txt == "My Documents\n└── note.txt\n"


def test_missing_path_reports_error(tmp_path: Path, output_dir: Path, capsys: pytest.CaptureFixture) -> None:
    missing = tmp_path / "missing"

    assert main([str(missing)]) == 1

    out = capsys.readouterr().out
    assert f"Error: cannot access the specified path '{missing}':" in out
    assert list(output_dir.iterdir()) == []


def test_file_path_reports_not_a_directory(
        sample_project: Path, output_dir: Path, capsys: pytest.CaptureFixture
) -> None:
    target = sample_project / "b.txt"

    assert main([str(target)]) == 1

    out = capsys.readouterr().out
    assert f"Error: '{target}' is a file, not a folder." in out
    assert list(output_dir.iterdir()) == []


def test_write_failure_reported_but_exit_zero(
        sample_project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    real_write = engine.write_artifact

    def write(path: str, text: str) -> None:
        if path.endswith(MARKDOWN_FILENAME):
            raise OSError("disk full")
        real_write(path, text)

    monkeypatch.setattr(engine, "write_artifact", write)

    assert main([str(sample_project)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"Error writing '{MARKDOWN_FILENAME}': disk full"
    assert lines[1].startswith("Files created at ")
    assert lines[2:] == [f" - {name}" for name in ARTIFACT_FILENAMES]


def test_russian_locale_messages(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    missing = tmp_path / "missing"

    assert main(["--lang", "ru", str(missing)]) == 1

    assert "Ошибка: невозможно получить доступ к указанному пути" in capsys.readouterr().out


def test_keyboard_interrupt_exits_130(
        sample_project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    def interrupt(path: str):
        raise KeyboardInterrupt

    monkeypatch.setattr("foldertree.interface.cli.app.run_pipeline", interrupt)

    assert main([str(sample_project)]) == 130
    assert "Operation cancelled by user." in capsys.readouterr().out


def test_dash_prefixed_directory_is_scanned(
        tmp_path: Path, output_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "-backup"
    target.mkdir()
    (target / "old.txt").write_text("x", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert main(["-backup"]) == 0

    txt = (output_dir / TXT_FILENAME).read_text(encoding="utf-8")
    assert txt == "-backup\n└── old.txt\n"
