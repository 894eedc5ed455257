from __future__ import annotations

"""
Artifact Persistence.

Writes rendered documents to disk. Each call fully regenerates its target.
"""


def write_artifact(output_path: str, text: str) -> None:
    """
    Write a rendered document, replacing any previous content.

    Newlines are written untranslated so repeated runs on an unchanged
    directory produce byte-identical files on every platform.

    Args:
        output_path: Target file.
        text: Complete document content.

    Raises:
        OSError: If the file cannot be created or written.
    """
    with open(output_path, "w", encoding="utf-8", newline="") as out:
        out.write(text)
