from __future__ import annotations

"""
Unit tests for the domain constants.
"""

from foldertree.domain import constants


def test_artifacts_listed_in_write_order() -> None:
    assert constants.ARTIFACT_FILENAMES == (
        constants.TXT_FILENAME,
        constants.MARKDOWN_FILENAME,
        constants.HTML_FILENAME,
    )


def test_public_names() -> None:
    public = {name for name in vars(constants) if name.isupper()}
    assert public == {
        "CURRENT_VERSION",
        "TXT_FILENAME",
        "MARKDOWN_FILENAME",
        "HTML_FILENAME",
        "ARTIFACT_FILENAMES",
        "VERSION_FLAG",
    }
