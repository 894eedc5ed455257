from __future__ import annotations

"""
Domain Constants.

Provides application-wide constants: release versioning, the fixed names
of the generated artifacts and the recognised command-line switches.
"""

from typing import Tuple

CURRENT_VERSION = "28.10.25"

# -----------------------------------------------------------------------------
# OUTPUT ARTIFACTS
# -----------------------------------------------------------------------------
TXT_FILENAME = "Folder tree.txt"
MARKDOWN_FILENAME = "Folder tree (Markdown).md"
HTML_FILENAME = "Folder tree (WEB).html"

# Write order matters: artifacts are produced and reported in this sequence
ARTIFACT_FILENAMES: Tuple[str, ...] = (TXT_FILENAME, MARKDOWN_FILENAME, HTML_FILENAME)

# -----------------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------------
VERSION_FLAG = "--version"
