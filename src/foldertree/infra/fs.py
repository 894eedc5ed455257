from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves where the running program lives. Artifacts are written next to
the program, never into the scanned directory or the working directory.
"""

import os
import sys

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_executable_dir() -> str:
    """
    Resolve the directory containing the running executable.

    Standards:
    - Frozen build (PyInstaller): directory of the bundled binary.
    - Source/installed run: directory of the launched entry script.

    Returns:
        str: Absolute directory path.

    Raises:
        OSError: If the interpreter exposes no executable location.
    """
    if getattr(sys, "frozen", False):
        exe_path = sys.executable
    else:
        exe_path = sys.argv[0] if sys.argv else ""

    if not exe_path:
        raise OSError("executable location is unavailable")

    return os.path.dirname(os.path.abspath(exe_path))
