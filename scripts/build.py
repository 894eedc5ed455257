from __future__ import annotations

"""
Build Automation for FolderTree.

Produces the standalone one-file executable with PyInstaller. The binary
writes its artifacts next to itself, so it can be dropped into any folder
and run against any directory.
"""

import os
import platform
import shutil
import sys

import PyInstaller.__main__

# -----------------------------------------------------------------------------
# PRIVATE ARTIFACT HELPERS
# -----------------------------------------------------------------------------

def _clean_artifacts() -> None:
    """Remove residual PyInstaller output so every build starts clean."""
    for folder in ("build", "dist"):
        if os.path.exists(folder):
            print(f"[*] Cleaning {folder}...")
            shutil.rmtree(folder)

    spec_file = "foldertree.spec"
    if os.path.exists(spec_file):
        os.remove(spec_file)

# -----------------------------------------------------------------------------
# PUBLIC API: BUILD EXECUTION
# -----------------------------------------------------------------------------

def build() -> None:
    """Configure and execute the PyInstaller compilation."""
    print("======================================================")
    print("Starting Build Process for FolderTree")
    print("======================================================")

    _clean_artifacts()

    sep = ';' if platform.system() == 'Windows' else ':'

    script_dir = os.path.dirname(os.path.abspath(__file__))
    project_root = os.path.dirname(script_dir)
    src_dir = os.path.join(project_root, "src")

    main_entry = os.path.join(src_dir, "foldertree", "main.py")

    locales_src = os.path.join(src_dir, "foldertree", "interface", "locales", "*.json")
    locales_dest = os.path.join("foldertree", "interface", "locales")

    args = [
        main_entry,
        '--name=foldertree',
        '--onefile',
        '--console',
        f'--paths={src_dir}',
        '--clean',
        '--collect-submodules=foldertree',
        f'--add-data={locales_src}{sep}{locales_dest}',
    ]

    print("[*] Running PyInstaller with configured paths...")
    try:
        PyInstaller.__main__.run(args)
        print("\n[+] Build Successful! Executable located in 'dist/' folder.")
    except Exception as e:
        print(f"\n[!] CRITICAL BUILD FAILURE: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    build()
