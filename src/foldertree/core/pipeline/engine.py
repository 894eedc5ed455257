from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a complete run:
1. Validates the target path.
2. Resolves the output directory (next to the executable by default).
3. Builds the directory tree.
4. Renders and writes the text, Markdown and HTML artifacts.

Failures in steps 1-3 abort the run before anything is written. Artifact
write failures are recorded per file and never abort the remaining writes.
"""

import logging
import os
import stat
from typing import Callable, Dict, List, Optional, Tuple

from foldertree.core.analysis.html_renderer import render_html
from foldertree.core.analysis.tree_generator import build_tree, count_nodes
from foldertree.core.analysis.tree_renderer import render_glyph_tree, render_markdown
from foldertree.core.pipeline.writer import write_artifact
from foldertree.domain.constants import HTML_FILENAME, MARKDOWN_FILENAME, TXT_FILENAME
from foldertree.domain.pipeline_models import (
    ERROR_EXECUTABLE_DIR,
    ERROR_NOT_A_DIRECTORY,
    ERROR_PATH_INACCESSIBLE,
    ERROR_TREE_BUILD,
    PipelineResult,
    create_error_result,
    create_success_result,
)
from foldertree.domain.tree_models import Node, TreeAccessError
from foldertree.infra.fs import get_executable_dir

logger = logging.getLogger(__name__)

# Artifact name -> renderer, in write order
RENDERERS: List[Tuple[str, Callable[[Node], str]]] = [
    (TXT_FILENAME, render_glyph_tree),
    (MARKDOWN_FILENAME, render_markdown),
    (HTML_FILENAME, render_html),
]


def run_pipeline(input_path: str, output_dir: Optional[str] = None) -> PipelineResult:
    """
    Execute a full scan-render-write run.

    Args:
        input_path: Directory to scan.
        output_dir: Destination for artifacts. Defaults to the directory of
            the running executable.

    Returns:
        PipelineResult: Run outcome. ``ok`` stays True when only some
        artifact writes failed.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Target Validation
    # -------------------------------------------------------------------------
    try:
        st = os.stat(input_path)
    except OSError as e:
        logger.error(f"Cannot access '{input_path}': {e}")
        return create_error_result(ERROR_PATH_INACCESSIBLE, str(e), input_path)

    if not stat.S_ISDIR(st.st_mode):
        logger.error(f"Target is not a directory: {input_path}")
        return create_error_result(ERROR_NOT_A_DIRECTORY, "", input_path)

    # -------------------------------------------------------------------------
    # 2) Output Location
    # -------------------------------------------------------------------------
    if output_dir is None:
        try:
            output_dir = get_executable_dir()
        except OSError as e:
            logger.error(f"Cannot resolve executable directory: {e}")
            return create_error_result(ERROR_EXECUTABLE_DIR, str(e), input_path)

    # -------------------------------------------------------------------------
    # 3) Tree Construction
    # -------------------------------------------------------------------------
    try:
        root = build_tree(input_path)
    except TreeAccessError as e:
        logger.error(f"Tree construction failed for '{e.path}': {e.cause}")
        return create_error_result(ERROR_TREE_BUILD, str(e), input_path, output_dir)

    dirs, files = count_nodes(root)
    logger.info(f"Scanned {dirs} directories and {files} files.")

    # -------------------------------------------------------------------------
    # 4) Render & Persist
    # -------------------------------------------------------------------------
    generated: Dict[str, str] = {}
    failed: Dict[str, str] = {}

    for file_name, render in RENDERERS:
        target = os.path.join(output_dir, file_name)
        try:
            write_artifact(target, render(root))
        except OSError as e:
            logger.error(f"Failed to write '{target}': {e}")
            failed[file_name] = str(e)
            continue
        logger.info(f"Artifact saved: {target}")
        generated[file_name] = target

    return create_success_result(
        base_path=input_path,
        output_dir=output_dir,
        generated_files=generated,
        failed_files=failed,
        summary_extra={"directories": dirs, "files": files},
    )
