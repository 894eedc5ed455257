from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object handed from the pipeline engine to the interface
layer, together with the factory functions that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# ERROR CODES
# -----------------------------------------------------------------------------
ERROR_PATH_INACCESSIBLE = "path_inaccessible"
ERROR_NOT_A_DIRECTORY = "not_a_directory"
ERROR_EXECUTABLE_DIR = "executable_dir"
ERROR_TREE_BUILD = "tree_build"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Outcome of a complete scan-render-write run.

    A run with failed artifact writes is still ``ok``: write failures are
    reported through ``failed_files`` only.

    Attributes:
        ok: False if the run aborted before writing anything.
        error_code: Machine-readable reason for an aborted run.
        error: Underlying error detail for an aborted run.
        base_path: Target directory as supplied by the caller.
        output_dir: Directory the artifacts were written to.
        generated_files: Artifact name -> absolute path, for successful writes.
        failed_files: Artifact name -> error detail, for failed writes.
        summary: Scan statistics (directory and file counts).
    """
    ok: bool
    error_code: str = ""
    error: str = ""

    base_path: str = ""
    output_dir: str = ""

    generated_files: Dict[str, str] = field(default_factory=dict)
    failed_files: Dict[str, str] = field(default_factory=dict)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error_code: str,
        error: str,
        base_path: str,
        output_dir: str = "",
) -> PipelineResult:
    """
    Create an aborted pipeline result.

    Args:
        error_code: One of the ERROR_* constants.
        error: Detailed error description.
        base_path: The target input directory.
        output_dir: Output directory, if already resolved.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error_code=error_code,
        error=error,
        base_path=base_path,
        output_dir=output_dir,
    )


def create_success_result(
        base_path: str,
        output_dir: str,
        generated_files: Dict[str, str],
        failed_files: Dict[str, str],
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """Create a completed pipeline result instance."""
    return PipelineResult(
        ok=True,
        base_path=base_path,
        output_dir=output_dir,
        generated_files=dict(generated_files),
        failed_files=dict(failed_files),
        summary=summary_extra or {},
    )
