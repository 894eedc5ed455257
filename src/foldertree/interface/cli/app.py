from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: version short-circuit, argument parsing,
logging bootstrap, pipeline execution and the user-facing report. All
console messages for the user go to stdout; diagnostics go to logging.
"""

import sys
from typing import List, Optional

from foldertree.core.pipeline.engine import run_pipeline
from foldertree.domain.config import get_default_config, merge_config
from foldertree.domain.constants import ARTIFACT_FILENAMES, CURRENT_VERSION
from foldertree.domain.pipeline_models import ERROR_NOT_A_DIRECTORY, PipelineResult
from foldertree.infra.logging import LoggingConfig, configure_logging, get_logger
from foldertree.interface.cli import args as cli_args
from foldertree.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Command line arguments without the program name.
            Defaults to sys.argv[1:].

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if argv is None:
        argv = sys.argv[1:]

    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Version short-circuit (no filesystem work)
    if cli_args.is_version_request(argv):
        print(i18n.t("cli.version", version=CURRENT_VERSION))
        return 0

    # 2. Argument parsing and configuration
    args = cli_args.parse_cli(argv)
    conf = merge_config(get_default_config(), cli_args.args_to_overrides(args))

    configure_logging(LoggingConfig(level=conf["log_level"], log_file=conf["log_file"]))
    i18n.load_locale(conf["locale"])

    dir_path = cli_args.join_path(args.path)
    if not dir_path:
        print(i18n.t("cli.usage"))
        return 1

    # 3. Pipeline execution
    logger.debug(f"Target directory resolved to: {dir_path}")
    try:
        result = run_pipeline(dir_path)
    except KeyboardInterrupt:
        print(i18n.t("cli.status.interrupted"))
        return 130

    # 4. Report
    if not result.ok:
        print(_error_message(result))
        return 1

    _print_human_summary(result)
    return 0

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _error_message(result: PipelineResult) -> str:
    """Map an aborted run to its localized message."""
    key = f"cli.errors.{result.error_code}"
    if result.error_code == ERROR_NOT_A_DIRECTORY:
        return i18n.t(key, path=result.base_path)
    return i18n.t(key, path=result.base_path, error=result.error)


def _print_human_summary(result: PipelineResult) -> None:
    """
    Print per-artifact write failures followed by the output listing.

    The listing always names all three artifacts, including ones whose
    write failed above it.
    """
    for name, error in result.failed_files.items():
        print(i18n.t("cli.errors.write_failed", name=name, error=error))

    print(i18n.t("cli.status.created", path=result.output_dir))
    for name in ARTIFACT_FILENAMES:
        print(f" - {name}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
