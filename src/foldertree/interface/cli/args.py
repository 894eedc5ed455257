from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema. Only the options leading the command line
are parsed; everything from the first other word onwards is path text, so
unquoted paths containing spaces, or starting with '-', survive intact.
"""

import argparse
from typing import Any, Dict, List, Sequence, Tuple

from foldertree.domain.constants import VERSION_FLAG
from foldertree.utils.i18n import i18n

# Leading options recognised before the path
_FLAG_OPTIONS = ("-h", "--help", "--debug")
_VALUE_OPTIONS = ("--lang", "--log-file")

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the FolderTree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="foldertree",
        description=i18n.t("app.description"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    # --- Presentation ---
    p.add_argument(
        "--lang",
        dest="locale",
        choices=i18n.available_locales(),
        default=None,
        help=i18n.t("cli.args.lang"),
    )

    # --- Target (filled by parse_cli, listed here for --help) ---
    p.add_argument(
        "path",
        nargs="*",
        help=i18n.t("cli.args.path"),
    )

    return p


def parse_cli(argv: Sequence[str]) -> argparse.Namespace:
    """
    Parse leading options and collect the remaining words as the path.

    Args:
        argv: Command line arguments without the program name.

    Returns:
        argparse.Namespace: Parsed options; ``path`` holds the path words.
    """
    options, path_words = split_argv(argv)
    args = build_parser().parse_args(options)
    args.path = path_words
    return args

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """
    Separate the leading known options from the path words.

    Returns:
        Tuple[List[str], List[str]]: (option tokens, path words).
    """
    i = 0
    while i < len(argv):
        token = argv[i]
        if token in _FLAG_OPTIONS:
            i += 1
        elif token in _VALUE_OPTIONS:
            i += 2
        elif token.split("=", 1)[0] in _VALUE_OPTIONS and "=" in token:
            i += 1
        else:
            break
    i = min(i, len(argv))
    return list(argv[:i]), list(argv[i:])


def is_version_request(argv: Sequence[str]) -> bool:
    """True if the leading argument is the version flag, in any letter case."""
    return bool(argv) and argv[0].lower() == VERSION_FLAG


def join_path(parts: List[str]) -> str:
    """Rebuild a path the shell split on whitespace."""
    return " ".join(parts)


def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "locale": args.locale,
        "log_file": args.log_file,
    }
    if args.debug:
        overrides["log_level"] = "DEBUG"
    return overrides
