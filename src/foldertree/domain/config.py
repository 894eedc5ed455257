from __future__ import annotations

"""
Runtime Configuration Defaults.

FolderTree keeps no persistent state: every run starts from these defaults
and applies the command-line overrides on top of them.
"""

from typing import Any, Dict

from foldertree.utils.i18n import DEFAULT_LOCALE

# Keys accepted from the interface layer
CONFIG_KEYS = ("locale", "log_level", "log_file")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "locale": DEFAULT_LOCALE,
        "log_level": "WARNING",
        "log_file": None,
    }


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Unknown keys and ``None`` values are ignored.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out
