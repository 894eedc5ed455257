from __future__ import annotations

"""Unit tests for runtime configuration defaults and merging."""

from foldertree.domain.config import get_default_config, merge_config


def test_default_config_values() -> None:
    conf = get_default_config()
    assert conf == {"locale": "en", "log_level": "WARNING", "log_file": None}


def test_merge_ignores_none_and_unknown_keys() -> None:
    base = get_default_config()
    merged = merge_config(base, {"locale": None, "log_level": "DEBUG", "output_dir": "/tmp"})

    assert merged["locale"] == "en"
    assert merged["log_level"] == "DEBUG"
    assert "output_dir" not in merged
    assert base["log_level"] == "WARNING"
