from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides a singleton manager for user-facing CLI messages. Implements
dot-notation lookup over nested JSON locale files, with English as the
fallback catalogue for keys a locale does not translate.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SYSTEM DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific string translations.

    Resolution order for a key: active locale, default locale, the
    caller-supplied default, the key itself.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_path: Optional[str] = None):
        self._locale = DEFAULT_LOCALE
        self._translations: Dict[str, Any] = {}
        self._fallback: Dict[str, Any] = {}
        self.is_loaded = False

        if locales_path is None:
            base_dir = os.path.dirname(os.path.abspath(__file__))
            locales_path = os.path.join(base_dir, LOCALES_REL_PATH)
        self._locales_path = os.path.abspath(locales_path)

        self._fallback = self._read_catalogue(DEFAULT_LOCALE) or {}
        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def available_locales(self) -> List[str]:
        """List locale codes that have a catalogue on disk."""
        try:
            names = os.listdir(self._locales_path)
        except OSError:
            return []
        return sorted(n[:-len(".json")] for n in names if n.endswith(".json"))

    def load_locale(self, locale: str) -> None:
        """
        Activate a translation catalogue.

        A missing or corrupt catalogue leaves the manager on the default
        locale instead of failing.

        Args:
            locale: ISO identifier for the target language.
        """
        catalogue = self._read_catalogue(locale)
        if catalogue is None:
            self._translations = self._fallback
            self._locale = DEFAULT_LOCALE
            self.is_loaded = bool(self._fallback)
            return

        self._translations = catalogue
        self._locale = locale
        self.is_loaded = True
        logger.debug(f"I18n: Loaded locale dictionary: {locale}")

    def t(self, key: str, default: Optional[str] = None, **kwargs: Any) -> str:
        """
        Resolve and format a translation string using dot-notation.

        Args:
            key: Hierarchical identifier path (e.g., 'cli.errors.not_a_directory').
            default: Text used when neither catalogue defines the key.
            **kwargs: Dynamic variables for string formatting.

        Returns:
            str: The translated and formatted string.
        """
        template = _lookup(self._translations, key)
        if template is None:
            template = _lookup(self._fallback, key)
        if template is None:
            template = default if default is not None else key

        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Interpolation error for path '{key}': {e}")
            return template

    def _read_catalogue(self, locale: str) -> Optional[Dict[str, Any]]:
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'. Fallback active.")
            return None

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.error(f"I18n: Locale file {file_path} is not a JSON object.")
            return None
        return data


def _lookup(catalogue: Dict[str, Any], key: str) -> Optional[str]:
    current: Any = catalogue
    for part in key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
    return current if isinstance(current, str) else None

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

# Global singleton instance for application-wide resource access
i18n = I18n(DEFAULT_LOCALE)
