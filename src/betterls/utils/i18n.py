from __future__ import annotations

"""
Internationalization (i18n) Utility.

Resolves user-facing strings from JSON locale files with dot-notation
keys and optional variable interpolation.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")


class I18n:
    """Lookup service over one loaded locale dictionary."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self.load_locale(locale)

    def load_locale(self, locale: str) -> None:
        """
        Load the translation dictionary for a locale.

        A missing or malformed file leaves the manager empty; lookups then
        return their keys.

        Args:
            locale: ISO identifier for the target language.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: Locale resource missing at '{file_path}'.")
            self._translations = {}
            self.is_loaded = False
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Invalid locale file {file_path}: {e}")
            self._translations = {}
            self.is_loaded = False
            return

        self._locale = locale
        self.is_loaded = True

    def t(self, key: str, **kwargs: Any) -> str:
        """
        Resolve a dot-notation key and format it with kwargs.

        Args:
            key: Hierarchical identifier (e.g. 'cli.errors.path_not_exist').
            **kwargs: Values interpolated into the string.

        Returns:
            str: The translated string, or the key itself if unresolved.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            if not isinstance(current_val, dict):
                return key
            current_val = current_val.get(k)

        if not isinstance(current_val, str):
            return key

        if not kwargs:
            return current_val
        try:
            return current_val.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Formatting error for '{key}': {e}")
            return current_val


i18n = I18n(DEFAULT_LOCALE)
