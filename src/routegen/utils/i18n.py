from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides a singleton manager for the CLI messages. Locale files are nested
JSON documents addressed with dot-notation keys; unresolved keys fall back
to the key itself.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALES_REL_PATH = os.path.join("..", "interface", "locales")


class I18n:
    """
    Resource manager for locale-specific strings.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    def load_locale(self, locale: str) -> None:
        """
        Load a translation dictionary, keeping the previous one on failure.

        Args:
            locale: Locale identifier ('en', 'zh').
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            logger.warning(f"I18n: locale resource missing at '{file_path}'.")
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: cannot read locale file {file_path}: {e}")
            return

        self._locale = locale
        self.is_loaded = True
        logger.debug(f"I18n: loaded locale dictionary: {locale}")

    def t(self, key: str, **kwargs: Any) -> str:
        """
        Resolve and format a translation string.

        Args:
            key: Dot-notation identifier (e.g. 'cli.status.created').
            **kwargs: Interpolation variables.

        Returns:
            str: Translated text, or the key itself if it cannot be resolved.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            if not isinstance(current_val, dict):
                return key
            current_val = current_val.get(k)

        if not isinstance(current_val, str):
            return key

        try:
            return current_val.format(**kwargs) if kwargs else current_val
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: formatting error for '{key}': {e}")
            return current_val


i18n = I18n(DEFAULT_LOCALE)
