"""
Internationalization (i18n) for Quick Actions Manager.

Translation strings live in JSON files under resources/i18n/:
1. Shared, language-agnostic files directly in resources/i18n/*.json (glyphs)
2. Per-locale files in resources/i18n/{locale}/*.json

English is always loaded as the fallback layer.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from quickactions.utils.paths import get_resources_dir

__all__ = ["I18n", "available_locales", "get_language", "init_i18n", "t"]

logger = logging.getLogger("quickactions.i18n")

FALLBACK_LOCALE = "en"


def _deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``update`` into a copy of ``base``."""
    result = base.copy()
    for key, value in update.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def available_locales() -> list[str]:
    """Lists the locale codes that ship translation files.

    Returns:
        Sorted locale directory names, e.g. ``["de", "en"]``.
    """
    root = get_resources_dir() / "i18n"
    if not root.is_dir():
        return [FALLBACK_LOCALE]
    return sorted(p.name for p in root.iterdir() if p.is_dir())


class I18n:
    """Holds the merged translation table for one locale.

    Attributes:
        locale: Active locale code.
        translations: Merged lookup table (shared + English + locale).
    """

    def __init__(self, locale: str = FALLBACK_LOCALE, i18n_root: Path | None = None) -> None:
        """Load translations for ``locale``.

        Args:
            locale: Locale code matching a directory in resources/i18n/.
            i18n_root: Override for the translation root (used by tests).
        """
        self.locale = locale
        self.i18n_root = i18n_root or get_resources_dir() / "i18n"
        self.translations: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        shared = self._read_directory(self.i18n_root)
        fallback = _deep_merge(shared, self._read_directory(self.i18n_root / FALLBACK_LOCALE))
        if self.locale == FALLBACK_LOCALE:
            self.translations = fallback
            return
        locale_dir = self.i18n_root / self.locale
        if not locale_dir.is_dir():
            logger.warning("No translations for locale '%s', using '%s'", self.locale, FALLBACK_LOCALE)
        self.translations = _deep_merge(fallback, self._read_directory(locale_dir))

    @staticmethod
    def _read_directory(directory: Path) -> dict[str, Any]:
        """Loads and deep-merges every ``*.json`` file in a directory.

        Unreadable or malformed files are logged and skipped.
        """
        merged: dict[str, Any] = {}
        if not directory.is_dir():
            return merged
        for file_path in sorted(directory.glob("*.json")):
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    merged = _deep_merge(merged, json.load(f))
            except (OSError, json.JSONDecodeError) as e:
                logger.error("Error loading i18n file %s: %s", file_path.name, e)
        return merged

    def t(self, key: str, **kwargs: Any) -> str:
        """Retrieve a translated string by dot-notation key.

        Args:
            key: Dot-separated key path (e.g. 'ui.manager.title').
            **kwargs: Format arguments for string interpolation.

        Returns:
            Translated string, or '[key]' if not found.
        """
        value: Any = self.translations
        for part in key.split("."):
            if not isinstance(value, dict):
                return f"[{key}]"
            value = value.get(part)

        if not isinstance(value, str):
            return f"[{key}]"

        if kwargs:
            try:
                return value.format(**kwargs)
            except (ValueError, KeyError, IndexError):
                return value
        return value


_i18n_instance: I18n | None = None


def init_i18n(locale: str = FALLBACK_LOCALE) -> I18n:
    """Initialize the global i18n instance.

    Args:
        locale: The locale code to use.

    Returns:
        The initialized I18n instance.
    """
    global _i18n_instance
    _i18n_instance = I18n(locale)
    return _i18n_instance


def get_language() -> str:
    """Return the locale code of the global i18n instance."""
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.locale


def t(key: str, **kwargs: Any) -> str:
    """Retrieve a translated string using the global i18n instance.

    Args:
        key: Dot-separated key path.
        **kwargs: Format arguments for string interpolation.

    Returns:
        Translated string, or '[key]' if not found.
    """
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.t(key, **kwargs)
