"""
Configuration for Quick Actions Manager.

Holds paths, UI language, and display settings. Settings are read from
settings.json in the data directory. The app itself never writes it; an
embedding app may call Config.save(). The data directory can be
redirected with the QUICKACTIONS_DATA_DIR environment variable (a .env
file is honored).
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger("quickactions.config")


__all__ = ["Config", "config"]


@dataclass
class Config:
    """
    Central configuration handling for the application.
    Manages paths, language, and dialog/row display settings.
    """

    APP_DIR: Path = Path(__file__).parent.parent
    DATA_DIR: Path = APP_DIR / "data"
    SETTINGS_FILE: Path | None = None

    # Default values
    UI_LANGUAGE: str = "en"
    PROMPT_PREVIEW_CHARS: int = 60

    # Manager dialog geometry
    DIALOG_WIDTH: int = 420
    DIALOG_HEIGHT: int = 400

    def __post_init__(self):
        """Resolve the data directory and load persisted settings."""
        load_dotenv()
        env_dir = os.getenv("QUICKACTIONS_DATA_DIR")
        if env_dir:
            self.DATA_DIR = Path(env_dir)

        if self.SETTINGS_FILE is None:
            self.SETTINGS_FILE = self.DATA_DIR / "settings.json"

        self._load_settings()

    def _load_settings(self) -> None:
        """Load settings from JSON file."""
        if not self.SETTINGS_FILE.exists():
            return

        try:
            with open(self.SETTINGS_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load settings from %s: %s", self.SETTINGS_FILE, e)
            return

        if not isinstance(data, dict):
            logger.error("Ignoring settings in %s: expected a JSON object", self.SETTINGS_FILE)
            return

        self.UI_LANGUAGE = self._language_code(data.get("ui_language"), self.UI_LANGUAGE)
        self.PROMPT_PREVIEW_CHARS = self._positive_int(data.get("prompt_preview_chars"), self.PROMPT_PREVIEW_CHARS)
        self.DIALOG_WIDTH = self._positive_int(data.get("dialog_width"), self.DIALOG_WIDTH)
        self.DIALOG_HEIGHT = self._positive_int(data.get("dialog_height"), self.DIALOG_HEIGHT)

    @staticmethod
    def _language_code(value: object, default: str) -> str:
        """Returns ``value`` if it is a non-empty string, otherwise ``default``."""
        if not isinstance(value, str) or not value.strip():
            if value is not None:
                logger.warning("Ignoring invalid ui_language %r, using %r", value, default)
            return default
        return value.strip()

    @staticmethod
    def _positive_int(value: object, default: int) -> int:
        """Returns ``value`` if it is a positive int, otherwise ``default``."""
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            if value is not None:
                logger.warning("Ignoring invalid setting value %r, using %d", value, default)
            return default
        return value

    def save(self) -> None:
        """Save current configuration to JSON file."""
        data = {
            "ui_language": self.UI_LANGUAGE,
            "prompt_preview_chars": self.PROMPT_PREVIEW_CHARS,
            "dialog_width": self.DIALOG_WIDTH,
            "dialog_height": self.DIALOG_HEIGHT,
        }

        try:
            self.SETTINGS_FILE.parent.mkdir(parents=True, exist_ok=True)
            with open(self.SETTINGS_FILE, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error("Failed to save settings to %s: %s", self.SETTINGS_FILE, e)


# Global config instance
config = Config()
