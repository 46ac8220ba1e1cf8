"""Unit tests for Config settings persistence."""

import json
from pathlib import Path

import pytest

from quickactions.config import Config


@pytest.fixture(autouse=True)
def no_data_dir_env(monkeypatch) -> None:
    """Keep a developer's QUICKACTIONS_DATA_DIR out of these tests."""
    monkeypatch.delenv("QUICKACTIONS_DATA_DIR", raising=False)


class TestConfig:
    """Tests for loading and saving settings.json."""

    def test_defaults_without_settings_file(self, tmp_path: Path) -> None:
        cfg = Config(DATA_DIR=tmp_path)
        assert cfg.SETTINGS_FILE == tmp_path / "settings.json"
        assert cfg.UI_LANGUAGE == "en"
        assert cfg.PROMPT_PREVIEW_CHARS == 60
        assert (cfg.DIALOG_WIDTH, cfg.DIALOG_HEIGHT) == (420, 400)

    def test_save_and_reload(self, tmp_path: Path) -> None:
        cfg = Config(DATA_DIR=tmp_path / "nested")
        cfg.UI_LANGUAGE = "de"
        cfg.PROMPT_PREVIEW_CHARS = 30
        cfg.save()

        reloaded = Config(DATA_DIR=tmp_path / "nested")
        assert reloaded.UI_LANGUAGE == "de"
        assert reloaded.PROMPT_PREVIEW_CHARS == 30

    def test_invalid_numbers_fall_back_to_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "settings.json").write_text(
            json.dumps({"prompt_preview_chars": -5, "dialog_width": "wide", "dialog_height": True}),
            encoding="utf-8",
        )
        cfg = Config(DATA_DIR=tmp_path)
        assert cfg.PROMPT_PREVIEW_CHARS == 60
        assert cfg.DIALOG_WIDTH == 420
        assert cfg.DIALOG_HEIGHT == 400

    def test_corrupt_settings_file_keeps_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "settings.json").write_text("{oops", encoding="utf-8")
        cfg = Config(DATA_DIR=tmp_path)
        assert cfg.UI_LANGUAGE == "en"

    def test_env_var_overrides_data_dir(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("QUICKACTIONS_DATA_DIR", str(tmp_path / "env"))
        cfg = Config()
        assert cfg.DATA_DIR == tmp_path / "env"
        assert cfg.SETTINGS_FILE == tmp_path / "env" / "settings.json"

    def test_non_object_settings_file_keeps_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "settings.json").write_text("[1, 2]", encoding="utf-8")
        cfg = Config(DATA_DIR=tmp_path)
        assert cfg.UI_LANGUAGE == "en"
        assert cfg.PROMPT_PREVIEW_CHARS == 60

    @pytest.mark.parametrize("language", [5, "", "   ", ["de"]])
    def test_invalid_language_falls_back_to_default(self, tmp_path: Path, language) -> None:
        (tmp_path / "settings.json").write_text(json.dumps({"ui_language": language}), encoding="utf-8")
        cfg = Config(DATA_DIR=tmp_path)
        assert cfg.UI_LANGUAGE == "en"
