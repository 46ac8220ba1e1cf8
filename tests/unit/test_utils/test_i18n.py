"""Unit tests for the i18n loader."""

import json
from pathlib import Path

import pytest

from quickactions.utils.i18n import I18n, available_locales, get_language, init_i18n, t


def _write(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def i18n_root(tmp_path: Path) -> Path:
    """Minimal translation tree with a shared file, English and German."""
    root = tmp_path / "i18n"
    _write(root / "emoji.json", {"emoji": {"bolt": "B"}})
    _write(
        root / "en" / "ui.json",
        {"ui": {"title": "Manage", "greeting": "Hello {name}", "only_en": "English only"}},
    )
    _write(root / "de" / "ui.json", {"ui": {"title": "Verwalten", "greeting": "Hallo {name}"}})
    return root


class TestI18n:
    """Tests for lookup, fallback and formatting."""

    def test_english_lookup(self, i18n_root: Path) -> None:
        i18n = I18n("en", i18n_root=i18n_root)
        assert i18n.t("ui.title") == "Manage"

    def test_shared_files_are_loaded(self, i18n_root: Path) -> None:
        assert I18n("de", i18n_root=i18n_root).t("emoji.bolt") == "B"

    def test_locale_overrides_english(self, i18n_root: Path) -> None:
        assert I18n("de", i18n_root=i18n_root).t("ui.title") == "Verwalten"

    def test_missing_locale_key_falls_back_to_english(self, i18n_root: Path) -> None:
        assert I18n("de", i18n_root=i18n_root).t("ui.only_en") == "English only"

    def test_unknown_locale_uses_english(self, i18n_root: Path) -> None:
        assert I18n("fr", i18n_root=i18n_root).t("ui.title") == "Manage"

    def test_missing_key_returns_bracketed_key(self, i18n_root: Path) -> None:
        i18n = I18n("en", i18n_root=i18n_root)
        assert i18n.t("ui.nope") == "[ui.nope]"
        assert i18n.t("ui.title.deeper") == "[ui.title.deeper]"

    def test_non_string_value_returns_bracketed_key(self, i18n_root: Path) -> None:
        assert I18n("en", i18n_root=i18n_root).t("ui") == "[ui]"

    def test_format_arguments(self, i18n_root: Path) -> None:
        assert I18n("de", i18n_root=i18n_root).t("ui.greeting", name="Ada") == "Hallo Ada"

    def test_bad_format_arguments_return_raw_string(self, i18n_root: Path) -> None:
        assert I18n("en", i18n_root=i18n_root).t("ui.greeting", other="x") == "Hello {name}"

    def test_malformed_file_is_skipped(self, i18n_root: Path) -> None:
        (i18n_root / "en" / "broken.json").write_text("{not json", encoding="utf-8")
        assert I18n("en", i18n_root=i18n_root).t("ui.title") == "Manage"


class TestGlobalInstance:
    """Tests for the module-level helpers and the bundled resources."""

    def test_init_sets_language(self) -> None:
        init_i18n("de")
        assert get_language() == "de"
        assert t("ui.quick_actions.title") == "Schnellaktionen verwalten"

    def test_bundled_english_strings(self) -> None:
        init_i18n("en")
        assert t("ui.quick_actions.title") == "Manage Quick Actions"
        assert t("ui.quick_actions.delete_confirm", name="Run App") == (
            'Are you sure you want to delete "Run App"? This cannot be undone.'
        )

    def test_bundled_locales(self) -> None:
        assert {"en", "de"} <= set(available_locales())
